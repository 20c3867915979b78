"""
arXiv API client and Atom feed parser
"""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

import requests

from ..config import API_BASE, REQUEST_TIMEOUT
from ..core.paper import Paper
from ..core.session import SessionManager
from ..exceptions import NetworkError, ParseError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

ATOM_NS = 'http://www.w3.org/2005/Atom'
ARXIV_NS = 'http://arxiv.org/schemas/atom'
NS = {'atom': ATOM_NS, 'arxiv': ARXIV_NS}


def build_search_query(
    category: Optional[str] = None,
    query: Optional[str] = None,
) -> str:
    """
    Build an arXiv search_query from a category and/or free-text query

    Args:
        category: arXiv category (e.g., "cs.CL")
        query: Free-text query (e.g., "graphrag")

    Returns:
        Query string in the arXiv query language

    Raises:
        ValidationError: If neither category nor query is given
    """
    category = (category or '').strip()
    query = (query or '').strip()

    if category and query:
        return f'cat:{category} AND {query}'
    if category:
        return f'cat:{category}'
    if query:
        return query

    raise ValidationError("Either a category or a query must be provided")


def _fix_href(href: str) -> str:
    # The API has been seen emitting "httpss://" in link hrefs
    return href.replace('httpss', 'https')


def _text(entry: ET.Element, path: str) -> str:
    elem = entry.find(path, NS)
    if elem is None or elem.text is None:
        return ''
    return elem.text.strip()


def _parse_entry(entry: ET.Element) -> Paper:
    """
    Map one Atom entry to a Paper

    Args:
        entry: <entry> element

    Returns:
        Paper

    Raises:
        ParseError: If the entry has no title
    """
    if entry.find('atom:title', NS) is None:
        raise ParseError("Feed entry has no <title> element")

    authors = [
        (name.text or '').strip()
        for name in entry.findall('atom:author/atom:name', NS)
    ]
    categories = [
        cat.get('term', '')
        for cat in entry.findall('atom:category', NS)
    ]

    html_url = ''
    pdf_url = ''
    typed_pdf_url = ''
    for link in entry.findall('atom:link', NS):
        href = link.get('href', '')
        if link.get('rel') == 'alternate' and link.get('type') == 'text/html':
            html_url = _fix_href(href)
        elif link.get('title') == 'pdf':
            pdf_url = _fix_href(href)
        elif link.get('type') == 'application/pdf' and not typed_pdf_url:
            typed_pdf_url = _fix_href(href)

    comment = _text(entry, 'arxiv:comment') or None

    return Paper(
        id=_text(entry, 'atom:id'),
        updated=_text(entry, 'atom:updated'),
        published=_text(entry, 'atom:published'),
        title=_text(entry, 'atom:title'),
        summary=_text(entry, 'atom:summary'),
        authors=authors,
        categories=categories,
        pdf_url=pdf_url or typed_pdf_url,
        html_url=html_url,
        comment=comment,
    )


def parse_feed(content: bytes) -> List[Paper]:
    """
    Parse an arXiv Atom feed into papers, in document order

    Args:
        content: Raw feed bytes

    Returns:
        List of Paper (empty when the feed has no entries)

    Raises:
        ParseError: If the document is malformed or not an Atom feed
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ParseError(f"Malformed feed: {e}") from e

    if root.tag != f'{{{ATOM_NS}}}feed':
        raise ParseError(f"Unexpected root element: {root.tag}")

    return [_parse_entry(entry) for entry in root.findall('atom:entry', NS)]


class ArxivClient:
    """Client for arXiv API"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
        api_base: str = API_BASE,
    ):
        """
        Initialize client

        Args:
            session: Optional requests session to use
            timeout: Request timeout in seconds
            api_base: API endpoint
        """
        self.session = session or SessionManager().create_session()
        self.timeout = timeout
        self.api_base = api_base

    def fetch_feed(self, search_query: str, max_results: int) -> bytes:
        """
        Query the API and return the raw feed

        Args:
            search_query: Query in the arXiv query language
            max_results: Maximum number of entries to return

        Returns:
            Raw response body

        Raises:
            NetworkError: On connection failure or timeout
            UpstreamError: On a non-200 response
        """
        params = {
            'search_query': search_query,
            'start': 0,
            'max_results': max_results,
            'sortBy': 'submittedDate',
            'sortOrder': 'descending',
        }

        logger.debug(f"GET {self.api_base} {params}")
        try:
            response = self.session.get(self.api_base, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"arXiv API request timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch from arXiv API: {e}") from e

        if response.status_code != 200:
            raise UpstreamError(
                f"arXiv API returned HTTP {response.status_code}",
                status_code=response.status_code,
                url=response.url,
            )

        return response.content

    def search(self, search_query: str, max_results: int) -> List[Paper]:
        """
        Fetch and parse papers matching a query, newest first

        Args:
            search_query: Query in the arXiv query language
            max_results: Maximum number of papers

        Returns:
            List of Paper
        """
        return parse_feed(self.fetch_feed(search_query, max_results))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ArxivClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
