import logging
from unittest.mock import MagicMock

import pytest
import requests

FEED_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<feed xmlns="http://www.w3.org/2005/Atom" '
    'xmlns:arxiv="http://arxiv.org/schemas/atom" '
    'xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">\n'
    '  <title type="html">ArXiv Query: search_query=cat:cs.CL</title>\n'
    '  <opensearch:totalResults>2</opensearch:totalResults>\n'
)

ENTRY_ONE = """
  <entry>
    <id>http://arxiv.org/abs/2410.01234v1</id>
    <updated>2024-10-02T17:59:58Z</updated>
    <published>2024-10-01T17:59:58Z</published>
    <title>Graph Retrieval:
      A Survey</title>
    <summary>  We survey graph-based retrieval.
    It works.  </summary>
    <author><name>Ada Lovelace</name></author>
    <author><name>Alan Turing</name></author>
    <arxiv:comment>12 pages, 3 figures</arxiv:comment>
    <link href="http://arxiv.org/abs/2410.01234v1" rel="alternate" type="text/html"/>
    <link title="pdf" href="httpss://arxiv.org/pdf/2410.01234v1" rel="related" type="application/pdf"/>
    <arxiv:primary_category term="cs.CL" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.CL" scheme="http://arxiv.org/schemas/atom"/>
    <category term="cs.IR" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
"""

ENTRY_TWO = """
  <entry>
    <id>http://arxiv.org/abs/2410.05678v2</id>
    <updated>2024-10-03T10:00:00Z</updated>
    <published>2024-09-30T10:00:00Z</published>
    <title>What is 1/2: A Study?</title>
    <summary>Halves.</summary>
    <author><name>Grace Hopper</name></author>
    <link href="https://arxiv.org/abs/2410.05678v2" rel="alternate" type="text/html"/>
    <link href="https://arxiv.org/pdf/2410.05678v2" rel="related" type="application/pdf"/>
    <category term="cs.CL" scheme="http://arxiv.org/schemas/atom"/>
  </entry>
"""


def make_feed(*entries: str) -> bytes:
    return (FEED_HEADER + ''.join(entries) + '</feed>\n').encode('utf-8')


def mock_response(status_code: int = 200, content: bytes = b'', url: str = '') -> MagicMock:
    """Return a mock requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.url = url
    response.iter_content.return_value = [content[i:i + 4] for i in range(0, len(content), 4)]
    return response


@pytest.fixture(autouse=True)
def restore_logging():
    """cli() reconfigures the root logger; undo it after each test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def feed() -> bytes:
    return make_feed(ENTRY_ONE, ENTRY_TWO)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)
