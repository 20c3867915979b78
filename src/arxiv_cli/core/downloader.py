"""
PDF downloader
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from .paper import Paper
from .session import SessionManager
from .utils import with_suffix
from ..config import CHUNK_SIZE, REQUEST_TIMEOUT
from ..exceptions import NetworkError, StorageError, UpstreamError

logger = logging.getLogger(__name__)


class PDFDownloader:
    """Downloads a paper's PDF to disk"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize downloader

        Args:
            session: Optional requests session to use
            timeout: Request timeout in seconds
        """
        self.session = session or SessionManager().create_session()
        self.timeout = timeout

    def fetch_pdf(self, paper: Paper, out_path: Path) -> Path:
        """
        Download the PDF of a paper

        The body is streamed to a temporary file next to the target and
        renamed into place once complete. The destination directory must
        already exist.

        Args:
            paper: Paper whose pdf_url is fetched
            out_path: Target path; '.pdf' is appended if missing

        Returns:
            Path of the written file

        Raises:
            NetworkError: On missing URL, connection failure or timeout
            UpstreamError: On a non-200 response
            StorageError: If the file cannot be written
        """
        if not paper.pdf_url:
            raise NetworkError(f"No PDF link for paper {paper.id or paper.title!r}")

        save_path = with_suffix(out_path, '.pdf')
        temp_path = save_path.with_name(save_path.name + '.tmp')

        try:
            response = self.session.get(
                paper.pdf_url,
                timeout=self.timeout,
                stream=True,
                allow_redirects=True,
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Timed out fetching {paper.pdf_url}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch PDF {paper.pdf_url}: {e}") from e

        try:
            if response.status_code != 200:
                raise UpstreamError(
                    f"Failed to fetch PDF: HTTP {response.status_code}",
                    status_code=response.status_code,
                    url=paper.pdf_url,
                )

            total_size = 0
            try:
                with open(temp_path, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
                            total_size += len(chunk)
                temp_path.replace(save_path)
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"Connection dropped while fetching {paper.pdf_url}: {e}") from e
            except OSError as e:
                raise StorageError(f"Failed to write {save_path}: {e}") from e
            finally:
                if temp_path.exists():
                    temp_path.unlink()
        finally:
            response.close()

        logger.debug(f"Wrote {total_size} bytes to {save_path}")
        return save_path

    def close(self) -> None:
        self.session.close()
