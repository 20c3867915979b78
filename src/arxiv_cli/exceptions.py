"""
Error types raised by the download pipeline
"""

from typing import Optional


class ArxivCliError(Exception):
    """Base class for all arxiv-cli errors"""

    def __init__(self, message: str):
        super().__init__(message)
        # Filled in by the pipeline when the failure belongs to one paper
        self.paper_title: Optional[str] = None
        self.operation: Optional[str] = None

    def annotate(self, paper_title: str, operation: str) -> "ArxivCliError":
        """Attach the paper and operation that failed"""
        self.paper_title = paper_title
        self.operation = operation
        return self


class ValidationError(ArxivCliError):
    """No usable search criteria were given"""


class NetworkError(ArxivCliError):
    """Request could not be sent, timed out, or the connection dropped"""


class UpstreamError(ArxivCliError):
    """Remote server answered with a non-success status"""

    def __init__(self, message: str, status_code: int, url: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParseError(ArxivCliError):
    """Feed document is malformed or not an Atom feed"""


class StorageError(ArxivCliError):
    """File or directory could not be created or written"""
