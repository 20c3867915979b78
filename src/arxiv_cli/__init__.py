"""
arXiv paper downloader

Queries the arXiv API by category and/or search query and saves:
- metadata (JSONL, one object per paper)
- PDFs
- plaintext summaries
"""

__version__ = "1.0.0"

from .config import OutputOptions
from .exceptions import (
    ArxivCliError,
    ValidationError,
    NetworkError,
    UpstreamError,
    ParseError,
    StorageError,
)
from .pipeline import download_arxiv_papers
