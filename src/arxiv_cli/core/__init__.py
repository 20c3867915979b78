"""
Core modules for paper storage
"""

from .utils import sanitize_filename, ensure_dir
from .session import SessionManager
from .paper import Paper
from .downloader import PDFDownloader
from .metadata import MetadataManager
