"""
Global configuration constants
"""

from dataclasses import dataclass
from pathlib import Path

from . import __version__

# arXiv API
API_BASE = "http://export.arxiv.org/api/query"
REQUEST_TIMEOUT = 30  # seconds, applied to every HTTP call

# Default settings
DEFAULT_LIMIT = 5

# Output locations (relative to the working directory unless overridden)
JSON_FILE = "metadata.jsonl"
PDF_DIRECTORY = "pdfs"
TEXT_DIRECTORY = "texts"

# User-Agent
DEFAULT_USER_AGENT = f"arxiv-cli/{__version__}"

# Streaming download chunk size
CHUNK_SIZE = 8192


@dataclass(frozen=True)
class OutputOptions:
    """Which per-paper outputs to write, and where"""
    save_metadata: bool = True
    save_pdf: bool = False
    save_summary: bool = False
    metadata_file: Path = Path(JSON_FILE)
    pdf_dir: Path = Path(PDF_DIRECTORY)
    text_dir: Path = Path(TEXT_DIRECTORY)

    @classmethod
    def under(cls, base_dir: Path, **switches) -> "OutputOptions":
        """
        Build options with all output paths rooted at base_dir

        Args:
            base_dir: Directory that receives metadata, pdfs/ and texts/
            **switches: save_metadata / save_pdf / save_summary

        Returns:
            OutputOptions
        """
        base_dir = Path(base_dir)
        return cls(
            metadata_file=base_dir / JSON_FILE,
            pdf_dir=base_dir / PDF_DIRECTORY,
            text_dir=base_dir / TEXT_DIRECTORY,
            **switches,
        )

    @property
    def fetch_only(self) -> bool:
        """True when no output is selected"""
        return not (self.save_metadata or self.save_pdf or self.save_summary)
