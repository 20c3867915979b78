"""
Metadata and summary storage
"""

import logging
from pathlib import Path
from typing import List, Optional

from .paper import Paper
from .utils import ensure_dir, with_suffix
from ..config import JSON_FILE
from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class MetadataManager:
    """Writes the JSONL metadata file and per-paper summary files"""

    def __init__(self, metadata_file: Path = Path(JSON_FILE)):
        """
        Initialize metadata manager

        Args:
            metadata_file: Path of the JSONL file (overwritten on save)
        """
        self.metadata_file = Path(metadata_file)

    def save(self, lines: List[str]) -> Optional[Path]:
        """
        Write metadata lines, one JSON object per line

        Args:
            lines: Serialized papers in feed order

        Returns:
            Path written, or None if there was nothing to write

        Raises:
            StorageError: If the file cannot be written
        """
        if not lines:
            return None

        ensure_dir(self.metadata_file.parent)
        try:
            with open(self.metadata_file, 'w', encoding='utf-8', newline='') as f:
                f.write('\n'.join(lines) + '\n')
        except OSError as e:
            raise StorageError(f"Failed to write metadata file {self.metadata_file}: {e}") from e

        logger.info(f"Metadata saved: {len(lines)} papers -> {self.metadata_file}")
        return self.metadata_file

    @staticmethod
    def write_summary(paper: Paper, out_path: Path) -> Path:
        """
        Write a paper's summary verbatim

        Args:
            paper: Paper to write
            out_path: Target path; '.txt' is appended if missing

        Returns:
            Path of the written file

        Raises:
            StorageError: If the file cannot be written
        """
        save_path = with_suffix(out_path, '.txt')
        try:
            with open(save_path, 'w', encoding='utf-8', newline='') as f:
                f.write(paper.summary)
        except OSError as e:
            raise StorageError(f"Failed to write summary {save_path}: {e}") from e
        return save_path
