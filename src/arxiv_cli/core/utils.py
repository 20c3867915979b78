"""
Utility functions for file handling
"""

import re
from pathlib import Path

from ..exceptions import StorageError

_RESERVED_CHARS = re.compile(r'[<>:"/\\|?*]')


def sanitize_filename(filename: str, max_length: int = 200) -> str:
    """
    Make a paper title safe to use as a file name

    Reserved characters are replaced one-for-one with '_', surrounding
    whitespace and trailing dots are stripped, and the result is cut to
    max_length. Length is counted in characters (code points), never bytes,
    so multi-byte characters are not split.

    Args:
        filename: Original filename
        max_length: Maximum length of filename

    Returns:
        Sanitized filename
    """
    filename = _RESERVED_CHARS.sub('_', filename)
    filename = filename.strip().rstrip('.')

    if len(filename) > max_length:
        filename = filename[:max_length]

    return filename


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists, create if not

    Args:
        path: Directory path

    Returns:
        The path

    Raises:
        StorageError: If the directory cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create directory {path}: {e}") from e
    return path


def with_suffix(path: Path, suffix: str) -> Path:
    """Append suffix unless the path already ends with it"""
    path = Path(path)
    if path.name.endswith(suffix):
        return path
    return path.with_name(path.name + suffix)
