"""
Filesystem helpers used by the storage adapters.
"""

from __future__ import annotations

from pathlib import Path

CHARSET = "utf-8"


def is_file_exists(path: Path) -> bool:
    return path.exists() and path.is_file()


def is_valid_path(path: str | None) -> bool:
    """Return True when the string can be turned into a usable Path."""
    if not path or not path.strip():
        return False
    return "\x00" not in path


def create_parent_dirs(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def create_if_missing(path: Path) -> None:
    """Create an empty file (and its parent directories) unless it already exists."""
    if is_file_exists(path):
        return
    create_parent_dirs(path)
    path.touch()


def read_from_file(path: Path) -> str:
    return path.read_text(encoding=CHARSET)


def write_to_file(path: Path, content: str) -> None:
    """Write text to an existing file, replacing its content."""
    path.write_text(content, encoding=CHARSET)
