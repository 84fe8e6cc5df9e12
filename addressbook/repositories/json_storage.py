"""
JSON-based persistence adapter for user preferences.

Preferences are a small JSON object kept next to the application; the record
collections themselves live in XML files (see xml_storage).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json

from addressbook.core.exceptions import DataConversionError
from addressbook.core.files import create_if_missing, is_file_exists, read_from_file, write_to_file
from addressbook.core.logging import get_logger
from addressbook.domain.user_prefs import UserPrefs

logger = get_logger(__name__)


class JsonUserPrefsStorage:
    """Reads and writes UserPrefs as a JSON file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def user_prefs_file_path(self) -> Path:
        return self._file_path

    def read_user_prefs(self, file_path: Optional[Path] = None) -> Optional[UserPrefs]:
        """
        Return the stored preferences, or None when the file does not exist.
        Raises DataConversionError when the file is not valid preferences JSON.
        """
        path = Path(file_path) if file_path is not None else self._file_path
        if not is_file_exists(path):
            logger.info("user_prefs_file_not_found", path=str(path))
            return None
        try:
            return UserPrefs.from_dict(json.loads(read_from_file(path)))
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            logger.warning("user_prefs_unreadable", path=str(path), error=str(exc))
            raise DataConversionError(exc) from exc

    def save_user_prefs(self, prefs: UserPrefs, file_path: Optional[Path] = None) -> None:
        path = Path(file_path) if file_path is not None else self._file_path
        create_if_missing(path)
        write_to_file(path, json.dumps(prefs.to_dict(), ensure_ascii=False, indent=2))
