"""
Configuration helpers for the address book storage layer.

Settings are read from environment variables (data file locations, log
level/format) so that repositories/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import logging
import os

LOG_FORMATS = {"console", "json"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    address_book_file: Path
    expenditure_tracker_file: Path
    user_prefs_file: Path
    log_level: str
    log_format: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip())

    def _level(value: str | None, default: str = "INFO") -> str:
        name = (value or "").strip().upper()
        if isinstance(logging.getLevelName(name), int):
            return name
        return default

    def _format(value: str | None, default: str = "console") -> str:
        name = (value or "").strip().lower()
        return name if name in LOG_FORMATS else default

    data_dir = _path(os.getenv("DATA_DIR"), Path("data"))
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        address_book_file=_path(os.getenv("ADDRESS_BOOK_FILE"), data_dir / "addressbook.xml"),
        expenditure_tracker_file=_path(
            os.getenv("EXPENDITURE_TRACKER_FILE"), data_dir / "expendituretracker.xml"
        ),
        user_prefs_file=_path(os.getenv("USER_PREFS_FILE"), Path("preferences.json")),
        log_level=_level(os.getenv("LOG_LEVEL")),
        log_format=_format(os.getenv("LOG_FORMAT")),
    )
