"""User preferences persisted next to the data files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from addressbook.core.files import is_valid_path

DEFAULT_WINDOW_WIDTH = 740
DEFAULT_WINDOW_HEIGHT = 600

# JSON key -> attribute, camelCase throughout the preferences document
GUI_SETTINGS_KEYS = {
    "windowWidth": "window_width",
    "windowHeight": "window_height",
    "windowX": "window_x",
    "windowY": "window_y",
}
FILE_PATH_KEYS = {
    "addressBookFilePath": "address_book_file_path",
    "expenditureTrackerFilePath": "expenditure_tracker_file_path",
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_coordinate(value: Any) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


@dataclass
class GuiSettings:
    window_width: float = DEFAULT_WINDOW_WIDTH
    window_height: float = DEFAULT_WINDOW_HEIGHT
    window_x: Optional[int] = None
    window_y: Optional[int] = None

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in GUI_SETTINGS_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> "GuiSettings":
        """Width/height must be numbers, x/y integers or null. Raises ValueError otherwise."""
        if not isinstance(data, dict):
            raise ValueError("guiSettings must be a JSON object")
        unknown = set(data) - set(GUI_SETTINGS_KEYS)
        if unknown:
            raise ValueError(f"Unknown guiSettings keys: {', '.join(sorted(unknown))}")
        settings = cls()
        for key in ("windowWidth", "windowHeight"):
            if key in data:
                if not _is_number(data[key]):
                    raise ValueError(f"guiSettings.{key} must be a number")
                setattr(settings, GUI_SETTINGS_KEYS[key], data[key])
        for key in ("windowX", "windowY"):
            if key in data:
                if not _is_coordinate(data[key]):
                    raise ValueError(f"guiSettings.{key} must be an integer or null")
                setattr(settings, GUI_SETTINGS_KEYS[key], data[key])
        return settings


@dataclass
class UserPrefs:
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    address_book_file_path: Path = Path("data") / "addressbook.xml"
    expenditure_tracker_file_path: Path = Path("data") / "expendituretracker.xml"

    def to_dict(self) -> dict:
        data: dict = {"guiSettings": self.gui_settings.to_dict()}
        for key, attr in FILE_PATH_KEYS.items():
            data[key] = str(getattr(self, attr))
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "UserPrefs":
        """
        Build preferences from decoded JSON. Missing keys keep their defaults;
        a value of the wrong type raises ValueError.
        """
        if not isinstance(data, dict):
            raise ValueError("User preferences must be a JSON object")
        prefs = cls()
        gui = data.get("guiSettings")
        if gui is not None:
            prefs.gui_settings = GuiSettings.from_dict(gui)
        for key, attr in FILE_PATH_KEYS.items():
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str) or not is_valid_path(value):
                raise ValueError(f"{key} must be a valid file path")
            setattr(prefs, attr, Path(value))
        return prefs
