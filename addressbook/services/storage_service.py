"""
Storage use cases: one entry point over the XML data stores and the JSON
preference store, plus the start-up loaders that fall back to defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from addressbook.core.config import Settings, get_settings
from addressbook.core.exceptions import DataConversionError, DataSavingError
from addressbook.core.logging import get_logger
from addressbook.domain.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.domain.expenditure_tracker import ExpenditureTracker, ReadOnlyExpenditureTracker
from addressbook.domain.sample_data import sample_address_book, sample_expenditure_tracker
from addressbook.domain.user_prefs import UserPrefs
from addressbook.repositories.json_storage import JsonUserPrefsStorage
from addressbook.repositories.storage import AddressBookStorage, UserPrefsStorage
from addressbook.repositories.xml_storage import XmlAddressBookStorage

logger = get_logger(__name__)


class StorageManager:
    """Manages storage of address book, expenditure tracker and user preference data."""

    def __init__(self, address_book_storage: AddressBookStorage, user_prefs_storage: UserPrefsStorage) -> None:
        self.address_book_storage = address_book_storage
        self.user_prefs_storage = user_prefs_storage

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StorageManager":
        settings = settings or get_settings()
        return cls(
            XmlAddressBookStorage(settings.address_book_file, settings.expenditure_tracker_file),
            JsonUserPrefsStorage(settings.user_prefs_file),
        )

    # ------------------------- user prefs -------------------------

    @property
    def user_prefs_file_path(self) -> Path:
        return self.user_prefs_storage.user_prefs_file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        return self.user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self.user_prefs_storage.save_user_prefs(prefs)

    def load_user_prefs_or_default(self) -> UserPrefs:
        """
        Read preferences, falling back to defaults when the file is missing or
        unreadable. The result is written back so the file is always current.
        """
        path = self.user_prefs_file_path
        try:
            prefs = self.read_user_prefs() or UserPrefs()
        except DataConversionError:
            logger.warning("user_prefs_invalid_format", path=str(path), action="using_defaults")
            prefs = UserPrefs()
        try:
            self.save_user_prefs(prefs)
        except OSError as exc:
            logger.warning("user_prefs_save_failed", path=str(path), error=str(exc))
        return prefs

    # ------------------------ address book ------------------------

    @property
    def address_book_file_path(self) -> Path:
        return self.address_book_storage.address_book_file_path

    def read_address_book(self, file_path: Optional[Path] = None) -> Optional[AddressBook]:
        path = file_path or self.address_book_file_path
        logger.debug("reading_address_book", path=str(path))
        return self.address_book_storage.read_address_book(path)

    def save_address_book(self, address_book: ReadOnlyAddressBook, file_path: Optional[Path] = None) -> None:
        path = file_path or self.address_book_file_path
        logger.debug("saving_address_book", path=str(path))
        self.address_book_storage.save_address_book(address_book, path)

    def handle_address_book_changed(self, address_book: ReadOnlyAddressBook) -> None:
        """Persist a changed address book. Raises DataSavingError when the write fails."""
        logger.info("address_book_changed", persons=len(address_book.persons), action="saving")
        try:
            self.save_address_book(address_book)
        except OSError as exc:
            raise DataSavingError(f"Could not save address book: {exc}") from exc

    def load_address_book_or_default(self) -> AddressBook:
        """
        Load the address book for start-up: sample data when no file exists,
        an empty book when the file is unreadable.
        """
        path = self.address_book_file_path
        try:
            address_book = self.read_address_book()
        except DataConversionError:
            logger.warning("address_book_invalid_format", path=str(path), action="starting_empty")
            return AddressBook()
        except OSError as exc:
            logger.warning("address_book_read_failed", path=str(path), error=str(exc), action="starting_empty")
            return AddressBook()
        if address_book is None:
            logger.info("address_book_missing", path=str(path), action="using_sample_data")
            return sample_address_book()
        return address_book

    # --------------------- expenditure tracker ---------------------

    @property
    def expenditure_tracker_file_path(self) -> Path:
        return self.address_book_storage.expenditure_tracker_file_path

    def read_expenditure_tracker(self, file_path: Optional[Path] = None) -> Optional[ExpenditureTracker]:
        path = file_path or self.expenditure_tracker_file_path
        logger.debug("reading_expenditure_tracker", path=str(path))
        return self.address_book_storage.read_expenditure_tracker(path)

    def save_expenditure_tracker(
        self, tracker: ReadOnlyExpenditureTracker, file_path: Optional[Path] = None
    ) -> None:
        path = file_path or self.expenditure_tracker_file_path
        logger.debug("saving_expenditure_tracker", path=str(path))
        self.address_book_storage.save_expenditure_tracker(tracker, path)

    def handle_expenditure_tracker_changed(self, tracker: ReadOnlyExpenditureTracker) -> None:
        logger.info("expenditure_tracker_changed", expenditures=len(tracker.expenditures), action="saving")
        try:
            self.save_expenditure_tracker(tracker)
        except OSError as exc:
            raise DataSavingError(f"Could not save expenditure tracker: {exc}") from exc

    def load_expenditure_tracker_or_default(self) -> ExpenditureTracker:
        path = self.expenditure_tracker_file_path
        try:
            tracker = self.read_expenditure_tracker()
        except DataConversionError:
            logger.warning("expenditure_tracker_invalid_format", path=str(path), action="starting_empty")
            return ExpenditureTracker()
        except OSError as exc:
            logger.warning(
                "expenditure_tracker_read_failed", path=str(path), error=str(exc), action="starting_empty"
            )
            return ExpenditureTracker()
        if tracker is None:
            logger.info("expenditure_tracker_missing", path=str(path), action="using_sample_data")
            return sample_expenditure_tracker()
        return tracker
