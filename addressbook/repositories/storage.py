"""Storage contracts implemented by the persistence adapters."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from addressbook.domain.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.domain.expenditure_tracker import ExpenditureTracker, ReadOnlyExpenditureTracker
from addressbook.domain.user_prefs import UserPrefs


class AddressBookStorage(Protocol):
    @property
    def address_book_file_path(self) -> Path:
        ...

    @property
    def expenditure_tracker_file_path(self) -> Path:
        ...

    def read_address_book(self, file_path: Optional[Path] = None) -> Optional[AddressBook]:
        """
        Return the stored address book, or None when the file does not exist.

        Raises DataConversionError when the stored data is not in the expected format.
        """
        ...

    def save_address_book(self, address_book: ReadOnlyAddressBook, file_path: Optional[Path] = None) -> None:
        ...

    def read_expenditure_tracker(self, file_path: Optional[Path] = None) -> Optional[ExpenditureTracker]:
        ...

    def save_expenditure_tracker(
        self, tracker: ReadOnlyExpenditureTracker, file_path: Optional[Path] = None
    ) -> None:
        ...


class UserPrefsStorage(Protocol):
    @property
    def user_prefs_file_path(self) -> Path:
        ...

    def read_user_prefs(self, file_path: Optional[Path] = None) -> Optional[UserPrefs]:
        ...

    def save_user_prefs(self, prefs: UserPrefs, file_path: Optional[Path] = None) -> None:
        ...
