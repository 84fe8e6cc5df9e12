"""
XML persistence adapter for the address book and the expenditure tracker.

Reads go file -> XML document -> serializable form -> domain model; saves
go the other way. A missing file is reported as ``None``; anything that does
not convert into a valid model surfaces as DataConversionError.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from addressbook.core.exceptions import DataConversionError, IllegalValueError
from addressbook.core.files import create_if_missing, is_file_exists
from addressbook.core.logging import get_logger
from addressbook.domain.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.domain.expenditure_tracker import ExpenditureTracker, ReadOnlyExpenditureTracker

from .xml_file_storage import (
    load_address_book_from_save_file,
    load_expenditure_tracker_from_save_file,
    save_address_book_to_file,
    save_expenditure_tracker_to_file,
)
from .xml_serializable import XmlSerializableAddressBook, XmlSerializableExpenditureTracker

logger = get_logger(__name__)

DEFAULT_EXPENDITURE_TRACKER_FILE = "expendituretracker.xml"


class XmlAddressBookStorage:
    """Accesses address book and expenditure tracker data stored as XML files on disk."""

    def __init__(self, address_book_file_path: Path, expenditure_tracker_file_path: Optional[Path] = None) -> None:
        self._address_book_file_path = Path(address_book_file_path)
        if expenditure_tracker_file_path is None:
            expenditure_tracker_file_path = self._address_book_file_path.with_name(DEFAULT_EXPENDITURE_TRACKER_FILE)
        self._expenditure_tracker_file_path = Path(expenditure_tracker_file_path)

    @property
    def address_book_file_path(self) -> Path:
        return self._address_book_file_path

    @property
    def expenditure_tracker_file_path(self) -> Path:
        return self._expenditure_tracker_file_path

    # ----------------------- address book -----------------------

    def read_address_book(self, file_path: Optional[Path] = None) -> Optional[AddressBook]:
        """
        Read the address book at ``file_path`` (default: the configured path).

        Returns None when the file does not exist. Raises DataConversionError
        when the file is not in the correct format.
        """
        path = Path(file_path) if file_path is not None else self._address_book_file_path
        if not is_file_exists(path):
            logger.info("address_book_file_not_found", path=str(path))
            return None

        xml_address_book = load_address_book_from_save_file(path)
        try:
            return xml_address_book.to_model_type()
        except IllegalValueError as exc:
            logger.info("illegal_values_found", path=str(path), error=str(exc))
            raise DataConversionError(exc) from exc

    def save_address_book(self, address_book: ReadOnlyAddressBook, file_path: Optional[Path] = None) -> None:
        path = Path(file_path) if file_path is not None else self._address_book_file_path
        create_if_missing(path)
        save_address_book_to_file(path, XmlSerializableAddressBook.from_model(address_book))

    # -------------------- expenditure tracker --------------------

    def read_expenditure_tracker(self, file_path: Optional[Path] = None) -> Optional[ExpenditureTracker]:
        """Same contract as read_address_book, for the expenditure tracker."""
        path = Path(file_path) if file_path is not None else self._expenditure_tracker_file_path
        if not is_file_exists(path):
            logger.info("expenditure_tracker_file_not_found", path=str(path))
            return None

        xml_tracker = load_expenditure_tracker_from_save_file(path)
        try:
            return xml_tracker.to_model_type()
        except IllegalValueError as exc:
            logger.info("illegal_values_found", path=str(path), error=str(exc))
            raise DataConversionError(exc) from exc

    def save_expenditure_tracker(
        self, tracker: ReadOnlyExpenditureTracker, file_path: Optional[Path] = None
    ) -> None:
        path = Path(file_path) if file_path is not None else self._expenditure_tracker_file_path
        create_if_missing(path)
        save_expenditure_tracker_to_file(path, XmlSerializableExpenditureTracker.from_model(tracker))
