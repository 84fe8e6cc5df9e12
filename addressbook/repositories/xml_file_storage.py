"""Stores address book / expenditure tracker data in XML files."""
from __future__ import annotations

from pathlib import Path

from addressbook.core.xml_util import get_data_from_file, save_data_to_file

from .xml_serializable import (
    ADDRESS_BOOK_ROOT,
    EXPENDITURE_TRACKER_ROOT,
    XmlSerializableAddressBook,
    XmlSerializableExpenditureTracker,
)


def save_address_book_to_file(path: Path, address_book: XmlSerializableAddressBook) -> None:
    """Raises FileNotFoundError if the file does not exist."""
    save_data_to_file(path, address_book.to_element())


def load_address_book_from_save_file(path: Path) -> XmlSerializableAddressBook:
    """
    Raises FileNotFoundError if the file does not exist and DataConversionError
    if it is not in the expected format.
    """
    return XmlSerializableAddressBook.from_element(get_data_from_file(path, ADDRESS_BOOK_ROOT))


def save_expenditure_tracker_to_file(path: Path, tracker: XmlSerializableExpenditureTracker) -> None:
    save_data_to_file(path, tracker.to_element())


def load_expenditure_tracker_from_save_file(path: Path) -> XmlSerializableExpenditureTracker:
    return XmlSerializableExpenditureTracker.from_element(get_data_from_file(path, EXPENDITURE_TRACKER_ROOT))
