"""
File-level tests for XmlAddressBookStorage against a temporary directory.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote addressbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from addressbook.core.exceptions import DataConversionError, IllegalValueError  # noqa: E402
from addressbook.domain.address_book import AddressBook  # noqa: E402
from addressbook.domain.expenditure import Expenditure  # noqa: E402
from addressbook.domain.expenditure_tracker import ExpenditureTracker  # noqa: E402
from addressbook.domain.person import Person  # noqa: E402
from addressbook.domain.sample_data import sample_address_book, sample_expenditure_tracker  # noqa: E402
from addressbook.repositories.xml_file_storage import (  # noqa: E402
    load_address_book_from_save_file,
    save_address_book_to_file,
)
from addressbook.repositories.xml_serializable import XmlSerializableAddressBook  # noqa: E402
from addressbook.repositories.xml_storage import XmlAddressBookStorage  # noqa: E402

VALID_ADDRESS_BOOK = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<addressbook>
    <persons>
        <name>Hans Muster</name>
        <phone>9482424</phone>
        <email>hans@example.com</email>
        <address>4th street</address>
        <tagged>friends</tagged>
    </persons>
</addressbook>
"""

INVALID_PERSON = """<?xml version="1.0" encoding="UTF-8"?>
<addressbook>
    <persons>
        <name>Hans Muster</name>
        <phone>948asdf2424</phone>
        <email>hans@example.com</email>
        <address>4th street</address>
    </persons>
</addressbook>
"""

DUPLICATE_PERSONS = """<?xml version="1.0" encoding="UTF-8"?>
<addressbook>
    <persons>
        <name>Hans Muster</name><phone>9482424</phone><email>hans@example.com</email><address>4th street</address>
    </persons>
    <persons>
        <name>Hans Muster</name><phone>9482424</phone><email>hans@example.com</email><address>5th street</address>
    </persons>
</addressbook>
"""

VALID_TRACKER = """<?xml version="1.0" encoding="UTF-8"?>
<expendituretracker>
    <expenditures>
        <description>Lunch</description>
        <date>01-10-2018</date>
        <money>5.50</money>
        <category>Food</category>
    </expenditures>
</expendituretracker>
"""

ALICE = Person.create("Alice Pauline", "94351253", "alice@example.com", "123, Jurong West Ave 6, #08-111", ["friends"])
HOON = Person.create("Hoon Meier", "8482424", "stefan@example.com", "little india")


@pytest.fixture()
def storage(tmp_path):
    return XmlAddressBookStorage(tmp_path / "addressbook.xml", tmp_path / "expendituretracker.xml")


def test_file_paths(tmp_path):
    shared = XmlAddressBookStorage(tmp_path / "book.xml")
    assert shared.address_book_file_path == tmp_path / "book.xml"
    assert shared.expenditure_tracker_file_path == tmp_path / "expendituretracker.xml"


def test_read_missing_file_returns_none(storage, tmp_path):
    assert storage.read_address_book() is None
    assert storage.read_address_book(tmp_path / "nope.xml") is None
    assert storage.read_expenditure_tracker() is None


def test_read_valid_file(storage):
    storage.address_book_file_path.write_text(VALID_ADDRESS_BOOK, encoding="utf-8")
    book = storage.read_address_book()
    assert book is not None
    assert book.persons == (Person.create("Hans Muster", "9482424", "hans@example.com", "4th street", ["friends"]),)


@pytest.mark.parametrize("content", ["", "not xml format!", "<addressbook><persons>"])
def test_read_malformed_file(storage, content):
    storage.address_book_file_path.write_text(content, encoding="utf-8")
    with pytest.raises(DataConversionError):
        storage.read_address_book()


def test_read_illegal_values_wraps_cause(storage):
    storage.address_book_file_path.write_text(INVALID_PERSON, encoding="utf-8")
    with pytest.raises(DataConversionError) as excinfo:
        storage.read_address_book()
    assert isinstance(excinfo.value.__cause__, IllegalValueError)
    assert "Phone numbers" in str(excinfo.value)


def test_read_duplicate_persons(storage):
    storage.address_book_file_path.write_text(DUPLICATE_PERSONS, encoding="utf-8")
    with pytest.raises(DataConversionError, match="duplicate person"):
        storage.read_address_book()


def test_read_wrong_root_element(storage):
    storage.address_book_file_path.write_text(VALID_TRACKER, encoding="utf-8")
    with pytest.raises(DataConversionError, match="root element"):
        storage.read_address_book()


def test_save_then_read_address_book(storage, tmp_path):
    original = sample_address_book()
    storage.save_address_book(original)
    assert storage.read_address_book() == original

    original.add_person(HOON)
    original.remove_person(original.persons[0])
    storage.save_address_book(original)
    assert storage.read_address_book() == original

    other = tmp_path / "nested" / "dir" / "other.xml"
    storage.save_address_book(AddressBook([ALICE]), other)
    assert storage.read_address_book(other) == AddressBook([ALICE])


def test_saved_file_is_indented_xml(storage):
    storage.save_address_book(AddressBook([ALICE]))
    text = storage.address_book_file_path.read_text(encoding="utf-8")
    first_line = text.splitlines()[0]
    assert first_line.startswith("<?xml")
    assert "utf-8" in first_line.lower()
    assert "\n    <persons>\n        <name>Alice Pauline</name>" in text


def test_expenditure_tracker_read_and_save(storage):
    storage.expenditure_tracker_file_path.write_text(VALID_TRACKER, encoding="utf-8")
    tracker = storage.read_expenditure_tracker()
    assert tracker == ExpenditureTracker([Expenditure.create("Lunch", "01-10-2018", "5.50", "Food")])

    sample = sample_expenditure_tracker()
    storage.save_expenditure_tracker(sample)
    assert storage.read_expenditure_tracker() == sample
    # the address book file is untouched
    assert storage.read_address_book() is None


def test_expenditure_tracker_checks_the_path_being_read(storage, tmp_path):
    other = tmp_path / "elsewhere.xml"
    other.write_text(VALID_TRACKER, encoding="utf-8")
    assert storage.read_expenditure_tracker(other) is not None
    assert storage.read_expenditure_tracker() is None


def test_expenditure_tracker_illegal_values(storage):
    storage.expenditure_tracker_file_path.write_text(
        VALID_TRACKER.replace("5.50", "five dollars"), encoding="utf-8"
    )
    with pytest.raises(DataConversionError):
        storage.read_expenditure_tracker()


def test_file_storage_requires_existing_file(tmp_path):
    missing = tmp_path / "missing.xml"
    with pytest.raises(FileNotFoundError):
        load_address_book_from_save_file(missing)
    with pytest.raises(FileNotFoundError):
        save_address_book_to_file(missing, XmlSerializableAddressBook())


def test_text_fields_survive_save_and_read(storage):
    # tabs and non-ASCII text are kept exactly as written
    person = Person.create("Ann Lee", "123", "ann@example.com", "Blk 1\tUnit 2, Straße ünïcödé  ")
    lunch = Expenditure.create("Café au lait\t(large)", "01-10-2018", "4.20", "Food")
    storage.save_address_book(AddressBook([person]))
    storage.save_expenditure_tracker(ExpenditureTracker([lunch]))

    assert storage.read_address_book() == AddressBook([person])
    assert storage.read_expenditure_tracker() == ExpenditureTracker([lunch])


@pytest.mark.parametrize("text", ["Blk 1\rUnit 2", "Blk 1\nUnit 2", "Blk 1\x01", "Blk 1\x0b", "\x01Blk 1", "Blk \ufffe"])
def test_text_that_cannot_round_trip_is_rejected(text):
    with pytest.raises(ValueError):
        Person.create("Ann Lee", "123", "ann@example.com", text)
    with pytest.raises(ValueError):
        Expenditure.create(text, "01-10-2018", "4.20", "Food")
