"""Serializable (root element) forms of the address book and expenditure tracker."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
from xml.etree import ElementTree

from addressbook.core.exceptions import IllegalValueError
from addressbook.domain.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.domain.expenditure_tracker import ExpenditureTracker, ReadOnlyExpenditureTracker

from .xml_adapted import XmlAdaptedExpenditure, XmlAdaptedPerson

ADDRESS_BOOK_ROOT = "addressbook"
EXPENDITURE_TRACKER_ROOT = "expendituretracker"
MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."


@dataclass
class XmlSerializableAddressBook:
    persons: List[XmlAdaptedPerson] = field(default_factory=list)

    ROOT = ADDRESS_BOOK_ROOT

    @classmethod
    def from_model(cls, src: ReadOnlyAddressBook) -> "XmlSerializableAddressBook":
        return cls([XmlAdaptedPerson.from_model(p) for p in src.persons])

    @classmethod
    def from_element(cls, root: ElementTree.Element) -> "XmlSerializableAddressBook":
        return cls([XmlAdaptedPerson.from_element(node) for node in root.findall(XmlAdaptedPerson.TAG)])

    def to_element(self) -> ElementTree.Element:
        root = ElementTree.Element(self.ROOT)
        for person in self.persons:
            person.to_element(root)
        return root

    def to_model_type(self) -> AddressBook:
        """
        Convert into an AddressBook.

        Raises IllegalValueError if a person is invalid or the list holds duplicates.
        """
        address_book = AddressBook()
        for adapted in self.persons:
            person = adapted.to_model_type()
            if address_book.has_person(person):
                raise IllegalValueError(MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)
        return address_book


@dataclass
class XmlSerializableExpenditureTracker:
    expenditures: List[XmlAdaptedExpenditure] = field(default_factory=list)

    ROOT = EXPENDITURE_TRACKER_ROOT

    @classmethod
    def from_model(cls, src: ReadOnlyExpenditureTracker) -> "XmlSerializableExpenditureTracker":
        return cls([XmlAdaptedExpenditure.from_model(e) for e in src.expenditures])

    @classmethod
    def from_element(cls, root: ElementTree.Element) -> "XmlSerializableExpenditureTracker":
        return cls(
            [XmlAdaptedExpenditure.from_element(node) for node in root.findall(XmlAdaptedExpenditure.TAG)]
        )

    def to_element(self) -> ElementTree.Element:
        root = ElementTree.Element(self.ROOT)
        for expenditure in self.expenditures:
            expenditure.to_element(root)
        return root

    def to_model_type(self) -> ExpenditureTracker:
        return ExpenditureTracker(adapted.to_model_type() for adapted in self.expenditures)
