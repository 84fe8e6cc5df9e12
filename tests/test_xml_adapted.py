"""
Conversion tests for the XML-adapted records and serializable collections.
"""
from __future__ import annotations

import sys
from pathlib import Path
from xml.etree import ElementTree

import pytest

# Garante que o pacote addressbook seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from addressbook.core.exceptions import IllegalValueError  # noqa: E402
from addressbook.domain.expenditure import Date, Expenditure  # noqa: E402
from addressbook.domain.person import Address, Email, Name, Person, Phone, Tag  # noqa: E402
from addressbook.repositories.xml_adapted import (  # noqa: E402
    XmlAdaptedExpenditure,
    XmlAdaptedPerson,
    XmlAdaptedTag,
)
from addressbook.repositories.xml_serializable import (  # noqa: E402
    MESSAGE_DUPLICATE_PERSON,
    XmlSerializableAddressBook,
    XmlSerializableExpenditureTracker,
)

BENSON = Person.create("Benson Meier", "98765432", "johnd@example.com", "311, Clementi Ave 2, #02-25", ["owesMoney", "friends"])
VALID_TAGS = [XmlAdaptedTag("friends")]


def _person(**overrides) -> XmlAdaptedPerson:
    fields = dict(
        name="Benson Meier",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        tagged=list(VALID_TAGS),
    )
    fields.update(overrides)
    return XmlAdaptedPerson(**fields)


def test_valid_person_details_convert():
    assert XmlAdaptedPerson.from_model(BENSON).to_model_type() == BENSON


def test_adapted_person_keeps_tags_sorted():
    adapted = XmlAdaptedPerson.from_model(BENSON)
    assert [t.tag_name for t in adapted.tagged] == ["friends", "owesMoney"]


@pytest.mark.parametrize(
    "field, cls",
    [("name", Name), ("phone", Phone), ("email", Email), ("address", Address)],
)
def test_missing_person_field(field, cls):
    with pytest.raises(IllegalValueError) as excinfo:
        _person(**{field: None}).to_model_type()
    assert str(excinfo.value) == f"Person's {cls.__name__} field is missing!"


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("name", "R@chel", Name.MESSAGE_CONSTRAINTS),
        ("phone", "+651234", Phone.MESSAGE_CONSTRAINTS),
        ("email", "example.com", Email.MESSAGE_CONSTRAINTS),
    ],
)
def test_invalid_person_field(field, value, message):
    with pytest.raises(IllegalValueError) as excinfo:
        _person(**{field: value}).to_model_type()
    assert str(excinfo.value) == message


def test_invalid_tag():
    with pytest.raises(IllegalValueError) as excinfo:
        _person(tagged=[XmlAdaptedTag("#friend")]).to_model_type()
    assert str(excinfo.value) == Tag.MESSAGE_CONSTRAINTS


def test_person_element_layout():
    root = ElementTree.Element("addressbook")
    XmlAdaptedPerson.from_model(BENSON).to_element(root)
    node = root.find("persons")
    assert node is not None
    assert [child.tag for child in node] == ["name", "phone", "email", "address", "tagged", "tagged"]
    assert node.findtext("email") == "johnd@example.com"


def test_empty_element_reads_as_blank_not_missing():
    node = ElementTree.fromstring(
        "<persons><name></name><phone>98765432</phone>"
        "<email>johnd@example.com</email><address>Clementi</address></persons>"
    )
    adapted = XmlAdaptedPerson.from_element(node)
    assert adapted.name == ""
    with pytest.raises(IllegalValueError) as excinfo:
        adapted.to_model_type()
    assert str(excinfo.value) == Name.MESSAGE_CONSTRAINTS


def test_expenditure_conversion():
    lunch = Expenditure.create("Lunch", "01-10-2018", "5.50", "Food")
    assert XmlAdaptedExpenditure.from_model(lunch).to_model_type() == lunch

    missing = XmlAdaptedExpenditure(description="Lunch", date=None, money="5.50", category="Food")
    with pytest.raises(IllegalValueError, match="Expenditure's Date field is missing!"):
        missing.to_model_type()

    invalid = XmlAdaptedExpenditure(description="Lunch", date="2018-10-01", money="5.50", category="Food")
    with pytest.raises(IllegalValueError) as excinfo:
        invalid.to_model_type()
    assert str(excinfo.value) == Date.MESSAGE_CONSTRAINTS


def test_serializable_address_book_rejects_duplicates():
    data = XmlSerializableAddressBook([XmlAdaptedPerson.from_model(BENSON), XmlAdaptedPerson.from_model(BENSON)])
    with pytest.raises(IllegalValueError) as excinfo:
        data.to_model_type()
    assert str(excinfo.value) == MESSAGE_DUPLICATE_PERSON


def test_serializable_tracker_root_and_children():
    lunch = Expenditure.create("Lunch", "01-10-2018", "5.50", "Food")
    data = XmlSerializableExpenditureTracker([XmlAdaptedExpenditure.from_model(lunch)] * 2)
    root = data.to_element()
    assert root.tag == "expendituretracker"
    assert len(root.findall("expenditures")) == 2
    assert XmlSerializableExpenditureTracker.from_element(root).to_model_type().expenditures == (lunch, lunch)
