"""
XML-friendly versions of the domain records.

Each adapted class mirrors one element of the save file. Values are kept as
raw strings (``None`` when the element is absent) and only validated when
converted back with ``to_model_type``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional
from xml.etree import ElementTree

from addressbook.core.exceptions import IllegalValueError
from addressbook.domain import expenditure as exp
from addressbook.domain import person as per

MISSING_FIELD_MESSAGE_FORMAT = "{owner}'s {field} field is missing!"


def _child_text(element: ElementTree.Element, tag: str) -> Optional[str]:
    """Text of the first ``tag`` child; "" for an empty element, None when absent."""
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def _sub_element(parent: ElementTree.Element, tag: str, value: Optional[str]) -> None:
    if value is None:
        return
    ElementTree.SubElement(parent, tag).text = value


def _convert(owner: str, cls, value: Optional[str], is_valid: Callable[[Optional[str]], bool]):
    if value is None:
        raise IllegalValueError(MISSING_FIELD_MESSAGE_FORMAT.format(owner=owner, field=cls.__name__))
    if not is_valid(value):
        raise IllegalValueError(cls.MESSAGE_CONSTRAINTS)
    return cls(value)


@dataclass
class XmlAdaptedTag:
    tag_name: Optional[str] = None

    TAG = "tagged"

    @classmethod
    def from_model(cls, source: per.Tag) -> "XmlAdaptedTag":
        return cls(source.name)

    @classmethod
    def from_element(cls, element: ElementTree.Element) -> "XmlAdaptedTag":
        return cls(element.text or "")

    def to_element(self, parent: ElementTree.Element) -> ElementTree.Element:
        node = ElementTree.SubElement(parent, self.TAG)
        node.text = self.tag_name or ""
        return node

    def to_model_type(self) -> per.Tag:
        if not per.is_valid_tag_name(self.tag_name):
            raise IllegalValueError(per.Tag.MESSAGE_CONSTRAINTS)
        return per.Tag(self.tag_name)


@dataclass
class XmlAdaptedPerson:
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tagged: List[XmlAdaptedTag] = field(default_factory=list)

    TAG = "persons"

    @classmethod
    def from_model(cls, source: per.Person) -> "XmlAdaptedPerson":
        return cls(
            name=source.name.value,
            phone=source.phone.value,
            email=source.email.value,
            address=source.address.value,
            tagged=[XmlAdaptedTag.from_model(tag) for tag in source.sorted_tags()],
        )

    @classmethod
    def from_element(cls, element: ElementTree.Element) -> "XmlAdaptedPerson":
        return cls(
            name=_child_text(element, "name"),
            phone=_child_text(element, "phone"),
            email=_child_text(element, "email"),
            address=_child_text(element, "address"),
            tagged=[XmlAdaptedTag.from_element(node) for node in element.findall(XmlAdaptedTag.TAG)],
        )

    def to_element(self, parent: ElementTree.Element) -> ElementTree.Element:
        node = ElementTree.SubElement(parent, self.TAG)
        _sub_element(node, "name", self.name)
        _sub_element(node, "phone", self.phone)
        _sub_element(node, "email", self.email)
        _sub_element(node, "address", self.address)
        for tag in self.tagged:
            tag.to_element(node)
        return node

    def to_model_type(self) -> per.Person:
        """
        Convert into a Person.

        Raises IllegalValueError if a field is missing or violates its constraint.
        """
        tags = [tag.to_model_type() for tag in self.tagged]
        return per.Person(
            name=_convert("Person", per.Name, self.name, per.is_valid_name),
            phone=_convert("Person", per.Phone, self.phone, per.is_valid_phone),
            email=_convert("Person", per.Email, self.email, per.is_valid_email),
            address=_convert("Person", per.Address, self.address, per.is_valid_address),
            tags=frozenset(tags),
        )


@dataclass
class XmlAdaptedExpenditure:
    description: Optional[str] = None
    date: Optional[str] = None
    money: Optional[str] = None
    category: Optional[str] = None

    TAG = "expenditures"

    @classmethod
    def from_model(cls, source: exp.Expenditure) -> "XmlAdaptedExpenditure":
        return cls(
            description=source.description.value,
            date=source.date.value,
            money=source.money.value,
            category=source.category.value,
        )

    @classmethod
    def from_element(cls, element: ElementTree.Element) -> "XmlAdaptedExpenditure":
        return cls(
            description=_child_text(element, "description"),
            date=_child_text(element, "date"),
            money=_child_text(element, "money"),
            category=_child_text(element, "category"),
        )

    def to_element(self, parent: ElementTree.Element) -> ElementTree.Element:
        node = ElementTree.SubElement(parent, self.TAG)
        _sub_element(node, "description", self.description)
        _sub_element(node, "date", self.date)
        _sub_element(node, "money", self.money)
        _sub_element(node, "category", self.category)
        return node

    def to_model_type(self) -> exp.Expenditure:
        return exp.Expenditure(
            description=_convert("Expenditure", exp.Description, self.description, exp.is_valid_description),
            date=_convert("Expenditure", exp.Date, self.date, exp.is_valid_date),
            money=_convert("Expenditure", exp.Money, self.money, exp.is_valid_money),
            category=_convert("Expenditure", exp.Category, self.category, exp.is_valid_category),
        )
