"""Domain objects for expenditures recorded by the expenditure tracker."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar

from .person import SINGLE_LINE_TEXT

DESCRIPTION_PATTERN = re.compile(SINGLE_LINE_TEXT)
DATE_FORMAT = "%d-%m-%Y"
DATE_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII)
MONEY_PATTERN = re.compile(r"\d+(?:\.\d{1,2})?", re.ASCII)
CATEGORY_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*", re.ASCII)


def is_valid_description(value: str | None) -> bool:
    return bool(value) and bool(DESCRIPTION_PATTERN.fullmatch(value))


def is_valid_date(value: str | None) -> bool:
    """Return True for a real calendar date written dd-mm-yyyy."""
    if not value or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_money(value: str | None) -> bool:
    return bool(value) and bool(MONEY_PATTERN.fullmatch(value))


def is_valid_category(value: str | None) -> bool:
    return bool(value) and bool(CATEGORY_PATTERN.fullmatch(value))


@dataclass(frozen=True)
class Description:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Descriptions can take any values on a single line, and it should not be blank"

    def __post_init__(self):
        if not is_valid_description(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Date:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Dates should be a valid calendar date in the format dd-mm-yyyy"

    def __post_init__(self):
        if not is_valid_date(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def to_date(self) -> date:
        return datetime.strptime(self.value, DATE_FORMAT).date()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Money should be a non-negative amount with at most two decimal places, e.g. 12 or 3.50"
    )

    def __post_init__(self):
        if not is_valid_money(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @property
    def amount(self) -> Decimal:
        return Decimal(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Category:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Categories should only contain alphanumeric characters and spaces, and it should not be blank"
    )

    def __post_init__(self):
        if not is_valid_category(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Expenditure:
    description: Description
    date: Date
    money: Money
    category: Category

    @classmethod
    def create(cls, description: str, date: str, money: str, category: str) -> "Expenditure":
        return cls(Description(description), Date(date), Money(money), Category(category))

    def __str__(self) -> str:
        return f"{self.description} Date: {self.date} Money: {self.money} Category: {self.category}"
