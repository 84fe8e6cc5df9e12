"""Domain objects for people stored in the address book."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Iterable

NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*", re.ASCII)
PHONE_PATTERN = re.compile(r"\d{3,}", re.ASCII)
EMAIL_SPECIAL_CHARACTERS = "!#$%&'*+/=?`{|}~^.-"
EMAIL_PATTERN = re.compile(
    r"[\w" + re.escape(EMAIL_SPECIAL_CHARACTERS) + r"]+"
    r"@[^\W_][a-zA-Z0-9.-]*[^\W_]",
    re.ASCII,
)
# one line of text; control characters other than tab cannot be stored in XML
SINGLE_LINE_TEXT = r"[^\s\x00-\x1f\ud800-\udfff\ufffe\uffff][^\x00-\x08\x0a-\x1f\ud800-\udfff\ufffe\uffff]*"
ADDRESS_PATTERN = re.compile(SINGLE_LINE_TEXT)
TAG_PATTERN = re.compile(r"[^\W_]+", re.ASCII)


def is_valid_name(value: str | None) -> bool:
    """Return True for alphanumeric characters and spaces, starting with an alphanumeric."""
    return bool(value) and bool(NAME_PATTERN.fullmatch(value))


def is_valid_phone(value: str | None) -> bool:
    return bool(value) and bool(PHONE_PATTERN.fullmatch(value))


def is_valid_email(value: str | None) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.fullmatch(value))


def is_valid_address(value: str | None) -> bool:
    return bool(value) and bool(ADDRESS_PATTERN.fullmatch(value))


def is_valid_tag_name(value: str | None) -> bool:
    return bool(value) and bool(TAG_PATTERN.fullmatch(value))


@dataclass(frozen=True, order=True)
class Name:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )

    def __post_init__(self):
        if not is_valid_name(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    def __post_init__(self):
        if not is_valid_phone(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain. "
        "The local-part should only contain alphanumeric characters and these special characters: "
        f"{EMAIL_SPECIAL_CHARACTERS} "
        "The domain name should start and end with an alphanumeric character, "
        "and may contain periods or hyphens in between."
    )

    def __post_init__(self):
        if not is_valid_email(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values on a single line, and it should not be blank"

    def __post_init__(self):
        if not is_valid_address(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Tag:
    name: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"

    def __post_init__(self):
        if not is_valid_tag_name(self.name):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


@dataclass(frozen=True)
class Person:
    """A person in the address book. Every field is present and validated."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: FrozenSet[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        # accept any iterable of tags but always store a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    @classmethod
    def create(
        cls,
        name: str,
        phone: str,
        email: str,
        address: str,
        tags: Iterable[str] = (),
    ) -> "Person":
        return cls(Name(name), Phone(phone), Email(email), Address(address), frozenset(Tag(t) for t in tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Weaker notion of equality used to detect duplicates: same name and the
        same phone or email.
        """
        if other is self:
            return True
        if other is None:
            return False
        return other.name == self.name and (other.phone == self.phone or other.email == self.email)

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags)

    def __str__(self) -> str:
        tags = "".join(str(tag) for tag in self.sorted_tags())
        return (
            f"{self.name} Phone: {self.phone} Email: {self.email} "
            f"Address: {self.address} Tags: {tags}"
        )
