"""Address book model: a list of unique persons."""
from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .person import Person, Tag


class PersonListError(Exception):
    """Base exception for person list operations."""


class DuplicatePersonError(PersonListError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(PersonListError):
    def __init__(self) -> None:
        super().__init__("Person not found in the address book")


class ReadOnlyAddressBook(Protocol):
    """Unmodifiable view of an address book."""

    @property
    def persons(self) -> Sequence[Person]:
        ...

    @property
    def tags(self) -> Sequence[Tag]:
        ...


def _has_duplicates(persons: Sequence[Person]) -> bool:
    for i, person in enumerate(persons):
        for other in persons[i + 1 :]:
            if person.is_same_person(other):
                return True
    return False


class AddressBook:
    """Wraps the person list. Duplicates (see Person.is_same_person) are not allowed."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        self.set_persons(persons)

    @classmethod
    def from_read_only(cls, data: ReadOnlyAddressBook) -> "AddressBook":
        book = cls()
        book.reset_data(data)
        return book

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    @property
    def tags(self) -> tuple[Tag, ...]:
        collected: set[Tag] = set()
        for person in self._persons:
            collected.update(person.tags)
        return tuple(sorted(collected))

    def set_persons(self, persons: Iterable[Person]) -> None:
        replacement = list(persons)
        if _has_duplicates(replacement):
            raise DuplicatePersonError()
        self._persons = replacement

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        self.set_persons(new_data.persons)

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def update_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``; ``edited`` must not clash with another person."""
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError()
        self._persons[index] = edited

    def remove_person(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError() from None

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons, {len(self.tags)} tags)"
