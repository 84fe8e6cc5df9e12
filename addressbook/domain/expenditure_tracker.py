"""Expenditure tracker model."""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Protocol, Sequence

from .expenditure import Expenditure


class ExpenditureNotFoundError(Exception):
    def __init__(self) -> None:
        super().__init__("Expenditure not found in the expenditure tracker")


class ReadOnlyExpenditureTracker(Protocol):
    """Unmodifiable view of an expenditure tracker."""

    @property
    def expenditures(self) -> Sequence[Expenditure]:
        ...


class ExpenditureTracker:
    """Ordered list of expenditures; identical entries are allowed."""

    def __init__(self, expenditures: Iterable[Expenditure] = ()) -> None:
        self._expenditures: list[Expenditure] = list(expenditures)

    @classmethod
    def from_read_only(cls, data: ReadOnlyExpenditureTracker) -> "ExpenditureTracker":
        return cls(data.expenditures)

    @property
    def expenditures(self) -> tuple[Expenditure, ...]:
        return tuple(self._expenditures)

    def set_expenditures(self, expenditures: Iterable[Expenditure]) -> None:
        self._expenditures = list(expenditures)

    def reset_data(self, new_data: ReadOnlyExpenditureTracker) -> None:
        self.set_expenditures(new_data.expenditures)

    def add_expenditure(self, expenditure: Expenditure) -> None:
        self._expenditures.append(expenditure)

    def remove_expenditure(self, expenditure: Expenditure) -> None:
        try:
            self._expenditures.remove(expenditure)
        except ValueError:
            raise ExpenditureNotFoundError() from None

    def total(self) -> Decimal:
        return sum((e.money.amount for e in self._expenditures), Decimal("0"))

    def __len__(self) -> int:
        return len(self._expenditures)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpenditureTracker):
            return NotImplemented
        return self._expenditures == other._expenditures

    def __repr__(self) -> str:
        return f"ExpenditureTracker({len(self._expenditures)} expenditures)"
