"""Sample content used when no data file exists yet."""
from __future__ import annotations

from .address_book import AddressBook
from .expenditure import Expenditure
from .expenditure_tracker import ExpenditureTracker
from .person import Person


def sample_persons() -> list[Person]:
    return [
        Person.create("Alex Yeoh", "87438807", "alexyeoh@example.com", "Blk 30 Geylang Street 29, #06-40", ["friends"]),
        Person.create("Bernice Yu", "99272758", "berniceyu@example.com", "Blk 30 Lorong 3 Serangoon Gardens, #07-18", ["colleagues", "friends"]),
        Person.create("Charlotte Oliveiro", "93210283", "charlotte@example.com", "Blk 11 Ang Mo Kio Street 74, #11-04", ["neighbours"]),
        Person.create("David Li", "91031282", "lidavid@example.com", "Blk 436 Serangoon Gardens Street 26, #16-43", ["family"]),
        Person.create("Irfan Ibrahim", "92492021", "irfan@example.com", "Blk 47 Tampines Street 20, #17-35", ["classmates"]),
        Person.create("Roy Balakrishnan", "92624417", "royb@example.com", "Blk 45 Aljunied Street 85, #11-31", ["colleagues"]),
    ]


def sample_expenditures() -> list[Expenditure]:
    return [
        Expenditure.create("Chicken rice", "01-10-2018", "3.50", "Food"),
        Expenditure.create("Bus card top up", "02-10-2018", "20", "Transport"),
        Expenditure.create("Textbook", "03-10-2018", "45.90", "Education"),
        Expenditure.create("Movie ticket", "05-10-2018", "12.50", "Entertainment"),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons())


def sample_expenditure_tracker() -> ExpenditureTracker:
    return ExpenditureTracker(sample_expenditures())
