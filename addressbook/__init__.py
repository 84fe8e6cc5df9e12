"""Local XML storage for an address book and an expenditure tracker."""

__version__ = "0.1.0"
