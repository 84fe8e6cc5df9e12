"""Exceptions shared by the domain and persistence layers."""
from __future__ import annotations


class IllegalValueError(ValueError):
    """Raised when a stored value breaks a domain constraint or a required field is missing."""


class DataConversionError(Exception):
    """Raised when on-disk content does not convert into a valid domain object."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Data conversion failed: {cause}")
        self.__cause__ = cause


class DataSavingError(OSError):
    """Raised when a collection cannot be written to disk."""
