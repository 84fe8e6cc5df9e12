#!/usr/bin/env python3
"""
Check that the configured data files convert into valid models.

Usage:
  python scripts/validate_data.py [--address-book FILE] [--expenditures FILE]

Exit status is 1 when any file fails to convert.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from addressbook.core.config import get_settings
from addressbook.core.exceptions import DataConversionError
from addressbook.core.logging import configure_logging
from addressbook.repositories.xml_storage import XmlAddressBookStorage


def main() -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Validate address book / expenditure tracker XML files")
    ap.add_argument("--address-book", type=Path, default=settings.address_book_file)
    ap.add_argument("--expenditures", type=Path, default=settings.expenditure_tracker_file)
    args = ap.parse_args()

    configure_logging(settings)
    storage = XmlAddressBookStorage(args.address_book, args.expenditures)
    failures = 0

    try:
        address_book = storage.read_address_book()
    except DataConversionError as exc:
        failures += 1
        print(f"FAIL {storage.address_book_file_path}: {exc}")
    else:
        if address_book is None:
            print(f"SKIP {storage.address_book_file_path}: not found")
        else:
            print(f"OK   {storage.address_book_file_path}: {len(address_book)} persons")

    try:
        tracker = storage.read_expenditure_tracker()
    except DataConversionError as exc:
        failures += 1
        print(f"FAIL {storage.expenditure_tracker_file_path}: {exc}")
    else:
        if tracker is None:
            print(f"SKIP {storage.expenditure_tracker_file_path}: not found")
        else:
            print(f"OK   {storage.expenditure_tracker_file_path}: {len(tracker)} expenditures, total {tracker.total()}")

    return 1 if failures else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
