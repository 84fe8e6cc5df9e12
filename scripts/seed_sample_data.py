#!/usr/bin/env python3
"""
Write the sample address book / expenditure tracker to the configured XML files.

Usage:
  python scripts/seed_sample_data.py [--address-book data/addressbook.xml]
                                     [--expenditures data/expendituretracker.xml] [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from addressbook.core.config import get_settings
from addressbook.core.files import is_file_exists
from addressbook.core.logging import configure_logging
from addressbook.domain.sample_data import sample_address_book, sample_expenditure_tracker
from addressbook.repositories.xml_storage import XmlAddressBookStorage


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Write sample data files")
    ap.add_argument("--address-book", type=Path, default=settings.address_book_file, help="Address book XML file")
    ap.add_argument(
        "--expenditures", type=Path, default=settings.expenditure_tracker_file, help="Expenditure tracker XML file"
    )
    ap.add_argument("--force", action="store_true", help="Overwrite files that already exist")
    args = ap.parse_args()

    configure_logging(settings)
    storage = XmlAddressBookStorage(args.address_book, args.expenditures)
    for path in (storage.address_book_file_path, storage.expenditure_tracker_file_path):
        if is_file_exists(path) and not args.force:
            raise SystemExit(f"'{path}' already exists (use --force to overwrite)")

    address_book = sample_address_book()
    tracker = sample_expenditure_tracker()
    storage.save_address_book(address_book)
    storage.save_expenditure_tracker(tracker)
    print("OK: sample data written")
    print(f"  {storage.address_book_file_path}: {len(address_book)} persons")
    print(f"  {storage.expenditure_tracker_file_path}: {len(tracker)} expenditures")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
