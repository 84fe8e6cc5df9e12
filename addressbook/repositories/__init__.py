"""
Persistence adapters.

These modules encapsulate how data is stored/retrieved (XML files for the
address book and expenditure tracker, JSON for user preferences).
Services should depend on the storage protocols rather than touching files.
"""
