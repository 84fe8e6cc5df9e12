"""
High-level use cases for the address book storage layer.

Each service module orchestrates repositories/adapters (load with fallbacks,
save on change). Callers should use these services instead of touching the
XML/JSON files directly.
"""
