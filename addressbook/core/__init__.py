"""
Core utilities shared across the address book storage layer.

This package hosts:
- configuration helpers (env vars, data file paths, log settings)
- cross-cutting concerns such as logging, exceptions, filesystem and XML helpers

Domain and repository modules should depend on these primitives instead of
reading the environment or touching files directly.
"""
