# tests/__init__.py
"""
Test Suite for Locale Bridge.

Organization:
- `core`: Locale table invariants, registry construction, domain models.
- `shared`: Configuration and logging setup.
- top level: Public conversion functions.
"""
