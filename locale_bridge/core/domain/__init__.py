"""
Domain Entities and Value Objects.

This package defines the locale table rows, the store enumeration and the
exceptions raised when a locale code cannot be resolved.
"""
