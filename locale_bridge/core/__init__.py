"""
Core Domain Layer.

This package contains the pure locale-resolution logic of the system:
- No dependencies on infrastructure (file system, network, store APIs).
- Immutable tables built once at import; safe to share across threads.
"""
