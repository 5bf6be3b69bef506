"""
Shared utilities package.

Cross-cutting concerns used by the core and by host applications:
- Configuration management
- Structured logging
"""
