# locale_bridge/core/domain/exceptions.py
from typing import Iterable, List, Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Lookup Errors ---

class UnknownUnifiedLocaleError(DomainError, ValueError):
    """Raised when a locale code is not part of the closed unified catalog."""
    def __init__(self, locale: object):
        self.locale = locale
        super().__init__(f"Unknown unified locale '{locale}': not in the locale catalog.")

class UnknownPlatformLocaleError(DomainError, ValueError):
    """Raised when a store locale code has no entry in that store's reverse table."""
    def __init__(self, code: object, store: str):
        self.code = code
        self.store = store
        super().__init__(f"Unknown {store} locale '{code}': not in the {store} reverse table.")

# --- Data Integrity Errors ---

class LocaleKeyCollisionError(DomainError):
    """
    Raised when two keys of a keyed collection resolve to the same target key.
    Overwriting one with the other would lose content for a language.
    """
    def __init__(self, key: str, sources: Iterable[str], store: Optional[str] = None):
        self.key = key
        self.sources = list(sources)
        self.store = store
        origin = f" ({store})" if store else ""
        super().__init__(
            f"Locale keys {self.sources}{origin} all resolve to '{key}'; refusing to merge their content."
        )

class LocaleTableIntegrityError(DomainError):
    """Raised when the locale table breaks round-trip or injectivity invariants."""
    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        details = "; ".join(self.problems)
        super().__init__(f"Locale table failed integrity check ({len(self.problems)} problem(s)): {details}")
