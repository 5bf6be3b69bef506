# locale_bridge/core/registry.py
"""
Locale Registry.

Builds the four runtime lookups (unified -> store and store -> unified, for
each store) from the single locale table, and refuses to build when the table
breaks an invariant:

- every unified code appears once and only once;
- within one store, no two unified codes publish to the same store code;
- every alias points at a catalog locale that the store actually carries;
- no alias reuses a code the store already publishes for another locale.

Round-trip integrity follows from generating the reverse tables from the rows;
`verify_round_trip` re-checks it against the built lookups.
"""

from collections import Counter
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

import structlog

from locale_bridge.core.domain.exceptions import (
    LocaleTableIntegrityError,
    UnknownPlatformLocaleError,
    UnknownUnifiedLocaleError,
)
from locale_bridge.core.domain.locale_table import LOCALE_TABLE, STORE_ALIASES
from locale_bridge.core.domain.models import LocaleMapping, Store

logger = structlog.get_logger()


def find_table_problems(
    rows: Sequence[LocaleMapping],
    aliases: Mapping[Store, Mapping[str, str]],
) -> List[str]:
    """
    Returns a human-readable list of invariant violations (empty when clean).
    """
    problems: List[str] = []

    counts = Counter(row.unified for row in rows)
    for unified, count in counts.items():
        if count > 1:
            problems.append(f"unified locale '{unified}' appears {count} times")

    catalog = set(counts)

    for store in Store:
        published: Dict[str, str] = {}
        for row in rows:
            code = row.code_for(store)
            if code is None:
                continue
            if code in published and published[code] != row.unified:
                problems.append(
                    f"{store.label} code '{code}' is published by both "
                    f"'{published[code]}' and '{row.unified}'"
                )
                continue
            published[code] = row.unified

        carried = set(published.values())
        for alias, target in aliases.get(store, {}).items():
            if target not in catalog:
                problems.append(f"{store.label} alias '{alias}' points at unknown locale '{target}'")
            elif target not in carried:
                problems.append(
                    f"{store.label} alias '{alias}' points at '{target}', which {store.label} does not carry"
                )
            if alias in published and published[alias] != target:
                problems.append(
                    f"{store.label} alias '{alias}' -> '{target}' shadows the code published by '{published[alias]}'"
                )

    return problems


class LocaleRegistry:
    """
    Immutable bundle of the catalog and the per-store lookups.

    Built once per process from the locale table; all lookups are read-only
    mappings, so a registry can be shared freely between threads.
    """

    def __init__(
        self,
        rows: Sequence[LocaleMapping],
        aliases: Optional[Mapping[Store, Mapping[str, str]]] = None,
    ):
        aliases = aliases or {}
        problems = find_table_problems(rows, aliases)
        if problems:
            raise LocaleTableIntegrityError(problems)

        self._rows: Tuple[LocaleMapping, ...] = tuple(rows)
        self._by_unified: Mapping[str, LocaleMapping] = MappingProxyType(
            {row.unified: row for row in self._rows}
        )
        self.catalog: Tuple[str, ...] = tuple(row.unified for row in self._rows)
        self._catalog_set: FrozenSet[str] = frozenset(self.catalog)

        forward: Dict[Store, Mapping[str, Optional[str]]] = {}
        reverse: Dict[Store, Mapping[str, str]] = {}
        for store in Store:
            forward[store] = MappingProxyType({row.unified: row.code_for(store) for row in self._rows})
            table = {
                row.code_for(store): row.unified
                for row in self._rows
                if row.code_for(store) is not None
            }
            # Published codes win over aliases (find_table_problems guarantees they agree).
            for alias, target in aliases.get(store, {}).items():
                table.setdefault(alias, target)
            reverse[store] = MappingProxyType(table)

        self._forward: Mapping[Store, Mapping[str, Optional[str]]] = MappingProxyType(forward)
        self._reverse: Mapping[Store, Mapping[str, str]] = MappingProxyType(reverse)

        self._supported: Mapping[Store, Tuple[str, ...]] = MappingProxyType({
            store: tuple(u for u in self.catalog if self._forward[store][u] is not None)
            for store in Store
        })

    # --- Catalog ---

    def is_unified(self, code: object) -> bool:
        return isinstance(code, str) and code in self._catalog_set

    def require_unified(self, code: object) -> str:
        if not self.is_unified(code):
            raise UnknownUnifiedLocaleError(code)
        return code  # type: ignore[return-value]

    def row(self, locale: str) -> LocaleMapping:
        return self._by_unified[self.require_unified(locale)]

    # --- Lookups ---

    def forward_table(self, store: Store) -> Mapping[str, Optional[str]]:
        """Read-only unified -> store code mapping (values may be None)."""
        return self._forward[Store(store)]

    def reverse_table(self, store: Store) -> Mapping[str, str]:
        """Read-only store code -> unified mapping, aliases included."""
        return self._reverse[Store(store)]

    def to_store(self, locale: str, store: Store) -> Optional[str]:
        """
        Returns the store code for a unified locale, or None when the store
        does not carry the language. Unknown unified codes raise.
        """
        return self._forward[Store(store)][self.require_unified(locale)]

    def from_store(self, code: str, store: Store) -> str:
        """
        Resolves a store code to its unified locale. Unknown codes raise
        UnknownPlatformLocaleError; there is no fallback locale.
        """
        store = Store(store)
        unified = self._reverse[store].get(code) if isinstance(code, str) else None
        if unified is None:
            logger.warning("unknown_platform_locale", store=store.value, code=code)
            raise UnknownPlatformLocaleError(code, store.label)
        return unified

    # --- Supported Sets ---

    def supported(self, store: Store) -> Tuple[str, ...]:
        """Catalog locales (in catalog order) the store has a code for."""
        return self._supported[Store(store)]

    def common_supported(self) -> Tuple[str, ...]:
        carried = [set(self._supported[store]) for store in Store]
        return tuple(u for u in self.catalog if all(u in s for s in carried))

    # --- Checks ---

    def verify_round_trip(self) -> List[str]:
        """
        Re-checks forward -> reverse round trips against the built lookups.
        """
        problems: List[str] = []
        for store in Store:
            for unified, code in self._forward[store].items():
                if code is None:
                    continue
                back = self._reverse[store].get(code)
                if back != unified:
                    problems.append(
                        f"{store.label} code '{code}' for '{unified}' resolves back to '{back}'"
                    )
        return problems


# Process-wide registry, built once from the compiled-in table.
REGISTRY = LocaleRegistry(LOCALE_TABLE, STORE_ALIASES)
