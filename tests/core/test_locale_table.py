# tests/core/test_locale_table.py
"""
Global invariants of the compiled-in locale table.
A failure here means a table edit would lose or misattribute content.
"""

import pytest

from locale_bridge.core.domain.locale_table import (
    DEFAULT_LOCALE,
    GOOGLE_PLAY_ALIASES,
    LOCALE_TABLE,
    STORE_ALIASES,
    UNIFIED_LOCALES,
)
from locale_bridge.core.domain.models import Store
from locale_bridge.core.registry import find_table_problems


class TestCatalog:
    def test_catalog_size(self):
        assert len(UNIFIED_LOCALES) == 87

    def test_catalog_has_no_duplicates(self):
        assert len(set(UNIFIED_LOCALES)) == len(UNIFIED_LOCALES)

    def test_default_locale_is_in_catalog(self):
        assert DEFAULT_LOCALE in UNIFIED_LOCALES

    def test_every_row_has_a_name(self):
        assert all(row.name for row in LOCALE_TABLE)

    def test_table_is_clean(self):
        """The shipped table must pass the same checks the registry enforces."""
        assert find_table_problems(LOCALE_TABLE, STORE_ALIASES) == []


@pytest.mark.parametrize("store", list(Store))
class TestStoreInvariants:
    def test_round_trip(self, registry, store):
        """Every published store code resolves back to the locale that published it."""
        for unified in registry.catalog:
            code = registry.to_store(unified, store)
            if code is not None:
                assert registry.from_store(code, store) == unified

    def test_forward_is_injective(self, registry, store):
        codes = [c for c in registry.forward_table(store).values() if c is not None]
        assert len(codes) == len(set(codes))

    def test_reverse_targets_are_in_catalog(self, registry, store):
        catalog = set(registry.catalog)
        assert set(registry.reverse_table(store).values()) <= catalog

    def test_reverse_targets_are_supported_by_store(self, registry, store):
        """Aliases never resolve to a locale the store cannot publish."""
        supported = set(registry.supported(store))
        assert set(registry.reverse_table(store).values()) <= supported

    def test_verify_round_trip_reports_nothing(self, registry, store):
        assert registry.verify_round_trip() == []


class TestAliases:
    def test_google_play_aliases_do_not_shadow_published_codes(self, registry):
        published = {
            code: unified
            for unified, code in registry.forward_table(Store.GOOGLE_PLAY).items()
            if code is not None
        }
        for alias, target in GOOGLE_PLAY_ALIASES.items():
            assert published.get(alias, target) == target

    def test_app_store_reverse_table_matches_forward_exactly(self, registry):
        forward_codes = {c for c in registry.forward_table(Store.APP_STORE).values() if c is not None}
        assert set(registry.reverse_table(Store.APP_STORE)) == forward_codes
