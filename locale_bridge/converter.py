# locale_bridge/converter.py
# =========================================================================
# LOCALE CONVERTER: Public conversion functions for storefront pipelines
#
# This module converts between:
# 1. Unified locales (keys for stored localized content, e.g. 'zh-Hans')
# 2. App Store Connect locale codes (e.g. 'zh-Hans', 'es-MX', 'ar-SA')
# 3. Google Play Console locale codes (e.g. 'zh-CN', 'es-419', 'iw-IL')
#
# Forward lookups return None when a store does not carry a language.
# Reverse lookups raise UnknownPlatformLocaleError for codes they do not
# recognise; no default locale is ever substituted.
# =========================================================================

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

import structlog

from locale_bridge.core.domain.exceptions import LocaleKeyCollisionError
from locale_bridge.core.domain.locale_table import DEFAULT_LOCALE, UNIFIED_LOCALES
from locale_bridge.core.domain.models import PlatformCodes, Store
from locale_bridge.core.registry import REGISTRY
from locale_bridge.shared.config import settings

logger = structlog.get_logger()

T = TypeVar("T")

DropCallback = Callable[[str], None]

# --- CATALOG ---

def is_supported_locale(code: object) -> bool:
    """True when `code` is a unified locale from the closed catalog."""
    return REGISTRY.is_unified(code)

def locale_display_name(locale: str) -> str:
    """English display name of a unified locale, e.g. 'es-419' -> 'Spanish (Latin America)'."""
    return REGISTRY.row(locale).name

# --- SUPPORTED SETS ---

def compute_app_store_supported() -> Tuple[str, ...]:
    return REGISTRY.supported(Store.APP_STORE)

def compute_google_play_supported() -> Tuple[str, ...]:
    return REGISTRY.supported(Store.GOOGLE_PLAY)

def compute_common_supported() -> Tuple[str, ...]:
    """Unified locales both stores carry, in catalog order."""
    return REGISTRY.common_supported()

APP_STORE_SUPPORTED_LOCALES: Tuple[str, ...] = compute_app_store_supported()
GOOGLE_PLAY_SUPPORTED_LOCALES: Tuple[str, ...] = compute_google_play_supported()
COMMON_SUPPORTED_LOCALES: Tuple[str, ...] = compute_common_supported()

def is_store_locale(code: object, store: Store) -> bool:
    """True when `code` is a unified locale that `store` publishes."""
    forward = REGISTRY.forward_table(store)
    return REGISTRY.is_unified(code) and forward[code] is not None

def is_app_store_locale(code: object) -> bool:
    return is_store_locale(code, Store.APP_STORE)

def is_google_play_locale(code: object) -> bool:
    return is_store_locale(code, Store.GOOGLE_PLAY)

# --- SINGLE CONVERSION ---

def to_store(locale: str, store: Store) -> Optional[str]:
    """
    Converts a unified locale to `store`'s code.
    Returns None if the store does not carry the language.
    Raises UnknownUnifiedLocaleError for codes outside the catalog.
    """
    return REGISTRY.to_store(locale, store)

def from_store(code: str, store: Store) -> str:
    """
    Converts a `store` locale code (aliases included) to its unified locale.
    Raises UnknownPlatformLocaleError for codes the store table does not know.
    """
    return REGISTRY.from_store(code, store)

def unified_to_app_store(locale: str) -> Optional[str]:
    """
    Example: 'ar' -> 'ar-SA', 'zh-Hans' -> 'zh-Hans', 'en-IN' -> None
    """
    return to_store(locale, Store.APP_STORE)

def unified_to_google_play(locale: str) -> Optional[str]:
    """
    Example: 'zh-Hans' -> 'zh-CN', 'he-IL' -> 'iw-IL', 'bg-BG' -> 'bg'
    """
    return to_store(locale, Store.GOOGLE_PLAY)

def unified_to_both_platforms(locale: str) -> PlatformCodes:
    """Returns both store codes for a unified locale."""
    return PlatformCodes(
        app_store=unified_to_app_store(locale),
        google_play=unified_to_google_play(locale),
    )

def app_store_to_unified(code: str) -> str:
    """
    Example: 'ar-SA' -> 'ar', 'es-MX' -> 'es-419', 'ko' -> 'ko-KR'
    """
    return from_store(code, Store.APP_STORE)

def google_play_to_unified(code: str) -> str:
    """
    Example: 'zh-CN' -> 'zh-Hans', 'in' -> 'id-ID', 'iw-IL' -> 'he-IL'
    """
    return from_store(code, Store.GOOGLE_PLAY)

# --- CROSS-PLATFORM ---

def app_store_to_google_play(code: str) -> Optional[str]:
    """
    Pivots an App Store code through the unified locale.
    None means Google Play lacks the language; an unknown App Store code raises.
    """
    return unified_to_google_play(app_store_to_unified(code))

def google_play_to_app_store(code: str) -> Optional[str]:
    """
    Pivots a Google Play code through the unified locale.
    Example: 'zh-TW' -> 'zh-Hant', 'en-IN' -> None
    """
    return unified_to_app_store(google_play_to_unified(code))

# --- BATCH CONVERSION ---

def unified_to_app_store_batch(locales: Iterable[str]) -> List[str]:
    """Converts in order, skipping locales the App Store does not carry."""
    return [code for code in (unified_to_app_store(locale) for locale in locales) if code is not None]

def unified_to_google_play_batch(locales: Iterable[str]) -> List[str]:
    """Converts in order, skipping locales Google Play does not carry."""
    return [code for code in (unified_to_google_play(locale) for locale in locales) if code is not None]

def app_store_to_unified_batch(codes: Iterable[str]) -> List[str]:
    return [app_store_to_unified(code) for code in codes]

def google_play_to_unified_batch(codes: Iterable[str]) -> List[str]:
    return [google_play_to_unified(code) for code in codes]

# --- KEYED CONVERSION ---

def _report_drop(key: str, store: Store, on_drop: Optional[DropCallback]) -> None:
    log = logger.warning if settings.LOG_DROPPED_KEYS else logger.debug
    log("locale_key_dropped", locale=key, store=store.value, reason="unsupported_by_store")
    if on_drop is not None:
        on_drop(key)

def convert_keys_to_store(
    data: Mapping[str, T],
    store: Store,
    on_drop: Optional[DropCallback] = None,
) -> Dict[str, T]:
    """
    Rewrites unified-locale keys to `store` codes, values untouched.

    Keys the store does not carry are dropped; each drop is logged and passed
    to `on_drop`. Keys outside the catalog raise UnknownUnifiedLocaleError.
    """
    store = Store(store)
    result: Dict[str, T] = {}
    for locale, value in data.items():
        code = to_store(locale, store)
        if code is None:
            _report_drop(locale, store, on_drop)
            continue
        result[code] = value
    return result

def convert_keys_from_store(data: Mapping[str, T], store: Store) -> Dict[str, T]:
    """
    Rewrites `store` code keys to unified locales, values untouched.

    Unknown store codes raise UnknownPlatformLocaleError. Two keys naming the
    same language (e.g. 'in' and 'id') raise LocaleKeyCollisionError.
    """
    store = Store(store)
    result: Dict[str, T] = {}
    origin: Dict[str, str] = {}
    for code, value in data.items():
        locale = from_store(code, store)
        if locale in origin:
            raise LocaleKeyCollisionError(locale, [origin[locale], code], store.label)
        origin[locale] = code
        result[locale] = value
    return result

def convert_object_to_app_store(data: Mapping[str, T], on_drop: Optional[DropCallback] = None) -> Dict[str, T]:
    """
    Example: {'ar': a, 'zh-Hans': b, 'en-IN': c} -> {'ar-SA': a, 'zh-Hans': b}
    """
    return convert_keys_to_store(data, Store.APP_STORE, on_drop)

def convert_object_to_google_play(data: Mapping[str, T], on_drop: Optional[DropCallback] = None) -> Dict[str, T]:
    """
    Example: {'zh-Hans': a, 'zh-Hant': b} -> {'zh-CN': a, 'zh-TW': b}
    """
    return convert_keys_to_store(data, Store.GOOGLE_PLAY, on_drop)

def convert_object_from_app_store(data: Mapping[str, T]) -> Dict[str, T]:
    return convert_keys_from_store(data, Store.APP_STORE)

def convert_object_from_google_play(data: Mapping[str, T]) -> Dict[str, T]:
    return convert_keys_from_store(data, Store.GOOGLE_PLAY)

# --- DEFAULT LISTING LOCALE ---

def resolve_default_locale(
    store: Store,
    available: Sequence[str],
    preferred: Optional[str] = None,
) -> Optional[str]:
    """
    Picks the default listing locale for `store` among `available` unified locales.

    Order: `preferred` if the store carries it and it is available, then
    DEFAULT_LOCALE under the same conditions, then the first available locale
    the store carries. Returns None when the store carries none of them.
    """
    store = Store(store)
    candidates = [locale for locale in available if is_store_locale(locale, store)]
    for choice in (preferred, DEFAULT_LOCALE):
        if choice is not None and choice in candidates:
            return choice
    return candidates[0] if candidates else None

__all__ = [
    "DEFAULT_LOCALE",
    "UNIFIED_LOCALES",
    "APP_STORE_SUPPORTED_LOCALES",
    "GOOGLE_PLAY_SUPPORTED_LOCALES",
    "COMMON_SUPPORTED_LOCALES",
    "is_supported_locale",
    "locale_display_name",
    "compute_app_store_supported",
    "compute_google_play_supported",
    "compute_common_supported",
    "is_store_locale",
    "is_app_store_locale",
    "is_google_play_locale",
    "to_store",
    "from_store",
    "unified_to_app_store",
    "unified_to_google_play",
    "unified_to_both_platforms",
    "app_store_to_unified",
    "google_play_to_unified",
    "app_store_to_google_play",
    "google_play_to_app_store",
    "unified_to_app_store_batch",
    "unified_to_google_play_batch",
    "app_store_to_unified_batch",
    "google_play_to_unified_batch",
    "convert_keys_to_store",
    "convert_keys_from_store",
    "convert_object_to_app_store",
    "convert_object_to_google_play",
    "convert_object_from_app_store",
    "convert_object_from_google_play",
    "resolve_default_locale",
]
