"""
Locale Bridge - storefront locale identity resolution.

Translates locale identifiers between the unified catalog used to key
localized content and the App Store Connect / Google Play Console code
spaces, and derives which unified locales each store supports.
"""

from locale_bridge.converter import *  # noqa: F401,F403
from locale_bridge.converter import __all__ as _converter_all
from locale_bridge.core.domain.exceptions import (
    DomainError,
    LocaleKeyCollisionError,
    LocaleTableIntegrityError,
    UnknownPlatformLocaleError,
    UnknownUnifiedLocaleError,
)
from locale_bridge.core.domain.models import LocaleMapping, PlatformCodes, Store

__version__ = "1.0.0"

__all__ = [
    *_converter_all,
    "DomainError",
    "LocaleKeyCollisionError",
    "LocaleTableIntegrityError",
    "UnknownPlatformLocaleError",
    "UnknownUnifiedLocaleError",
    "LocaleMapping",
    "PlatformCodes",
    "Store",
]
