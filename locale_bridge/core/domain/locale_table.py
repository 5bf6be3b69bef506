# locale_bridge/core/domain/locale_table.py
# =========================================================================
# LOCALE TABLE: Single source of truth for storefront locale identities
#
# Every row links one unified locale (the key used for stored content) to:
# 1. Its App Store Connect locale code (or None if the store lacks it)
# 2. Its Google Play Console locale code (or None if the store lacks it)
#
# The forward and reverse lookups used at runtime are generated from these
# rows by locale_bridge.core.registry. Do not maintain them by hand.
# =========================================================================

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from locale_bridge.core.domain.models import LocaleMapping, Store


def _row(unified: str, name: str, app_store: Optional[str], google_play: Optional[str]) -> LocaleMapping:
    return LocaleMapping(unified=unified, name=name, app_store=app_store, google_play=google_play)


# --- 1. CORE DATA MAPPING ---
# Columns: unified, display name, App Store code, Google Play code
# Region proxies (a store code standing in for a broader unified locale):
#   ar      -> App Store 'ar-SA'
#   es-419  -> App Store 'es-MX'
#   zh-Hans -> Google Play 'zh-CN', zh-Hant -> Google Play 'zh-TW'
#   ms-MY   -> App Store 'ms' (unified 'ms' is Google Play only)
LOCALE_TABLE: Tuple[LocaleMapping, ...] = (
    _row("af", "Afrikaans", None, "af"),
    _row("am", "Amharic", None, "am"),
    _row("ar", "Arabic", "ar-SA", "ar"),
    _row("az-AZ", "Azerbaijani", None, "az-AZ"),
    _row("be", "Belarusian", None, "be"),
    _row("bg-BG", "Bulgarian", None, "bg"),
    _row("bn-BD", "Bengali", None, "bn-BD"),
    _row("ca-ES", "Catalan", "ca", "ca"),
    _row("cs-CZ", "Czech", "cs", "cs-CZ"),
    _row("da-DK", "Danish", "da", "da-DK"),
    _row("de-DE", "German", "de-DE", "de-DE"),
    _row("el-GR", "Greek", "el", "el-GR"),
    _row("en-AU", "English (Australia)", "en-AU", "en-AU"),
    _row("en-CA", "English (Canada)", "en-CA", "en-CA"),
    _row("en-GB", "English (United Kingdom)", "en-GB", "en-GB"),
    _row("en-IN", "English (India)", None, "en-IN"),
    _row("en-SG", "English (Singapore)", None, "en-SG"),
    _row("en-US", "English (United States)", "en-US", "en-US"),
    _row("en-ZA", "English (South Africa)", None, "en-ZA"),
    _row("es-419", "Spanish (Latin America)", "es-MX", "es-419"),
    _row("es-ES", "Spanish (Spain)", "es-ES", "es-ES"),
    _row("es-US", "Spanish (United States)", None, "es-US"),
    _row("et-EE", "Estonian", None, "et"),
    _row("eu-ES", "Basque", None, "eu-ES"),
    _row("fa", "Persian", None, "fa"),
    _row("fa-AE", "Persian (UAE)", None, "fa-AE"),
    _row("fa-AF", "Persian (Afghanistan)", None, "fa-AF"),
    _row("fa-IR", "Persian (Iran)", None, "fa-IR"),
    _row("fi-FI", "Finnish", "fi", "fi-FI"),
    _row("fil", "Filipino", None, "fil"),
    _row("fr-CA", "French (Canada)", "fr-CA", "fr-CA"),
    _row("fr-FR", "French (France)", "fr-FR", "fr-FR"),
    _row("gl-ES", "Galician", None, "gl-ES"),
    _row("gu", "Gujarati", None, "gu"),
    _row("he-IL", "Hebrew", "he", "iw-IL"),
    _row("hi-IN", "Hindi", "hi", "hi-IN"),
    _row("hr-HR", "Croatian", "hr", "hr"),
    _row("hu-HU", "Hungarian", "hu", "hu-HU"),
    _row("hy-AM", "Armenian", None, "hy-AM"),
    _row("id-ID", "Indonesian", "id", "id"),
    _row("is-IS", "Icelandic", None, "is-IS"),
    _row("it-IT", "Italian", "it", "it-IT"),
    _row("ja-JP", "Japanese", "ja", "ja-JP"),
    _row("ka-GE", "Georgian", None, "ka-GE"),
    _row("kk", "Kazakh", None, "kk"),
    _row("km-KH", "Khmer", None, "km-KH"),
    _row("kn-IN", "Kannada", None, "kn-IN"),
    _row("ko-KR", "Korean", "ko", "ko-KR"),
    _row("ky-KG", "Kyrgyz", None, "ky-KG"),
    _row("lo-LA", "Lao", None, "lo-LA"),
    _row("lt-LT", "Lithuanian", None, "lt"),
    _row("lv-LV", "Latvian", None, "lv"),
    _row("mk-MK", "Macedonian", None, "mk-MK"),
    _row("ml-IN", "Malayalam", None, "ml-IN"),
    _row("mn-MN", "Mongolian", None, "mn-MN"),
    _row("mr-IN", "Marathi", None, "mr-IN"),
    _row("ms", "Malay", None, "ms"),
    _row("ms-MY", "Malay (Malaysia)", "ms", "ms-MY"),
    _row("my-MM", "Burmese", None, "my-MM"),
    _row("ne-NP", "Nepali", None, "ne-NP"),
    _row("nl-NL", "Dutch", "nl-NL", "nl-NL"),
    _row("no-NO", "Norwegian", "no", "no-NO"),
    _row("pa", "Punjabi", None, "pa"),
    _row("pl-PL", "Polish", "pl", "pl-PL"),
    _row("pt-BR", "Portuguese (Brazil)", "pt-BR", "pt-BR"),
    _row("pt-PT", "Portuguese (Portugal)", "pt-PT", "pt-PT"),
    _row("rm", "Romansh", None, "rm"),
    _row("ro-RO", "Romanian", "ro", "ro"),
    _row("ru-RU", "Russian", "ru", "ru-RU"),
    _row("si-LK", "Sinhala", None, "si-LK"),
    _row("sk-SK", "Slovak", "sk", "sk"),
    _row("sl-SI", "Slovenian", None, "sl"),
    _row("sq", "Albanian", None, "sq"),
    _row("sr-RS", "Serbian", None, "sr"),
    _row("sv-SE", "Swedish", "sv", "sv-SE"),
    _row("sw", "Swahili", None, "sw"),
    _row("ta-IN", "Tamil", None, "ta-IN"),
    _row("te-IN", "Telugu", None, "te-IN"),
    _row("th-TH", "Thai", "th", "th"),
    _row("tr-TR", "Turkish", "tr", "tr-TR"),
    _row("uk-UA", "Ukrainian", "uk", "uk"),
    _row("ur", "Urdu", None, "ur"),
    _row("vi-VN", "Vietnamese", "vi", "vi"),
    _row("zh-HK", "Chinese (Hong Kong)", None, "zh-HK"),
    _row("zh-Hans", "Chinese (Simplified)", "zh-Hans", "zh-CN"),
    _row("zh-Hant", "Chinese (Traditional)", "zh-Hant", "zh-TW"),
    _row("zu", "Zulu", None, "zu"),
)

# --- 2. LEGACY / ALTERNATE STORE SPELLINGS ---
# Extra reverse-only entries: codes a store may report for a language besides
# the one we publish with. Each must point at a unified locale the store
# carries and must not shadow a published code.
GOOGLE_PLAY_ALIASES: Mapping[str, str] = MappingProxyType({
    "cs": "cs-CZ",
    "da": "da-DK",
    "de": "de-DE",
    "el": "el-GR",
    "es": "es-ES",
    "et-EE": "et-EE",
    "fi": "fi-FI",
    "fr": "fr-FR",
    "he": "he-IL",
    "he-IL": "he-IL",   # Modern spelling of 'iw-IL'
    "hi": "hi-IN",
    "hu": "hu-HU",
    "in": "id-ID",      # Legacy ISO 639 code for Indonesian
    "it": "it-IT",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "lt-LT": "lt-LT",
    "lv-LV": "lv-LV",
    "nl": "nl-NL",
    "no": "no-NO",
    "pl": "pl-PL",
    "ru": "ru-RU",
    "sl-SI": "sl-SI",
    "sv": "sv-SE",
    "tr": "tr-TR",
})

APP_STORE_ALIASES: Mapping[str, str] = MappingProxyType({})

STORE_ALIASES: Mapping[Store, Mapping[str, str]] = MappingProxyType({
    Store.APP_STORE: APP_STORE_ALIASES,
    Store.GOOGLE_PLAY: GOOGLE_PLAY_ALIASES,
})

# --- 3. CATALOG ---
UNIFIED_LOCALES: Tuple[str, ...] = tuple(row.unified for row in LOCALE_TABLE)

# Preferred listing locale when a product does not name one.
DEFAULT_LOCALE: str = "en-US"
