"""
i18n (Internationalization) package

Static locale bundles, dotted-path lookup with fallback, and
Accept-Language negotiation for the three supported locales.
"""

from .locale import (
    LANGUAGE_NAMES,
    get_language_info,
    normalize_locale,
    parse_accept_language,
)
from .store import LocaleStore, flatten, get_path, should_render, unflatten

__all__ = [
    "LANGUAGE_NAMES",
    "LocaleStore",
    "flatten",
    "get_language_info",
    "get_path",
    "normalize_locale",
    "parse_accept_language",
    "should_render",
    "unflatten",
]
