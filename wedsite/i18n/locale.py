"""
Locale negotiation

Maps whatever a browser or guest form sends (``hy-AM``, ``RU``,
``Accept-Language`` lists) onto one of the supported locale codes.
"""

from __future__ import annotations

# Endonyms, shown in the language switcher
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "hy": "Հայերեն",
    "ru": "Русский",
}


def normalize_locale(value: str | None, supported: list[str]) -> str | None:
    """Return ``value`` as a supported locale code, or None.

    Region subtags are dropped (``hy-AM`` -> ``hy``); case and surrounding
    whitespace are ignored.
    """
    if not value:
        return None
    tag = value.strip().lower().replace("_", "-")
    if tag in supported:
        return tag
    language = tag.partition("-")[0]
    return language if language in supported else None


def _quality(params: str) -> float:
    for param in params.split(";"):
        name, _, value = param.strip().partition("=")
        if name == "q":
            try:
                return float(value)
            except ValueError:
                return 1.0
    return 1.0


def parse_accept_language(header: str, supported: list[str]) -> str | None:
    """Best supported locale for an ``Accept-Language`` header, or None.

    Tags are tried by descending q-value, header order breaking ties.
    ``q=0`` means "not acceptable" and is skipped.
    """
    if not header:
        return None

    candidates = []
    for position, item in enumerate(header.split(",")):
        tag, _, params = item.strip().partition(";")
        if not tag:
            continue
        quality = _quality(params)
        if quality > 0:
            candidates.append((-quality, position, tag))

    for _, _, tag in sorted(candidates):
        locale = normalize_locale(tag, supported)
        if locale:
            return locale
    return None


def get_language_info(locale: str) -> dict[str, str]:
    return {"code": locale, "name": LANGUAGE_NAMES.get(locale, locale)}
