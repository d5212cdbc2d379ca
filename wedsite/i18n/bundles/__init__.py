"""Static per-locale translation bundles shipped with the application."""

from . import en, hy, ru

STATIC_BUNDLES: dict[str, dict] = {
    "en": en.BUNDLE,
    "hy": hy.BUNDLE,
    "ru": ru.BUNDLE,
}

__all__ = ["STATIC_BUNDLES"]
