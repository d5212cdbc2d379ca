"""Request-scoped accessors for the shared i18n and composition services on ``app.state``."""

from fastapi import Request

from wedsite.config import settings
from wedsite.i18n.store import LocaleStore
from wedsite.services.config_composer import ConfigComposer
from wedsite.services.translation_overlay import TranslationOverlay


def get_locale(request: Request) -> str:
    return getattr(request.state, "locale", settings.default_language)


def get_store(request: Request) -> LocaleStore:
    return request.app.state.locale_store


def get_overlay(request: Request) -> TranslationOverlay:
    return request.app.state.overlay


def get_composer(request: Request) -> ConfigComposer:
    return request.app.state.composer
