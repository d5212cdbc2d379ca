"""
Language Detection Middleware

Sets request.state.locale from:
  1. X-Language request header
  2. ``preferred-language`` cookie (written by the client, never by us)
  3. Accept-Language header (quality-weighted, best-match)
  4. settings.default_language (fallback)

No DB lookups and no server-side session; pure header parsing.

A request whose X-Language differs from the stored cookie is the client
switching locale; the overlay's merged section cache for the new locale
is dropped so the switch never serves stale section objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from wedsite.config import settings
from wedsite.i18n.locale import normalize_locale, parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response

logger = logging.getLogger(__name__)

LANGUAGE_COOKIE = "preferred-language"


def detect_locale(request: Request) -> str:
    """Pick the request locale following the detection order above."""
    supported = settings.supported_languages
    locale = normalize_locale(request.headers.get("X-Language"), supported)
    if locale is None:
        locale = normalize_locale(request.cookies.get(LANGUAGE_COOKIE), supported)
    if locale is None:
        locale = parse_accept_language(request.headers.get("Accept-Language", ""), supported)
    return locale or settings.default_language


def switched_locale(request: Request) -> str | None:
    """The locale being switched to, or None when the request does not switch."""
    supported = settings.supported_languages
    requested = normalize_locale(request.headers.get("X-Language"), supported)
    stored = normalize_locale(request.cookies.get(LANGUAGE_COOKIE), supported)
    if requested is None or stored is None or requested == stored:
        return None
    return requested


class LanguageMiddleware(BaseHTTPMiddleware):
    """Detect the request locale and attach it to request.state.locale."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.locale = detect_locale(request)

        switched = switched_locale(request)
        overlay = getattr(request.app.state, "overlay", None)
        if switched and overlay is not None:
            overlay.invalidate_sections(switched)
            logger.debug("Locale switch to %s, section cache dropped", switched)

        response = await call_next(request)
        response.headers.setdefault("Content-Language", request.state.locale)
        return response
