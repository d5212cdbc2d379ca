"""
Rate Limiting for FastAPI

Five independent per-IP buckets, each a slowapi shared limit so every
route in a bucket draws from the same counter. Counters live in the
``limits`` storage named by ``settings.rate_limit_storage_uri``
(``memory://`` by default, ``redis://...`` when running several workers).

Routes opt in by decorating the endpoint with the bucket decorator; the
endpoint must accept ``request: Request`` and ``response: Response``
so slowapi can read the client address and attach headers.
"""

import logging
import math
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from wedsite.config import settings

logger = logging.getLogger(__name__)

API_LIMIT = "100/15minutes"
RSVP_LIMIT = "5/hour"
AUTH_LIMIT = "10/15minutes"
ADMIN_LIMIT = "50/15minutes"
UPLOAD_LIMIT = "20/15minutes"


def rate_limiting_enabled() -> bool:
    """False only for local development with the bypass flag set.

    Settings refuse the bypass flag in production, so this can never
    switch limiting off there.
    """
    return not (settings.environment == "development" and settings.rate_limit_dev_bypass)


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[API_LIMIT],
    storage_uri=settings.rate_limit_storage_uri,
    headers_enabled=True,
    enabled=rate_limiting_enabled(),
)

api_limit = limiter.shared_limit(
    API_LIMIT, scope="api", error_message="Too many requests from this IP, please try again later."
)
rsvp_limit = limiter.shared_limit(
    RSVP_LIMIT, scope="rsvp", error_message="Too many RSVP submissions from this IP, please try again later."
)
auth_limit = limiter.shared_limit(
    AUTH_LIMIT, scope="auth", error_message="Too many authentication attempts, please try again later."
)
admin_limit = limiter.shared_limit(
    ADMIN_LIMIT, scope="admin", error_message="Too many admin requests, please try again later."
)
upload_limit = limiter.shared_limit(
    UPLOAD_LIMIT, scope="upload", error_message="Too many uploads from this IP, please try again later."
)


def get_rate_limiter():
    """Get the rate limiter instance."""
    return limiter


def rate_limit_headers(request: Request) -> dict[str, str]:
    """Standard ``RateLimit-*`` and ``Retry-After`` headers for the limit just evaluated."""
    current = getattr(request.state, "view_rate_limit", None)
    if not current:
        return {}
    item, args = current
    reset_at, remaining = limiter.limiter.get_window_stats(item, *args)
    seconds_left = max(0, math.ceil(reset_at - time.time()))
    return {
        "RateLimit-Limit": str(item.amount),
        "RateLimit-Remaining": str(max(0, remaining)),
        "RateLimit-Reset": str(seconds_left),
        "Retry-After": str(seconds_left),
    }


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a rejected request as ``{"success": false, "error": ...}`` with 429."""
    logger.warning(
        "Rate limit exceeded for %s on %s: %s",
        get_remote_address(request),
        request.url.path,
        exc.detail,
        extra={"path": request.url.path, "status_code": 429},
    )
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": exc.detail},
        headers=rate_limit_headers(request),
    )


def configure_rate_limiting(app):
    """
    Configure rate limiting for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    if not limiter.enabled:
        logger.warning("Rate limiting is disabled (development bypass)")
