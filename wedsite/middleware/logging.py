"""
Request logging

Every request gets an id (taken from ``X-Request-ID`` or generated), which
is echoed back on the response and attached to each log record written
while the request is served. One access record per request goes to the
``wedsite.access`` logger with the guest-facing context that matters when
reading logs for a single wedding site: template, locale, admin.
"""

import json
import logging
import re
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

ACCESS_LOGGER = "wedsite.access"
QUIET_PATHS = frozenset({"/health", "/api/health"})

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_TEMPLATE_PATH = re.compile(r"^/api/(?:platform-admin/)?templates/([^/]+)")

# Attributes copied from ``extra=`` into the JSON line when present
_CONTEXT_FIELDS = (
    "method",
    "path",
    "status_code",
    "duration_ms",
    "client_ip",
    "template_id",
    "locale",
    "admin_id",
    "error_code",
)


def get_request_id() -> str:
    return request_id_var.get()


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Access records carry their own id; the context var is reset by then
        if not getattr(record, "request_id", ""):
            record.request_id = request_id_var.get()
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        entry.update({name: getattr(record, name) for name in _CONTEXT_FIELDS if hasattr(record, name)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def client_ip(request: Request) -> str:
    """First hop of X-Forwarded-For, then X-Real-IP, then the socket peer."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else "unknown"


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def access_context(request: Request, status_code: int, duration_ms: float) -> dict:
    context = {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 2),
        "client_ip": client_ip(request),
    }
    match = _TEMPLATE_PATH.match(request.url.path)
    if match:
        context["template_id"] = match.group(1)
    locale = getattr(request.state, "locale", None)
    if locale:
        context["locale"] = locale
    admin = getattr(request.state, "admin", None)
    if admin is not None:
        context["admin_id"] = admin.id
    return context


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, logger_name: str = ACCESS_LOGGER):
        super().__init__(app)
        self.access_log = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            self._access(request, 500, started, request_id, error=repr(e))
            raise
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        self._access(request, response.status_code, started, request_id)
        return response

    def _access(
        self, request: Request, status_code: int, started: float, request_id: str, error: str | None = None
    ) -> None:
        if request.url.path in QUIET_PATHS:
            return

        context = access_context(request, status_code, (time.perf_counter() - started) * 1000)
        context["request_id"] = request_id
        message = "%s %s %s"
        args = [request.method, request.url.path, status_code]
        if error:
            message += " (%s)"
            args.append(error)
        self.access_log.log(level_for_status(status_code), message, *args, extra=context)


def configure_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """Install a single stream handler on the root logger."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.addFilter(RequestIdFilter())
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    logging.getLogger("wedsite").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
