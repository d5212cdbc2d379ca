"""
Exception handlers

Every error leaves the API in one shape:

    {
        "message": "An RSVP has already been submitted with this email",
        "error": {
            "status_code": 400,
            "error_code": "RSVP_ALREADY_SUBMITTED",
            "message": "...",
            "type": "Bad Request",
            "details": {...},
            "path": "/api/templates/<id>/rsvp"
        }
    }

Guest forms only read the top-level ``message`` (already localized where
it matters); admin tooling switches on ``error.error_code``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from wedsite.exceptions import ErrorCode, InvalidTemplateIdentifierError, WeddingSiteError

logger = logging.getLogger(__name__)

ERROR_TYPES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    429: "Too Many Requests",
    500: "Internal Server Error",
    503: "Service Unavailable",
}

HTTP_ERROR_CODES = {
    400: ErrorCode.VALIDATION_FAILED,
    401: ErrorCode.AUTH_FAILED,
    403: ErrorCode.AUTH_PERMISSION_DENIED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    405: ErrorCode.INVALID_OPERATION,
    409: ErrorCode.VALIDATION_DUPLICATE_RESOURCE,
    429: ErrorCode.RATE_LIMIT_EXCEEDED,
    500: ErrorCode.INTERNAL_ERROR,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def get_error_type(status_code: int) -> str:
    return ERROR_TYPES.get(status_code, "Error")


def get_http_error_code(status_code: int) -> str:
    return HTTP_ERROR_CODES.get(status_code, ErrorCode.UNKNOWN_ERROR).value


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Render the standard error body. Empty optional parts are left out."""
    error: dict[str, Any] = {
        "status_code": status_code,
        "message": message,
        "type": get_error_type(status_code),
    }
    if error_code:
        error["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code
    if details:
        error["details"] = details
    if path:
        error["path"] = path
    return JSONResponse(status_code=status_code, content={"message": message, "error": error})


def canonical_redirect(request: Request, exc: InvalidTemplateIdentifierError) -> RedirectResponse:
    """Same URL with the identifier segment swapped for its canonical slug."""
    path = request.url.path
    segments = path.split("/")
    if exc.identifier in segments:
        segments[segments.index(exc.identifier)] = exc.canonical
        target = "/".join(segments)
    else:
        target = path.replace(exc.identifier, exc.canonical, 1)
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return RedirectResponse(url=target, status_code=status.HTTP_308_PERMANENT_REDIRECT)


async def wedsite_exception_handler(request: Request, exc: WeddingSiteError):
    if isinstance(exc, InvalidTemplateIdentifierError):
        logger.info("Redirecting template identifier %r to %r", exc.identifier, exc.canonical)
        return canonical_redirect(request, exc)

    server_side = exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR
    logger.log(
        logging.ERROR if server_side else logging.WARNING,
        "%s: %s",
        exc.error_code.value,
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=None if server_side else exc.details,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    response = create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        error_code=get_http_error_code(exc.status_code),
        path=request.url.path,
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    """Malformed payloads are client errors: 400 with one entry per field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation failed on %s (%d errors)", request.url.path, len(errors))
    return create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        message="Validation error",
        error_code=ErrorCode.VALIDATION_FAILED,
        details={"validation_errors": errors},
        path=request.url.path,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=GENERIC_ERROR_MESSAGE,
        error_code=ErrorCode.INTERNAL_ERROR,
        path=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WeddingSiteError, wedsite_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
