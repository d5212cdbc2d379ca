"""
Custom Exception Classes for the wedding site platform

This module defines custom exceptions for better error handling and
consistent error responses across the application.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned alongside every error response."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"

    AUTH_FAILED = "AUTH_FAILED"
    AUTH_INVALID_CREDENTIALS = "AUTH_INVALID_CREDENTIALS"
    AUTH_PERMISSION_DENIED = "AUTH_PERMISSION_DENIED"

    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_IDENTIFIER_INVALID = "TEMPLATE_IDENTIFIER_INVALID"
    TEMPLATE_TYPE_UNSUPPORTED = "TEMPLATE_TYPE_UNSUPPORTED"
    TEMPLATE_MAINTENANCE = "TEMPLATE_MAINTENANCE"

    VALIDATION_FAILED = "VALIDATION_FAILED"
    VALIDATION_DUPLICATE_RESOURCE = "VALIDATION_DUPLICATE_RESOURCE"
    RSVP_ALREADY_SUBMITTED = "RSVP_ALREADY_SUBMITTED"
    INVALID_OPERATION = "INVALID_OPERATION"

    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


class WeddingSiteError(Exception):
    """Base exception class for all platform errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Authentication & Authorization Exceptions
# ============================================================================


class AuthenticationError(WeddingSiteError):
    """Raised when authentication fails"""

    def __init__(self, message: str = "Authentication failed", details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details or {},
            error_code=ErrorCode.AUTH_FAILED,
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid"""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message=message)
        self.error_code = ErrorCode.AUTH_INVALID_CREDENTIALS


class AuthorizationError(WeddingSiteError):
    """Raised when an admin lacks permission for an action"""

    def __init__(
        self, message: str = "You do not have permission to perform this action", required_role: str | None = None
    ):
        details = {"required_role": required_role} if required_role else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code=ErrorCode.AUTH_PERMISSION_DENIED,
        )


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(WeddingSiteError):
    """Base class for resource not found errors"""

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            error_code=ErrorCode.RESOURCE_NOT_FOUND,
        )


class TemplateNotFoundError(ResourceNotFoundError):
    """Raised when a template identifier does not resolve to a template.

    ``reason`` distinguishes an unknown identifier from a permanently
    blocked legacy one; both render as 404.
    """

    def __init__(self, identifier: Any | None = None, reason: str = "unknown"):
        super().__init__(resource_type="Template", resource_id=identifier)
        self.message = "Template not found"
        self.error_code = ErrorCode.TEMPLATE_NOT_FOUND
        self.reason = reason
        self.details["reason"] = reason


class TranslationKeyNotFoundError(ResourceNotFoundError):
    """Raised when a translation key is not found"""

    def __init__(self, key_id: Any | None = None):
        super().__init__(resource_type="Translation key", resource_id=key_id)


class PricingPlanNotFoundError(ResourceNotFoundError):
    """Raised when a pricing plan is not found"""

    def __init__(self, plan_id: Any | None = None):
        super().__init__(resource_type="Pricing plan", resource_id=plan_id)


# ============================================================================
# Template Exceptions
# ============================================================================


class InvalidTemplateIdentifierError(WeddingSiteError):
    """Raised when an identifier is not canonical but maps to a valid slug.

    Routes answer with a redirect to ``canonical`` instead of a 404.
    """

    def __init__(self, identifier: str, canonical: str):
        super().__init__(
            message=f"Template identifier '{identifier}' is not canonical",
            status_code=status.HTTP_308_PERMANENT_REDIRECT,
            details={"identifier": identifier, "canonical": canonical},
            error_code=ErrorCode.TEMPLATE_IDENTIFIER_INVALID,
        )
        self.identifier = identifier
        self.canonical = canonical


class UnsupportedTemplateTypeError(WeddingSiteError):
    """Raised when a template's type key has no registered defaults"""

    def __init__(self, template_key: str):
        super().__init__(
            message=f"Unsupported template type '{template_key}'",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"template_key": template_key},
            error_code=ErrorCode.TEMPLATE_TYPE_UNSUPPORTED,
        )
        self.template_key = template_key


class MaintenanceModeError(WeddingSiteError):
    """Raised when a guest-facing write hits a template in maintenance mode"""

    def __init__(self, message: str = "Template is in maintenance mode"):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code=ErrorCode.TEMPLATE_MAINTENANCE,
        )


# ============================================================================
# Validation & Business Logic Exceptions
# ============================================================================


class ValidationError(WeddingSiteError):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=error_details,
            error_code=ErrorCode.VALIDATION_FAILED,
        )


class DuplicateResourceError(WeddingSiteError):
    """Raised when attempting to create a duplicate resource"""

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
            error_code=ErrorCode.VALIDATION_DUPLICATE_RESOURCE,
        )


class DuplicateRsvpError(WeddingSiteError):
    """Raised when an RSVP email was already used for the same template.

    Guest-facing, so the message is localized by the caller and the status
    stays 400 to match what guest forms expect.
    """

    def __init__(self, message: str = "An RSVP has already been submitted with this email"):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ErrorCode.RSVP_ALREADY_SUBMITTED,
        )


class InvalidOperationError(WeddingSiteError):
    """Raised when an operation is invalid in the current context"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details or {},
            error_code=ErrorCode.INVALID_OPERATION,
        )

