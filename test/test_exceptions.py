"""
Tests for custom exception classes and the global exception handlers
"""

import json

from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from wedsite.exception_handlers import (
    create_error_response,
    get_error_type,
    get_http_error_code,
    register_exception_handlers,
)
from wedsite.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DuplicateResourceError,
    DuplicateRsvpError,
    ErrorCode,
    InvalidCredentialsError,
    InvalidOperationError,
    InvalidTemplateIdentifierError,
    MaintenanceModeError,
    PricingPlanNotFoundError,
    ResourceNotFoundError,
    TemplateNotFoundError,
    TranslationKeyNotFoundError,
    UnsupportedTemplateTypeError,
    ValidationError,
    WeddingSiteError,
)


class TestWeddingSiteError:
    def test_defaults(self):
        exc = WeddingSiteError("Test error")
        assert str(exc) == "Test error"
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}
        assert exc.error_code == ErrorCode.UNKNOWN_ERROR

    def test_custom_status_and_details(self):
        exc = WeddingSiteError("Test error", status_code=400, details={"count": 42})
        assert exc.status_code == 400
        assert exc.details["count"] == 42


class TestAuthExceptions:
    def test_authentication_error(self):
        exc = AuthenticationError()
        assert str(exc) == "Authentication failed"
        assert exc.status_code == status.HTTP_401_UNAUTHORIZED

    def test_invalid_credentials(self):
        exc = InvalidCredentialsError()
        assert isinstance(exc, AuthenticationError)
        assert exc.message == "Invalid email or password"
        assert exc.error_code == ErrorCode.AUTH_INVALID_CREDENTIALS

    def test_authorization_error_with_role(self):
        exc = AuthorizationError(required_role="platform_admin")
        assert exc.status_code == status.HTTP_403_FORBIDDEN
        assert exc.details == {"required_role": "platform_admin"}

    def test_authorization_error_without_role(self):
        assert AuthorizationError().details == {}


class TestNotFoundExceptions:
    def test_resource_not_found(self):
        exc = ResourceNotFoundError("Widget", 7)
        assert exc.message == "Widget with id '7' not found"
        assert exc.status_code == status.HTTP_404_NOT_FOUND

    def test_resource_not_found_without_id(self):
        assert ResourceNotFoundError("Widget").message == "Widget not found"

    def test_template_not_found_carries_reason(self):
        exc = TemplateNotFoundError("t/old", reason="legacy")
        assert exc.message == "Template not found"
        assert exc.reason == "legacy"
        assert exc.details["reason"] == "legacy"
        assert exc.error_code == ErrorCode.TEMPLATE_NOT_FOUND

    def test_subclasses(self):
        assert TranslationKeyNotFoundError(3).details["resource_type"] == "Translation key"
        assert PricingPlanNotFoundError(4).details["resource_id"] == 4


class TestTemplateExceptions:
    def test_invalid_identifier_is_a_redirect(self):
        exc = InvalidTemplateIdentifierError(" T1", "t1")
        assert exc.status_code == status.HTTP_308_PERMANENT_REDIRECT
        assert exc.canonical == "t1"

    def test_unsupported_type(self):
        exc = UnsupportedTemplateTypeError("vintage")
        assert exc.status_code == 500
        assert exc.template_key == "vintage"

    def test_maintenance(self):
        exc = MaintenanceModeError()
        assert exc.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert exc.error_code == ErrorCode.TEMPLATE_MAINTENANCE


class TestValidationExceptions:
    def test_validation_error_with_field(self):
        exc = ValidationError("Bad value", field="config")
        assert exc.status_code == 400
        assert exc.details == {"field": "config"}

    def test_duplicate_resource(self):
        exc = DuplicateResourceError("Template", "slug", "t1")
        assert exc.message == "Template with slug 't1' already exists"
        assert exc.status_code == status.HTTP_409_CONFLICT

    def test_duplicate_rsvp_is_400(self):
        exc = DuplicateRsvpError()
        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.RSVP_ALREADY_SUBMITTED

    def test_invalid_operation(self):
        exc = InvalidOperationError("Nope", details={"direction": "up"})
        assert exc.status_code == 400
        assert exc.details == {"direction": "up"}


class TestErrorResponse:
    def test_body_shape(self):
        response = create_error_response(
            404, "Template not found", ErrorCode.TEMPLATE_NOT_FOUND, {"reason": "unknown"}, "/api/x"
        )

        body = json.loads(response.body)
        assert response.status_code == 404
        assert body["message"] == "Template not found"
        assert body["error"] == {
            "status_code": 404,
            "message": "Template not found",
            "type": "Not Found",
            "error_code": "TEMPLATE_NOT_FOUND",
            "details": {"reason": "unknown"},
            "path": "/api/x",
        }

    def test_optional_parts_omitted(self):
        body = json.loads(create_error_response(400, "Bad").body)
        assert set(body["error"]) == {"status_code", "message", "type"}

    def test_error_types(self):
        assert get_error_type(429) == "Too Many Requests"
        assert get_error_type(418) == "Error"

    def test_http_error_codes(self):
        assert get_http_error_code(404) == "RESOURCE_NOT_FOUND"
        assert get_http_error_code(418) == "UNKNOWN_ERROR"


def handlers_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/templates/{identifier}/config")
    async def config_route(identifier: str):
        raise InvalidTemplateIdentifierError(identifier, identifier.lower())

    @app.get("/unsupported")
    async def unsupported_route():
        raise UnsupportedTemplateTypeError("vintage")

    @app.get("/conflict")
    async def conflict_route():
        raise DuplicateResourceError("Template", "slug", "t1")

    @app.get("/crash")
    async def crash_route():
        raise RuntimeError("database password is hunter2")

    @app.get("/count")
    async def count_route(limit: int):
        return {"limit": limit}

    return app


class TestExceptionHandlers:
    def test_non_canonical_identifier_redirects(self):
        client = TestClient(handlers_app(), follow_redirects=False)

        response = client.get("/templates/T1/config?lang=hy")

        assert response.status_code == 308
        assert response.headers["location"] == "/templates/t1/config?lang=hy"

    def test_client_error_keeps_details(self):
        response = TestClient(handlers_app()).get("/conflict")

        assert response.status_code == 409
        assert response.json()["error"]["details"]["field"] == "slug"

    def test_server_error_hides_details(self):
        response = TestClient(handlers_app()).get("/unsupported")

        assert response.status_code == 500
        assert response.json()["error"]["error_code"] == "TEMPLATE_TYPE_UNSUPPORTED"
        assert "details" not in response.json()["error"]

    def test_unhandled_exception(self):
        client = TestClient(handlers_app(), raise_server_exceptions=False)

        response = client.get("/crash")

        assert response.status_code == 500
        assert "hunter2" not in response.text
        assert response.json()["error"]["error_code"] == "INTERNAL_ERROR"

    def test_request_validation_is_400(self):
        response = TestClient(handlers_app()).get("/count?limit=many")

        assert response.status_code == 400
        errors = response.json()["error"]["details"]["validation_errors"]
        assert errors[0]["field"] == "query.limit"

    def test_unknown_route(self):
        response = TestClient(handlers_app()).get("/nowhere")

        assert response.status_code == 404
        assert response.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"
