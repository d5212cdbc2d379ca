"""
Tests for rate limiting

Limiter configuration, per-bucket accounting over HTTP, the 429 body and
headers, window expiry and the development bypass.
"""

import time

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError as SettingsValidationError
from slowapi import Limiter

from wedsite.config import Settings, settings
from wedsite.main import app
from wedsite.middleware.rate_limit import (
    API_LIMIT,
    RSVP_LIMIT,
    configure_rate_limiting,
    get_rate_limiter,
    limiter,
    rate_limiting_enabled,
)


def rsvp_body(n: int) -> dict:
    return {
        "firstName": "Guest",
        "lastName": str(n),
        "email": f"guest{n}@example.com",
        "attendance": "attending",
        "guestCount": 1,
    }


class TestRateLimiter:
    def test_limiter_is_initialized(self):
        assert isinstance(limiter, Limiter)
        assert get_rate_limiter() is limiter

    def test_limiter_has_headers_enabled(self):
        assert limiter._headers_enabled is True

    def test_limiter_enabled_outside_development(self):
        assert limiter.enabled is True

    def test_bucket_limits(self):
        assert RSVP_LIMIT == "5/hour"
        assert API_LIMIT == "100/15minutes"


class TestConfigureRateLimiting:
    def test_configure_rate_limiting_sets_app_state(self):
        class MockApp:
            def __init__(self):
                self.state = type("State", (), {})()
                self._exception_handlers = {}

            def add_exception_handler(self, exc_class, handler):
                self._exception_handlers[exc_class] = handler

        mock_app = MockApp()
        configure_rate_limiting(mock_app)

        assert mock_app.state.limiter is limiter
        assert len(mock_app._exception_handlers) == 1

    def test_app_has_limiter(self):
        assert app.state.limiter is limiter


class TestDevelopmentBypass:
    def test_bypass_only_in_development(self, monkeypatch):
        monkeypatch.setattr(settings, "rate_limit_dev_bypass", True)

        monkeypatch.setattr(settings, "environment", "development")
        assert rate_limiting_enabled() is False

        monkeypatch.setattr(settings, "environment", "staging")
        assert rate_limiting_enabled() is True

    def test_bypass_flag_refused_in_production(self):
        with pytest.raises(SettingsValidationError):
            Settings(environment="production", rate_limit_dev_bypass=True)


class TestRsvpBucket:
    async def test_sixth_submission_in_an_hour_is_rejected(self, client, template):
        for n in range(5):
            response = await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(n))
            assert response.status_code == 201

        response = await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(5))

        assert response.status_code == 429
        body = response.json()
        assert body["success"] is False
        assert "Too many RSVP submissions" in body["error"]
        assert response.headers["RateLimit-Limit"] == "5"
        assert response.headers["RateLimit-Remaining"] == "0"
        assert int(response.headers["Retry-After"]) > 0

    async def test_rejected_submissions_still_count(self, client, template):
        for _ in range(5):
            # Same email every time: one 201 then duplicates
            await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(0))

        response = await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(1))

        assert response.status_code == 429

    async def test_invalid_bodies_count(self, client, template):
        for n in range(5):
            response = await client.post(
                f"/api/templates/{template.id}/rsvp", json={**rsvp_body(n), "attendance": "maybe"}
            )
            assert response.status_code == 400

        response = await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(5))

        assert response.status_code == 429

    async def test_new_window_accepts_again(self, client, template, monkeypatch):
        for n in range(5):
            await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(n))
        assert (await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(5))).status_code == 429

        real_time = time.time
        monkeypatch.setattr(time, "time", lambda: real_time() + 3601)

        response = await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(6))
        assert response.status_code == 201

    async def test_limit_is_per_ip(self, client, template):
        for n in range(5):
            await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(n))

        transport = ASGITransport(app=app, client=("10.0.0.2", 123))
        async with AsyncClient(transport=transport, base_url="http://test") as other:
            response = await other.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(10))

        assert response.status_code == 201

    async def test_other_buckets_unaffected(self, client, template):
        for n in range(6):
            await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(n))

        response = await client.get("/api/templates/t1/config")

        assert response.status_code == 200

    async def test_limit_shared_across_templates(self, client, template, other_template):
        for n in range(5):
            await client.post(f"/api/templates/{template.id}/rsvp", json=rsvp_body(n))

        response = await client.post(f"/api/templates/{other_template.id}/rsvp", json=rsvp_body(9))

        assert response.status_code == 429


class TestAuthBucket:
    async def test_eleventh_login_attempt_rejected(self, client, setup_test_database):
        credentials = {"email": "nobody@example.com", "password": "wrong-password"}
        for _ in range(10):
            response = await client.post("/api/auth/login", json=credentials)
            assert response.status_code == 401

        response = await client.post("/api/auth/login", json=credentials)

        assert response.status_code == 429
        assert response.json()["success"] is False
