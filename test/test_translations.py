"""
Tests for the translation routes, the override store behind them and
the live editing stream.
"""

import asyncio
import json

import pytest

from wedsite.config import settings
from wedsite.exceptions import DuplicateResourceError, TranslationKeyNotFoundError, ValidationError
from wedsite.i18n.store import LocaleStore
from wedsite.routes.translations import _live_stream
from wedsite.services import translation_service
from wedsite.services.translation_overlay import TranslationOverlay


class TestReadRoutes:
    async def test_all_translations(self, client):
        response = await client.get("/api/translations")

        assert response.status_code == 200
        data = response.json()
        assert data["defaultLanguage"] == "en"
        assert [language["code"] for language in data["languages"]] == ["en", "hy", "ru"]
        assert set(data["translations"]) == {"en", "hy", "ru"}
        assert data["translations"]["en"]["template"]["countdown"]["subtitle"] == "Until our big day"

    async def test_one_language(self, client):
        response = await client.get("/api/translations/HY")

        assert response.status_code == 200
        assert response.json()["language"] == "hy"

    async def test_unsupported_language(self, client):
        response = await client.get("/api/translations/fr")
        assert response.status_code == 404

    async def test_coverage_report(self, client):
        response = await client.get("/api/translations/validate")

        assert response.status_code == 200
        report = response.json()
        assert report["totalKeys"] > 0
        assert "template.ui.messages.offline" in report["missing"]["hy"]
        assert report["isComplete"] is False

    async def test_list_keys_is_public(self, client, test_db):
        await translation_service.create_key("hero.title", test_db, translations={"en": "Hi"})

        response = await client.get("/api/translation-keys")

        assert response.status_code == 200
        assert response.json()[0]["translations"] == {"en": "Hi"}


class TestEditingRoutes:
    async def test_mutations_require_platform_admin(self, client, template_admin_headers):
        body = {"key": "hero.title", "language": "en", "value": "Hi"}

        assert (await client.post("/api/translation-values", json=body)).status_code == 401
        response = await client.post("/api/translation-values", json=body, headers=template_admin_headers)
        assert response.status_code == 403

    async def test_upsert_value_is_visible_immediately(self, client, platform_headers):
        body = {"key": "template.countdown.subtitle", "language": "en", "value": "Almost there"}

        created = await client.post("/api/translation-values", json=body, headers=platform_headers)
        assert created.status_code == 201

        body["value"] = "Any minute now"
        updated = await client.patch("/api/translation-values", json=body, headers=platform_headers)
        assert updated.status_code == 200
        assert updated.json()["value"] == "Any minute now"

        bundle = (await client.get("/api/translations/en")).json()["translations"]
        assert bundle["template"]["countdown"]["subtitle"] == "Any minute now"

    async def test_override_reaches_template_config(self, client, template, platform_headers):
        await client.get("/api/templates/t1/config")
        body = {"key": "template.countdown.subtitle", "language": "en", "value": "Soon"}

        await client.post("/api/translation-values", json=body, headers=platform_headers)

        config = (await client.get("/api/templates/t1/config")).json()["config"]
        assert config["countdown"]["subtitle"] == "Soon"

    async def test_upsert_unsupported_language(self, client, platform_headers):
        body = {"key": "hero.title", "language": "fr", "value": "Salut"}

        response = await client.post("/api/translation-values", json=body, headers=platform_headers)

        assert response.status_code == 400

    async def test_upsert_needs_a_key(self, client, platform_headers):
        response = await client.post(
            "/api/translation-values", json={"language": "en", "value": "x"}, headers=platform_headers
        )
        assert response.status_code == 400

    async def test_key_lifecycle(self, client, platform_headers):
        created = await client.post(
            "/api/translation-keys",
            json={"key": "footer.note", "description": "Small print", "translations": {"en": "See you there"}},
            headers=platform_headers,
        )
        assert created.status_code == 201
        key = created.json()
        assert key["section"] == "footer"

        fetched = await client.get(f"/api/translation-keys/{key['id']}")
        assert fetched.json()["translations"] == {"en": "See you there"}

        patched = await client.patch(
            f"/api/translation-keys/{key['id']}", json={"section": "misc"}, headers=platform_headers
        )
        assert patched.json()["section"] == "misc"
        assert patched.json()["description"] == "Small print"

        deleted = await client.delete(f"/api/translation-keys/{key['id']}", headers=platform_headers)
        assert deleted.status_code == 204
        assert (await client.get(f"/api/translation-keys/{key['id']}")).status_code == 404

        bundle = (await client.get("/api/translations/en")).json()["translations"]
        assert "note" not in bundle.get("footer", {})

    async def test_duplicate_key(self, client, platform_headers):
        body = {"key": "footer.note"}
        await client.post("/api/translation-keys", json=body, headers=platform_headers)

        response = await client.post("/api/translation-keys", json=body, headers=platform_headers)

        assert response.status_code == 409

    async def test_malformed_key(self, client, platform_headers):
        response = await client.post("/api/translation-keys", json={"key": "bad..key"}, headers=platform_headers)
        assert response.status_code == 400

    async def test_reload(self, client, test_db, platform_headers):
        await translation_service.upsert_value("en", "Changed", test_db, key="hero.title")

        response = await client.post("/api/translations/reload", headers=platform_headers)

        assert response.json()["changed"] is True

    async def test_live_requires_platform_admin(self, client, template_admin_headers):
        assert (await client.get("/api/translations/live")).status_code == 401
        response = await client.get("/api/translations/live", headers=template_admin_headers)
        assert response.status_code == 403

    async def test_live_rejects_unknown_language(self, client, platform_headers):
        response = await client.get("/api/translations/live?language=fr", headers=platform_headers)
        assert response.status_code == 404


class FakeRequest:
    def __init__(self):
        self.disconnected = False

    async def is_disconnected(self):
        return self.disconnected


def parse_event(chunk: str) -> tuple[str, dict]:
    event_line, data_line = chunk.strip().split("\n")
    return event_line.removeprefix("event: "), json.loads(data_line.removeprefix("data: "))


@pytest.fixture
def overrides():
    return {}


@pytest.fixture
async def live_overlay(overrides):
    async def loader():
        return {locale: dict(values) for locale, values in overrides.items()}

    overlay = TranslationOverlay(LocaleStore(), loader=loader, poll_interval=0.01)
    await overlay.load()
    yield overlay
    await overlay.close()


class TestLiveStream:
    async def test_stream_sends_bundles_then_updates(self, live_overlay, overrides):
        stream = _live_stream(FakeRequest(), live_overlay, "en")

        event, data = parse_event(await stream.__anext__())
        assert event == "bundles"
        assert set(data["translations"]) == {"en"}
        assert live_overlay.is_polling is True

        overrides["en"] = {"template.countdown.subtitle": "Live edit"}

        event, data = parse_event(await asyncio.wait_for(stream.__anext__(), timeout=2))
        assert data["translations"]["en"]["template"]["countdown"]["subtitle"] == "Live edit"
        assert data["version"] == live_overlay.version

        await stream.aclose()
        assert live_overlay.is_polling is False

    async def test_stream_keepalive(self, live_overlay, monkeypatch):
        monkeypatch.setattr(settings, "sse_keepalive_interval", 0.01)
        stream = _live_stream(FakeRequest(), live_overlay, None)

        await stream.__anext__()
        assert await stream.__anext__() == ": keepalive\n\n"

        await stream.aclose()

    async def test_stream_ends_on_disconnect(self, live_overlay):
        request = FakeRequest()
        stream = _live_stream(request, live_overlay, None)
        await stream.__anext__()

        request.disconnected = True

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()
        assert live_overlay.is_polling is False

    async def test_two_streams_share_polling(self, live_overlay):
        first = _live_stream(FakeRequest(), live_overlay, None)
        second = _live_stream(FakeRequest(), live_overlay, None)
        await first.__anext__()
        await second.__anext__()

        await first.aclose()
        assert live_overlay.is_polling is True

        await second.aclose()
        assert live_overlay.is_polling is False


class TestTranslationService:
    async def test_fetch_overrides(self, test_db):
        await translation_service.create_key("hero.title", test_db, translations={"en": "Hi", "hy": "Բարև"})

        overrides = await translation_service.fetch_overrides(test_db)

        assert overrides == {"en": {"hero.title": "Hi"}, "hy": {"hero.title": "Բարև"}}

    async def test_create_key_rejects_unknown_language(self, test_db):
        with pytest.raises(ValidationError):
            await translation_service.create_key("hero.title", test_db, translations={"fr": "Salut"})

    async def test_create_key_twice(self, test_db):
        await translation_service.create_key("hero.title", test_db)
        with pytest.raises(DuplicateResourceError):
            await translation_service.create_key("hero.title", test_db)

    async def test_get_missing_key(self, test_db):
        with pytest.raises(TranslationKeyNotFoundError):
            await translation_service.get_key(999, test_db)

    async def test_upsert_by_key_id(self, test_db):
        key = await translation_service.create_key("hero.title", test_db)

        _, created = await translation_service.upsert_value("ru", "Привет", test_db, key_id=key.id)
        row, created_again = await translation_service.upsert_value("ru", "Здравствуйте", test_db, key_id=key.id)

        assert created is True
        assert created_again is False
        assert row.value == "Здравствуйте"

    def test_coverage_report(self):
        store = LocaleStore({"en": {"a": "A", "b": "B"}, "hy": {"a": "Ա", "b": ""}})

        report = translation_service.coverage_report(store, {"hy": {"c": "Գ"}})

        assert report["total_keys"] == 3
        assert report["missing"] == {"en": ["c"], "hy": ["b"]}
        assert report["empty"] == {"en": 0, "hy": 1}
        assert report["is_complete"] is False
