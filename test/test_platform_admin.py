"""
Tests for platform administration: template CRUD, cloning and admin accounts.
"""

import pytest
from sqlalchemy import select

from utils.mock_utils import create_test_image, create_test_template
from wedsite.exceptions import DuplicateResourceError, TemplateNotFoundError, ValidationError
from wedsite.models.image import ImageCategory, TemplateImage
from wedsite.services import template_service


class TestTemplateService:
    async def test_slug_derived_from_name(self, test_db):
        template = await template_service.create_template("Anna & Dávid", test_db)
        assert template.slug == "anna-david"

    async def test_derived_slug_gets_suffix(self, test_db):
        await template_service.create_template("Anna & David", test_db)
        second = await template_service.create_template("Anna & David", test_db)
        third = await template_service.create_template("Anna & David", test_db)

        assert second.slug == "anna-david-2"
        assert third.slug == "anna-david-3"

    async def test_explicit_slug_must_be_free(self, test_db):
        await template_service.create_template("One", test_db, slug="ours")
        with pytest.raises(DuplicateResourceError):
            await template_service.create_template("Two", test_db, slug="ours")

    async def test_legacy_looking_slug_rejected(self, test_db):
        with pytest.raises(ValidationError):
            await template_service.create_template("Old", test_db, slug="t/old")

    async def test_unknown_template_key(self, test_db):
        with pytest.raises(ValidationError) as exc_info:
            await template_service.create_template("X", test_db, template_key="vintage")
        assert exc_info.value.details["field"] == "templateKey"

    async def test_invalid_config_rejected(self, test_db):
        with pytest.raises(ValidationError) as exc_info:
            await template_service.create_template("X", test_db, config={"rsvp": {"maxGuests": "many"}})
        assert exc_info.value.details["field"] == "config"

    async def test_clone_copies_config_and_images(self, test_db):
        source = await create_test_template(
            test_db, "source", template_key="classic", maintenance=True, config={"wedding": {"venue": "Barn"}}
        )
        await create_test_image(test_db, source.id, "https://cdn/h.jpg", ImageCategory.hero)

        clone = await template_service.clone_template(source.id, "Copy", test_db)

        assert clone.slug == "copy"
        assert clone.template_key == "classic"
        assert clone.config == {"wedding": {"venue": "Barn"}}
        assert clone.source_template_id == source.id
        assert clone.maintenance is False
        assert clone.is_active is True
        images = (await test_db.execute(select(TemplateImage).where(TemplateImage.template_id == clone.id))).scalars()
        assert [image.url for image in images] == ["https://cdn/h.jpg"]

    async def test_clone_missing_source(self, test_db):
        with pytest.raises(TemplateNotFoundError):
            await template_service.clone_template("missing", "Copy", test_db)

    async def test_update_config_merges_sections(self, test_db, template):
        updated = await template_service.update_config(template, {"wedding": {"venue": "Lakeside"}}, test_db)

        assert updated.config["wedding"] == {"date": "2026-09-12", "venue": "Lakeside"}
        assert updated.config["couple"] == {"combinedNames": "Anna & David"}

    async def test_update_config_replace(self, test_db, template):
        updated = await template_service.update_config(template, {"footer": {}}, test_db, replace=True)
        assert updated.config == {"footer": {}}

    async def test_update_config_drops_composed_cache(self, test_db, template, composer):
        await composer.compose(template, "en", test_db)

        await template_service.update_config(template, {"wedding": {"venue": "Lakeside"}}, test_db, composer)

        assert composer.cache_stats()["size"] == 0

    def test_verify_maintenance_password(self):
        assert template_service.verify_maintenance_password("secret", "secret") is True
        assert template_service.verify_maintenance_password("secret", "Secret") is False
        assert template_service.verify_maintenance_password(None, "") is False
        assert template_service.verify_maintenance_password("", "") is False


class TestPlatformAdminRoutes:
    async def test_requires_platform_admin(self, client, template_admin_headers):
        assert (await client.get("/api/platform-admin/templates")).status_code == 401
        response = await client.get("/api/platform-admin/templates", headers=template_admin_headers)
        assert response.status_code == 403

    async def test_create_and_list(self, client, platform_headers):
        created = await client.post(
            "/api/platform-admin/templates",
            json={"name": "Mary & Tom", "templateKey": "romantic", "ownerEmail": "mary@example.com"},
            headers=platform_headers,
        )

        assert created.status_code == 201
        assert created.json()["slug"] == "mary-tom"
        listed = await client.get("/api/platform-admin/templates", headers=platform_headers)
        assert [item["slug"] for item in listed.json()] == ["mary-tom"]

    async def test_create_rejects_bad_slug(self, client, platform_headers):
        response = await client.post(
            "/api/platform-admin/templates", json={"name": "X", "slug": "Bad Slug"}, headers=platform_headers
        )
        assert response.status_code == 400

    async def test_create_duplicate_slug(self, client, template, platform_headers):
        response = await client.post(
            "/api/platform-admin/templates", json={"name": "X", "slug": "t1"}, headers=platform_headers
        )
        assert response.status_code == 409

    async def test_update_slug_and_deactivate(self, client, template, platform_headers):
        response = await client.patch(
            f"/api/platform-admin/templates/{template.id}",
            json={"slug": "anna-david", "isActive": False},
            headers=platform_headers,
        )

        assert response.status_code == 200
        assert response.json()["slug"] == "anna-david"
        assert (await client.get("/api/templates/anna-david/config")).status_code == 404

    async def test_update_slug_taken(self, client, template, other_template, platform_headers):
        response = await client.patch(
            f"/api/platform-admin/templates/{template.id}", json={"slug": "t2"}, headers=platform_headers
        )
        assert response.status_code == 409

    async def test_get_missing_template(self, client, platform_headers):
        response = await client.get("/api/platform-admin/templates/missing", headers=platform_headers)
        assert response.status_code == 404

    async def test_clone(self, client, template, platform_headers):
        response = await client.post(
            f"/api/platform-admin/templates/{template.id}/clone",
            json={"name": "Anna & David Copy", "slug": "copy"},
            headers=platform_headers,
        )

        assert response.status_code == 201
        assert response.json()["sourceTemplateId"] == template.id
        config = (await client.get("/api/templates/copy/config")).json()["config"]
        assert config["couple"]["combinedNames"] == "Anna & David"

    async def test_create_template_admin(self, client, template, platform_headers):
        response = await client.post(
            "/api/platform-admin/admins",
            json={"email": "Owner@Example.com", "password": "long-enough", "templateId": template.id},
            headers=platform_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "owner@example.com"
        assert data["role"] == "template_admin"
        assert data["templateId"] == template.id

        login = await client.post("/api/auth/login", json={"email": "owner@example.com", "password": "long-enough"})
        assert login.status_code == 200

    async def test_template_admin_needs_template(self, client, platform_headers):
        response = await client.post(
            "/api/platform-admin/admins",
            json={"email": "owner@example.com", "password": "long-enough"},
            headers=platform_headers,
        )
        assert response.status_code == 400

    async def test_template_admin_for_missing_template(self, client, platform_headers):
        response = await client.post(
            "/api/platform-admin/admins",
            json={"email": "owner@example.com", "password": "long-enough", "templateId": "missing"},
            headers=platform_headers,
        )
        assert response.status_code == 404

    async def test_duplicate_admin_email(self, client, platform_headers):
        response = await client.post(
            "/api/platform-admin/admins",
            json={"email": "platform@example.com", "password": "long-enough", "role": "platform_admin"},
            headers=platform_headers,
        )
        assert response.status_code == 409

    async def test_short_password(self, client, template, platform_headers):
        response = await client.post(
            "/api/platform-admin/admins",
            json={"email": "owner@example.com", "password": "short", "templateId": template.id},
            headers=platform_headers,
        )
        assert response.status_code == 400
