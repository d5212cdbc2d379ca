"""
Tests for configurable pricing plans: service ordering rules and routes.
"""

from decimal import Decimal

import pytest

from wedsite.exceptions import DuplicateResourceError, InvalidOperationError, PricingPlanNotFoundError
from wedsite.services import pricing_service


def plan_data(key: str, **fields) -> dict:
    data = {"key": key, "name": key.title(), "price": Decimal("10000"), "features": []}
    data.update(fields)
    return data


class TestPricingService:
    async def test_create_appends(self, test_db):
        basic = await pricing_service.create_plan(plan_data("basic"), test_db)
        premium = await pricing_service.create_plan(plan_data("premium"), test_db)

        assert basic.order_index == 0
        assert premium.order_index == 1
        assert basic.currency == "AMD"

    async def test_create_with_features(self, test_db):
        features = [
            {"feature_key": "rsvp", "label": "RSVP management"},
            {"feature_key": "photos", "label": "Photo gallery", "included": False},
        ]

        plan = await pricing_service.create_plan(plan_data("basic", features=features), test_db)

        assert [(f.feature_key, f.order_index, f.included) for f in plan.features] == [
            ("rsvp", 0, True),
            ("photos", 1, False),
        ]

    async def test_duplicate_key(self, test_db):
        await pricing_service.create_plan(plan_data("basic"), test_db)
        with pytest.raises(DuplicateResourceError):
            await pricing_service.create_plan(plan_data("basic"), test_db)

    async def test_list_hides_inactive(self, test_db):
        await pricing_service.create_plan(plan_data("basic"), test_db)
        await pricing_service.create_plan(plan_data("legacy", is_active=False), test_db)

        assert [plan.key for plan in await pricing_service.list_plans(test_db)] == ["basic"]
        assert len(await pricing_service.list_plans(test_db, include_inactive=True)) == 2

    async def test_update_ignores_unset_fields(self, test_db):
        plan = await pricing_service.create_plan(plan_data("basic", badge="New"), test_db)

        updated = await pricing_service.update_plan(plan.id, {"price": Decimal("5000"), "badge": None}, test_db)

        assert updated.price == Decimal("5000")
        assert updated.badge == "New"

    async def test_delete_renumbers(self, test_db):
        first = await pricing_service.create_plan(plan_data("first"), test_db)
        await pricing_service.create_plan(plan_data("second"), test_db)
        await pricing_service.create_plan(plan_data("third"), test_db)

        await pricing_service.delete_plan(first.id, test_db)

        plans = await pricing_service.list_plans(test_db, include_inactive=True)
        assert [(plan.key, plan.order_index) for plan in plans] == [("second", 0), ("third", 1)]

    async def test_reorder_swaps_neighbours(self, test_db):
        await pricing_service.create_plan(plan_data("first"), test_db)
        second = await pricing_service.create_plan(plan_data("second"), test_db)

        plans = await pricing_service.reorder_plan(second.id, "up", test_db)

        assert [plan.key for plan in plans] == ["second", "first"]

    async def test_reorder_past_the_edge(self, test_db):
        first = await pricing_service.create_plan(plan_data("first"), test_db)
        last = await pricing_service.create_plan(plan_data("last"), test_db)

        with pytest.raises(InvalidOperationError):
            await pricing_service.reorder_plan(first.id, "up", test_db)
        with pytest.raises(InvalidOperationError):
            await pricing_service.reorder_plan(last.id, "down", test_db)

    async def test_missing_plan(self, test_db):
        with pytest.raises(PricingPlanNotFoundError):
            await pricing_service.get_plan(42, test_db)
        with pytest.raises(PricingPlanNotFoundError):
            await pricing_service.reorder_plan(42, "up", test_db)

    async def test_replace_features(self, test_db):
        plan = await pricing_service.create_plan(
            plan_data("basic", features=[{"feature_key": "rsvp", "label": "RSVP"}]), test_db
        )

        plan = await pricing_service.replace_features(
            plan.id, [{"feature_key": "music", "label": "Music", "order_index": 3}], test_db
        )

        assert [(f.feature_key, f.order_index) for f in plan.features] == [("music", 3)]


class TestPricingRoutes:
    async def test_public_list(self, client, test_db):
        await pricing_service.create_plan(plan_data("basic"), test_db)
        await pricing_service.create_plan(plan_data("hidden", is_active=False), test_db)

        response = await client.get("/api/configurable-pricing-plans")

        assert response.status_code == 200
        plans = response.json()
        assert [plan["key"] for plan in plans] == ["basic"]
        assert plans[0]["isPopular"] is False
        assert Decimal(str(plans[0]["price"])) == Decimal("10000")

    async def test_all_requires_platform_admin(self, client, template_admin_headers):
        assert (await client.get("/api/configurable-pricing-plans/all")).status_code == 401
        response = await client.get("/api/configurable-pricing-plans/all", headers=template_admin_headers)
        assert response.status_code == 403

    async def test_create_and_fetch(self, client, platform_headers):
        body = {
            "key": "premium",
            "name": "Premium",
            "price": 25000,
            "isPopular": True,
            "features": [{"featureKey": "rsvp", "label": "RSVP management"}],
        }

        created = await client.post("/api/configurable-pricing-plans", json=body, headers=platform_headers)

        assert created.status_code == 201
        plan = created.json()
        assert plan["features"][0]["featureKey"] == "rsvp"
        fetched = await client.get(f"/api/configurable-pricing-plans/{plan['id']}")
        assert fetched.json()["name"] == "Premium"

    async def test_create_rejects_bad_key(self, client, platform_headers):
        body = {"key": "Not Valid", "name": "x"}
        response = await client.post("/api/configurable-pricing-plans", json=body, headers=platform_headers)
        assert response.status_code == 400

    async def test_create_duplicate_key(self, client, test_db, platform_headers):
        await pricing_service.create_plan(plan_data("basic"), test_db)

        response = await client.post(
            "/api/configurable-pricing-plans", json={"key": "basic", "name": "Basic"}, headers=platform_headers
        )

        assert response.status_code == 409

    async def test_patch(self, client, test_db, platform_headers):
        plan = await pricing_service.create_plan(plan_data("basic"), test_db)

        response = await client.patch(
            f"/api/configurable-pricing-plans/{plan.id}", json={"badge": "Sale"}, headers=platform_headers
        )

        assert response.status_code == 200
        assert response.json()["badge"] == "Sale"

    async def test_reorder_route(self, client, test_db, platform_headers):
        first = await pricing_service.create_plan(plan_data("first"), test_db)
        await pricing_service.create_plan(plan_data("second"), test_db)

        moved = await client.post(
            f"/api/configurable-pricing-plans/{first.id}/reorder", json={"direction": "down"}, headers=platform_headers
        )
        assert [plan["key"] for plan in moved.json()] == ["second", "first"]

        edge = await client.post(
            f"/api/configurable-pricing-plans/{first.id}/reorder", json={"direction": "down"}, headers=platform_headers
        )
        assert edge.status_code == 400

    async def test_replace_features_route(self, client, test_db, platform_headers):
        plan = await pricing_service.create_plan(plan_data("basic"), test_db)

        response = await client.put(
            f"/api/configurable-pricing-plans/{plan.id}/features",
            json={"features": [{"featureKey": "music", "label": "Background music", "value": "1 track"}]},
            headers=platform_headers,
        )

        assert response.status_code == 200
        assert response.json()["features"][0]["value"] == "1 track"

    async def test_delete(self, client, test_db, platform_headers):
        plan = await pricing_service.create_plan(plan_data("basic"), test_db)

        response = await client.delete(f"/api/configurable-pricing-plans/{plan.id}", headers=platform_headers)

        assert response.status_code == 204
        assert (await client.get(f"/api/configurable-pricing-plans/{plan.id}")).status_code == 404
