"""
Pricing Service

CRUD for configurable pricing plans and their feature rows.

Plan ``order_index`` stays contiguous from 0: create appends, delete
renumbers the remaining plans, reorder swaps a plan with its neighbour.
"""

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.exceptions import DuplicateResourceError, InvalidOperationError, PricingPlanNotFoundError
from wedsite.models.pricing import PricingPlan, PricingPlanFeature

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "price", "currency", "badge", "is_popular", "is_active")


def _feature_rows(features: list[dict[str, Any]]) -> list[PricingPlanFeature]:
    return [
        PricingPlanFeature(
            feature_key=feature["feature_key"],
            label=feature["label"],
            included=feature.get("included", True),
            value=feature.get("value"),
            order_index=feature["order_index"] if feature.get("order_index") is not None else position,
        )
        for position, feature in enumerate(features)
    ]


async def list_plans(db: AsyncSession, include_inactive: bool = False) -> list[PricingPlan]:
    query = select(PricingPlan).order_by(PricingPlan.order_index, PricingPlan.id)
    if not include_inactive:
        query = query.where(PricingPlan.is_active.is_(True))
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_plan(plan_id: int, db: AsyncSession) -> PricingPlan:
    result = await db.execute(
        select(PricingPlan).where(PricingPlan.id == plan_id).execution_options(populate_existing=True)
    )
    plan = result.scalars().first()
    if plan is None:
        raise PricingPlanNotFoundError(plan_id)
    return plan


async def create_plan(data: dict[str, Any], db: AsyncSession) -> PricingPlan:
    """Insert a plan at the end of the ordering."""
    existing = await db.scalar(select(PricingPlan.id).where(PricingPlan.key == data["key"]))
    if existing is not None:
        raise DuplicateResourceError("Pricing plan", "key", data["key"])

    count = await db.scalar(select(func.count(PricingPlan.id)))
    plan = PricingPlan(
        **{field: data[field] for field in ("key", *UPDATABLE_FIELDS) if data.get(field) is not None},
        order_index=count or 0,
    )
    plan.features = _feature_rows(data.get("features") or [])
    db.add(plan)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError("Pricing plan", "key", data["key"])
    logger.info("Pricing plan created: id=%d key=%s order=%d", plan.id, plan.key, plan.order_index)
    return await get_plan(plan.id, db)


async def update_plan(plan_id: int, updates: dict[str, Any], db: AsyncSession) -> PricingPlan:
    plan = await get_plan(plan_id, db)
    for field in UPDATABLE_FIELDS:
        if field in updates and updates[field] is not None:
            setattr(plan, field, updates[field])
    await db.commit()
    return await get_plan(plan_id, db)


async def delete_plan(plan_id: int, db: AsyncSession) -> None:
    plan = await get_plan(plan_id, db)
    await db.delete(plan)
    await db.flush()

    remaining = (
        await db.execute(select(PricingPlan).order_by(PricingPlan.order_index, PricingPlan.id))
    ).scalars().all()
    for position, other in enumerate(remaining):
        other.order_index = position
    await db.commit()
    logger.info("Pricing plan deleted: id=%d key=%s", plan_id, plan.key)


async def reorder_plan(plan_id: int, direction: str, db: AsyncSession) -> list[PricingPlan]:
    """Swap a plan with its neighbour; returns every plan in the new order."""
    plans = list(
        (await db.execute(select(PricingPlan).order_by(PricingPlan.order_index, PricingPlan.id))).scalars().all()
    )
    position = next((i for i, plan in enumerate(plans) if plan.id == plan_id), None)
    if position is None:
        raise PricingPlanNotFoundError(plan_id)

    target = position - 1 if direction == "up" else position + 1
    if target < 0 or target >= len(plans):
        raise InvalidOperationError(
            f"Cannot move plan {direction}",
            details={"plan_id": plan_id, "order_index": position},
        )

    plans[position], plans[target] = plans[target], plans[position]
    for index, plan in enumerate(plans):
        plan.order_index = index
    await db.commit()
    logger.info("Pricing plan %d moved %s to position %d", plan_id, direction, target)
    return await list_plans(db, include_inactive=True)


async def replace_features(plan_id: int, features: list[dict[str, Any]], db: AsyncSession) -> PricingPlan:
    plan = await get_plan(plan_id, db)
    plan.features = _feature_rows(features)
    await db.commit()
    return await get_plan(plan_id, db)
