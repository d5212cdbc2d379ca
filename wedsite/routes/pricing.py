"""
Configurable Pricing Plan Routes

GET    /api/configurable-pricing-plans                 → active plans in display order
GET    /api/configurable-pricing-plans/all             → every plan (platform admin)
POST   /api/configurable-pricing-plans                 → create, appended last
GET    /api/configurable-pricing-plans/{id}            → one plan
PATCH  /api/configurable-pricing-plans/{id}            → update plan fields
DELETE /api/configurable-pricing-plans/{id}            → delete and renumber
POST   /api/configurable-pricing-plans/{id}/reorder    → move one step up/down
PUT    /api/configurable-pricing-plans/{id}/features   → replace the feature list
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.auth import require_platform_admin
from wedsite.database import get_db
from wedsite.middleware.rate_limit import admin_limit, api_limit
from wedsite.models.admin_user import AdminUser
from wedsite.schemas.pricing import (
    PlanFeaturesReplace,
    PlanReorder,
    PricingPlanCreate,
    PricingPlanResponse,
    PricingPlanUpdate,
)
from wedsite.services import pricing_service

router = APIRouter(tags=["Pricing"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[PricingPlanResponse])
@api_limit
async def list_active_plans(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> list[PricingPlanResponse]:
    plans = await pricing_service.list_plans(db)
    return [PricingPlanResponse.model_validate(plan) for plan in plans]


@router.get("/all", response_model=list[PricingPlanResponse])
@admin_limit
async def list_all_plans(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> list[PricingPlanResponse]:
    plans = await pricing_service.list_plans(db, include_inactive=True)
    return [PricingPlanResponse.model_validate(plan) for plan in plans]


@router.post("", response_model=PricingPlanResponse, status_code=status.HTTP_201_CREATED)
@admin_limit
async def create_plan(
    request: Request,
    response: Response,
    payload: PricingPlanCreate,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> PricingPlanResponse:
    plan = await pricing_service.create_plan(payload.model_dump(), db)
    return PricingPlanResponse.model_validate(plan)


@router.get("/{plan_id}", response_model=PricingPlanResponse)
@api_limit
async def get_plan(
    request: Request,
    response: Response,
    plan_id: int,
    db: AsyncSession = Depends(get_db),
) -> PricingPlanResponse:
    return PricingPlanResponse.model_validate(await pricing_service.get_plan(plan_id, db))


@router.patch("/{plan_id}", response_model=PricingPlanResponse)
@admin_limit
async def update_plan(
    request: Request,
    response: Response,
    plan_id: int,
    payload: PricingPlanUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> PricingPlanResponse:
    plan = await pricing_service.update_plan(plan_id, payload.model_dump(exclude_unset=True), db)
    return PricingPlanResponse.model_validate(plan)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
@admin_limit
async def delete_plan(
    request: Request,
    response: Response,
    plan_id: int,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> None:
    await pricing_service.delete_plan(plan_id, db)


@router.post("/{plan_id}/reorder", response_model=list[PricingPlanResponse])
@admin_limit
async def reorder_plan(
    request: Request,
    response: Response,
    plan_id: int,
    payload: PlanReorder,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> list[PricingPlanResponse]:
    """Swap with the neighbouring plan; 400 when already first/last."""
    plans = await pricing_service.reorder_plan(plan_id, payload.direction, db)
    return [PricingPlanResponse.model_validate(plan) for plan in plans]


@router.put("/{plan_id}/features", response_model=PricingPlanResponse)
@admin_limit
async def replace_plan_features(
    request: Request,
    response: Response,
    plan_id: int,
    payload: PlanFeaturesReplace,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> PricingPlanResponse:
    features = [feature.model_dump() for feature in payload.features]
    plan = await pricing_service.replace_features(plan_id, features, db)
    return PricingPlanResponse.model_validate(plan)
