"""Configurable pricing plan schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from wedsite.schemas.base import APIModel


class PlanFeatureIn(APIModel):
    feature_key: str = Field(..., min_length=1, max_length=100)
    label: str = Field(..., min_length=1, max_length=200)
    included: bool = True
    value: str | None = Field(None, max_length=200)
    order_index: int | None = Field(None, ge=0)


class PlanFeatureResponse(APIModel):
    id: int
    feature_key: str
    label: str
    included: bool
    value: str | None = None
    order_index: int


class PricingPlanCreate(APIModel):
    key: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9_-]+$")
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    price: Decimal = Field(Decimal("0"), ge=0)
    currency: str = Field("AMD", max_length=10)
    badge: str | None = Field(None, max_length=50)
    is_popular: bool = False
    is_active: bool = True
    features: list[PlanFeatureIn] = Field(default_factory=list)


class PricingPlanUpdate(APIModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0)
    currency: str | None = Field(None, max_length=10)
    badge: str | None = Field(None, max_length=50)
    is_popular: bool | None = None
    is_active: bool | None = None


class PricingPlanResponse(APIModel):
    id: int
    key: str
    name: str
    description: str | None = None
    price: Decimal
    currency: str
    badge: str | None = None
    is_popular: bool
    is_active: bool
    order_index: int
    features: list[PlanFeatureResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class PlanReorder(APIModel):
    direction: Literal["up", "down"]


class PlanFeaturesReplace(APIModel):
    features: list[PlanFeatureIn]
