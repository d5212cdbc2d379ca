"""
Configurable pricing plans

``order_index`` on plans is contiguous from 0 and drives homepage order;
the pricing service keeps it that way across create, delete and reorder.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from wedsite.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PricingPlan(Base):
    __tablename__ = "pricing_plans"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(50), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    currency = Column(String(10), nullable=False, default="AMD")
    badge = Column(String(50), nullable=True)
    is_popular = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    features = relationship(
        "PricingPlanFeature",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="PricingPlanFeature.order_index",
        lazy="selectin",
    )


class PricingPlanFeature(Base):
    __tablename__ = "pricing_plan_features"

    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("pricing_plans.id", ondelete="CASCADE"), nullable=False)
    feature_key = Column(String(100), nullable=False)
    label = Column(String(200), nullable=False)
    included = Column(Boolean, nullable=False, default=True)
    value = Column(String(200), nullable=True)  # e.g. "50 cards"
    order_index = Column(Integer, nullable=False, default=0)

    plan = relationship("PricingPlan", back_populates="features")
