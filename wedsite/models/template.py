"""
Template model

A Template is one couple's wedding site (the tenant). Every guest-facing
row (RSVPs, images, email claims) hangs off a template via FK.
Templates are never hard-deleted; ``maintenance`` and ``is_active`` are
the soft states.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from wedsite.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Template(Base):
    __tablename__ = "templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    slug = Column(String(100), nullable=False, unique=True, index=True)  # ^[a-z0-9-]+$
    legacy_identifier = Column(String(200), nullable=True)
    template_key = Column(String(50), nullable=False, default="pro")
    owner_email = Column(String(255), nullable=True)
    owner_name = Column(String(200), nullable=True)
    config = Column(JSON, nullable=False, default=dict)
    maintenance = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    source_template_id = Column(String(36), ForeignKey("templates.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    images = relationship(
        "TemplateImage",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateImage.order_index",
    )

    __table_args__ = (Index("idx_template_key", "template_key"),)

    def __repr__(self) -> str:
        return f"<Template(id={self.id}, slug='{self.slug}', key='{self.template_key}')>"
