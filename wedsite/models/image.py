"""Template image metadata (the bytes live in external storage)."""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from wedsite.database import Base


class ImageCategory(str, enum.Enum):
    hero = "hero"
    gallery = "gallery"


class TemplateImage(Base):
    __tablename__ = "template_images"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(String(36), ForeignKey("templates.id", ondelete="CASCADE"), nullable=False)
    url = Column(String(1000), nullable=False)
    name = Column(String(255), nullable=True)
    category = Column(String(20), nullable=False, default=ImageCategory.gallery.value)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    template = relationship("Template", back_populates="images")

    __table_args__ = (Index("idx_template_image_template_category", "template_id", "category"),)
