"""
Translation overlay models

A ``TranslationKey`` is a dotted bundle path (``hero.title``,
``features.items.0.title``); each ``TranslationValue`` overrides that path
for one language. Deleting a key deletes its values.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from wedsite.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranslationKey(Base):
    __tablename__ = "translation_keys"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(255), nullable=False, unique=True, index=True)
    section = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    values = relationship(
        "TranslationValue",
        back_populates="translation_key",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class TranslationValue(Base):
    __tablename__ = "translation_values"

    id = Column(Integer, primary_key=True, index=True)
    key_id = Column(Integer, ForeignKey("translation_keys.id", ondelete="CASCADE"), nullable=False)
    language = Column(String(10), nullable=False)
    value = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    translation_key = relationship("TranslationKey", back_populates="values")

    __table_args__ = (UniqueConstraint("key_id", "language", name="uq_translation_value_key_language"),)
