"""
RSVP models

``Rsvp`` is one guest party's response. ``RsvpEmailClaim`` holds one row
per normalized email an RSVP used, and its unique (template_id, email)
constraint is what makes "one RSVP per email per template" hold under
concurrent submissions.
"""

import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from wedsite.database import Base


class Attendance(str, enum.Enum):
    attending = "attending"
    not_attending = "not-attending"


class Rsvp(Base):
    __tablename__ = "rsvps"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    template_id = Column(String(36), ForeignKey("templates.id", ondelete="CASCADE"), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    guest_email = Column(String(255), nullable=True)
    attendance = Column(String(20), nullable=False)
    guest_count = Column(Integer, nullable=False, default=1)
    guest_names = Column(Text, nullable=True)
    dietary_restrictions = Column(Text, nullable=True)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    claims = relationship("RsvpEmailClaim", back_populates="rsvp", cascade="all, delete-orphan")

    __table_args__ = (Index("idx_rsvp_template_created", "template_id", "created_at"),)


class RsvpEmailClaim(Base):
    __tablename__ = "rsvp_email_claims"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(String(36), ForeignKey("templates.id", ondelete="CASCADE"), nullable=False)
    email = Column(String(255), nullable=False)  # lower-cased, trimmed
    rsvp_id = Column(String(36), ForeignKey("rsvps.id", ondelete="CASCADE"), nullable=False)

    rsvp = relationship("Rsvp", back_populates="claims")

    __table_args__ = (UniqueConstraint("template_id", "email", name="uq_rsvp_claim_template_email"),)
