"""
RSVP Schemas

Shape checks only. The guest-count upper bound depends on the template's
composed config, so the RSVP service enforces it.
"""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from wedsite.models.rsvp import Attendance
from wedsite.schemas.base import APIModel

NAME_MAX_LENGTH = 100
GUEST_NAMES_MAX_LENGTH = 1000
DIETARY_MAX_LENGTH = 500
MESSAGE_MAX_LENGTH = 2000


class RsvpCreate(APIModel):
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    guest_email: EmailStr | None = None
    attendance: Attendance
    guest_count: int = Field(1, ge=1)
    guest_names: str | None = Field(None, max_length=GUEST_NAMES_MAX_LENGTH)
    dietary_restrictions: str | None = Field(None, max_length=DIETARY_MAX_LENGTH)
    message: str | None = Field(None, max_length=MESSAGE_MAX_LENGTH)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("guest_email", mode="before")
    @classmethod
    def blank_guest_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def emails(self) -> set[str]:
        """Both submitted addresses, normalized for comparison."""
        found = {self.email.strip().lower()}
        if self.guest_email:
            found.add(self.guest_email.strip().lower())
        return found


class RsvpResponse(APIModel):
    id: str
    template_id: str
    first_name: str
    last_name: str
    email: str
    guest_email: str | None = None
    attendance: str
    guest_count: int
    guest_names: str | None = None
    dietary_restrictions: str | None = None
    message: str | None = None
    created_at: datetime


class RsvpAccepted(APIModel):
    message: str
    rsvp: RsvpResponse
