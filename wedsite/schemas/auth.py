from pydantic import BaseModel, EmailStr, Field

from wedsite.models.admin_user import AdminRole
from wedsite.schemas.base import APIModel


class LoginRequest(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=200)


class Token(BaseModel):
    """OAuth2 token response; field names follow RFC 6749, not camelCase."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class AdminResponse(APIModel):
    id: int
    email: str
    role: str
    template_id: str | None = None
    is_active: bool


class AdminCreate(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=200)
    role: AdminRole = AdminRole.template_admin
    template_id: str | None = None
