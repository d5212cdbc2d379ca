"""Template administration schemas."""

from datetime import datetime
from typing import Any

from pydantic import EmailStr, Field, field_validator

from wedsite.models.image import ImageCategory
from wedsite.schemas.base import APIModel
from wedsite.utils.slugify import is_valid_slug


def _check_slug(value: str | None) -> str | None:
    if value is not None and not is_valid_slug(value):
        raise ValueError("slug may only contain lowercase letters, digits and hyphens")
    return value


class TemplateCreate(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=100)
    template_key: str = "pro"
    owner_email: EmailStr | None = None
    owner_name: str | None = Field(None, max_length=200)
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value: str | None) -> str | None:
        return _check_slug(value)


class TemplateClone(APIModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=100)
    owner_email: EmailStr | None = None
    owner_name: str | None = Field(None, max_length=200)

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value: str | None) -> str | None:
        return _check_slug(value)


class TemplateUpdate(APIModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    slug: str | None = Field(None, max_length=100)
    owner_email: EmailStr | None = None
    owner_name: str | None = Field(None, max_length=200)
    is_active: bool | None = None

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value: str | None) -> str | None:
        return _check_slug(value)


class TemplateResponse(APIModel):
    id: str
    name: str
    slug: str
    template_key: str
    owner_email: str | None = None
    owner_name: str | None = None
    maintenance: bool
    is_active: bool
    source_template_id: str | None = None
    created_at: datetime
    updated_at: datetime


class TemplateConfigResponse(APIModel):
    template_id: str
    template_key: str
    slug: str
    locale: str
    maintenance: bool
    config: dict[str, Any]


class MaintenanceToggle(APIModel):
    enabled: bool


class MaintenancePassword(APIModel):
    password: str = Field(..., max_length=200)


class ImageCreate(APIModel):
    url: str = Field(..., min_length=1, max_length=1000)
    name: str | None = Field(None, max_length=255)
    category: ImageCategory = ImageCategory.gallery
    order_index: int | None = Field(None, ge=0)


class ImageResponse(APIModel):
    id: int
    template_id: str
    url: str
    name: str | None = None
    category: str
    order_index: int
    created_at: datetime
