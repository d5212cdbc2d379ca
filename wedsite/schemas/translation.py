"""Translation overlay schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from wedsite.schemas.base import APIModel

KEY_PATTERN = r"^[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+)*$"


class TranslationKeyCreate(APIModel):
    key: str = Field(..., min_length=1, max_length=255, pattern=KEY_PATTERN)
    section: str | None = Field(None, max_length=100)
    description: str | None = None
    translations: dict[str, str] = Field(default_factory=dict)


class TranslationKeyUpdate(APIModel):
    section: str | None = Field(None, max_length=100)
    description: str | None = None


class TranslationKeyResponse(APIModel):
    id: int
    key: str
    section: str
    description: str | None = None
    translations: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class TranslationValueUpsert(APIModel):
    key_id: int | None = None
    key: str | None = Field(None, max_length=255, pattern=KEY_PATTERN)
    language: str = Field(..., min_length=2, max_length=10)
    value: str

    @field_validator("language")
    @classmethod
    def lower_language(cls, value: str) -> str:
        return value.strip().lower()


class TranslationValueResponse(APIModel):
    id: int
    key_id: int
    language: str
    value: str
    updated_at: datetime


class CoverageReport(APIModel):
    total_keys: int
    by_language: dict[str, int]
    missing: dict[str, list[str]]
    empty: dict[str, int]
    is_complete: bool
