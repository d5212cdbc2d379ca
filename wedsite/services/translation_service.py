"""
Translation Service

Async CRUD for the admin-editable translation overlay
(``translation_keys`` / ``translation_values``) plus the loader the live
overlay polls.

Functions:
    list_keys            - every key with its per-language values
    get_key              - one key by id
    create_key           - insert a key (optionally with initial values)
    update_key           - partial update of section/description
    delete_key           - delete a key and, by cascade, its values
    upsert_value         - create or replace the value for (key, language)
    load_overrides       - {language: {dotted.key: value}} for the overlay
    coverage_report      - missing/empty keys per language
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002
from sqlalchemy.orm import selectinload

from wedsite import database
from wedsite.config import settings
from wedsite.exceptions import DuplicateResourceError, TranslationKeyNotFoundError, ValidationError
from wedsite.i18n.store import LocaleStore, flatten, should_render
from wedsite.models.translation import TranslationKey, TranslationValue

logger = logging.getLogger(__name__)


def serialize_key(key: TranslationKey) -> dict[str, Any]:
    """Key row plus ``translations`` mapping language → value."""
    return {
        "id": key.id,
        "key": key.key,
        "section": key.section,
        "description": key.description,
        "translations": {value.language: value.value for value in key.values},
        "created_at": key.created_at,
        "updated_at": key.updated_at,
    }


def _check_language(language: str) -> None:
    if language not in settings.supported_languages:
        raise ValidationError(
            f"Unsupported language '{language}'",
            field="language",
            details={"supported": settings.supported_languages},
        )


async def list_keys(db: AsyncSession, section: str | None = None) -> list[TranslationKey]:
    query = select(TranslationKey).options(selectinload(TranslationKey.values))
    if section:
        query = query.where(TranslationKey.section == section)
    result = await db.execute(query.order_by(TranslationKey.section, TranslationKey.key))
    return list(result.scalars().all())


async def get_key(key_id: int, db: AsyncSession) -> TranslationKey:
    """Fetch a key with its values; raises TranslationKeyNotFoundError."""
    result = await db.execute(
        select(TranslationKey).options(selectinload(TranslationKey.values)).where(TranslationKey.id == key_id)
    )
    key = result.scalars().first()
    if key is None:
        raise TranslationKeyNotFoundError(key_id)
    return key


async def get_key_by_name(name: str, db: AsyncSession) -> TranslationKey | None:
    result = await db.execute(
        select(TranslationKey).options(selectinload(TranslationKey.values)).where(TranslationKey.key == name)
    )
    return result.scalars().first()


async def create_key(
    key: str,
    db: AsyncSession,
    *,
    section: str | None = None,
    description: str | None = None,
    translations: dict[str, str] | None = None,
) -> TranslationKey:
    """Insert a key; ``section`` defaults to the first path segment."""
    for language in translations or {}:
        _check_language(language)
    if await get_key_by_name(key, db) is not None:
        raise DuplicateResourceError("Translation key", "key", key)

    row = TranslationKey(key=key, section=section or key.split(".")[0], description=description)
    row.values = [TranslationValue(language=lang, value=value) for lang, value in (translations or {}).items()]
    db.add(row)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError("Translation key", "key", key)
    logger.info("Translation key created: key=%s", key)
    return await get_key(row.id, db)


async def update_key(key_id: int, updates: dict[str, Any], db: AsyncSession) -> TranslationKey:
    key = await get_key(key_id, db)
    for field in ("section", "description"):
        if field in updates and updates[field] is not None:
            setattr(key, field, updates[field])
    await db.commit()
    return await get_key(key_id, db)


async def delete_key(key_id: int, db: AsyncSession) -> None:
    key = await get_key(key_id, db)
    await db.delete(key)
    await db.commit()
    logger.info("Translation key deleted: id=%d key=%s", key_id, key.key)


async def upsert_value(
    language: str,
    value: str,
    db: AsyncSession,
    *,
    key_id: int | None = None,
    key: str | None = None,
) -> tuple[TranslationValue, bool]:
    """Create or replace the value for (key, language).

    The key may be named by id or by dotted path; a path that does not
    exist yet is created. Returns ``(value_row, created)``.
    """
    _check_language(language)
    if key_id is not None:
        key_row = await get_key(key_id, db)
    elif key:
        key_row = await get_key_by_name(key, db)
        if key_row is None:
            key_row = TranslationKey(key=key, section=key.split(".")[0])
            db.add(key_row)
            await db.flush()
    else:
        raise ValidationError("keyId or key is required", field="keyId")

    result = await db.execute(
        select(TranslationValue).where(
            TranslationValue.key_id == key_row.id,
            TranslationValue.language == language,
        )
    )
    existing = result.scalars().first()
    if existing is not None:
        existing.value = value
        row, created = existing, False
    else:
        row = TranslationValue(key_id=key_row.id, language=language, value=value)
        db.add(row)
        created = True
    await db.commit()
    await db.refresh(row)
    logger.info("Translation value %s: key=%s language=%s", "created" if created else "updated", key_row.key, language)
    return row, created


async def fetch_overrides(db: AsyncSession) -> dict[str, dict[str, str]]:
    """All stored values as ``{language: {dotted.key: value}}``."""
    result = await db.execute(
        select(TranslationKey.key, TranslationValue.language, TranslationValue.value).join(
            TranslationValue, TranslationValue.key_id == TranslationKey.id
        )
    )
    overrides: dict[str, dict[str, str]] = {}
    for key, language, value in result.all():
        overrides.setdefault(language, {})[key] = value
    return overrides


async def load_overrides() -> dict[str, dict[str, str]]:
    """Overlay loader: runs outside any request, so it opens its own session."""
    async with database.AsyncSessionLocal() as db:
        return await fetch_overrides(db)


def coverage_report(store: LocaleStore, overrides: dict[str, dict[str, str]]) -> dict[str, Any]:
    """Which keys each language is missing or has blank, across bundles and overrides."""
    by_language: dict[str, set[str]] = {}
    empty: dict[str, int] = {}
    for language in store.locales:
        flat = flatten(store.bundles[language])
        flat.update(overrides.get(language, {}))
        by_language[language] = {key for key, value in flat.items() if should_render(value)}
        empty[language] = sum(1 for value in flat.values() if not should_render(value))

    all_keys = set().union(*by_language.values()) if by_language else set()
    missing = {language: sorted(all_keys - keys) for language, keys in by_language.items()}
    return {
        "total_keys": len(all_keys),
        "by_language": {language: len(keys) for language, keys in by_language.items()},
        "missing": missing,
        "empty": empty,
        "is_complete": all(not keys for keys in missing.values()) and not any(empty.values()),
    }
