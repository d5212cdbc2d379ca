"""
Translation Routes

Read side (public):
    GET    /api/translations                 - merged bundles for every locale
    GET    /api/translations/validate        - coverage report
    GET    /api/translations/{language}      - merged bundle for one locale

Editing (platform admin):
    GET    /api/translations/live            - SSE stream of bundles while editing
    POST   /api/translations/reload          - refetch overrides now
    GET    /api/translation-keys             - list keys with values
    POST   /api/translation-keys             - create a key
    GET    /api/translation-keys/{id}        - one key
    PATCH  /api/translation-keys/{id}        - update section/description
    DELETE /api/translation-keys/{id}        - delete key and its values
    POST   /api/translation-values           - create or replace a value
    PATCH  /api/translation-values           - same as POST

Writes reload the overlay before returning, so the next read already
sees them.
"""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.auth import require_platform_admin
from wedsite.config import settings
from wedsite.database import get_db
from wedsite.dependencies import get_overlay, get_store
from wedsite.exceptions import ResourceNotFoundError
from wedsite.i18n.locale import get_language_info
from wedsite.i18n.store import LocaleStore
from wedsite.middleware.rate_limit import admin_limit, api_limit
from wedsite.models.admin_user import AdminUser
from wedsite.schemas.translation import (
    CoverageReport,
    TranslationKeyCreate,
    TranslationKeyResponse,
    TranslationKeyUpdate,
    TranslationValueResponse,
    TranslationValueUpsert,
)
from wedsite.services import translation_service
from wedsite.services.translation_overlay import TranslationOverlay

router = APIRouter(tags=["Translations"])
logger = logging.getLogger(__name__)


def _sse(event: str, data: dict[str, Any]) -> str:
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


def _bundles_payload(overlay: TranslationOverlay, language: str | None) -> dict[str, Any]:
    translations = {language: overlay.bundle(language)} if language else overlay.bundles()
    return {
        "version": overlay.version,
        "translations": translations,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def _live_stream(request: Request, overlay: TranslationOverlay, language: str | None):
    """Hold an editing session open for as long as the client listens."""
    async with overlay.editing_session():
        queue = overlay.subscribe()
        try:
            yield _sse("bundles", _bundles_payload(overlay, language))
            while True:
                if await request.is_disconnected():
                    logger.debug("Translation stream client disconnected")
                    break
                try:
                    await asyncio.wait_for(queue.get(), timeout=settings.sse_keepalive_interval)
                    yield _sse("bundles", _bundles_payload(overlay, language))
                except asyncio.TimeoutError:
                    yield ": keepalive\n\n"
        finally:
            overlay.unsubscribe(queue)


def _check_language(language: str) -> str:
    language = language.lower()
    if language not in settings.supported_languages:
        raise ResourceNotFoundError("Language", language)
    return language


# ── Bundles ───────────────────────────────────────────────────────────────────


@router.get("/translations")
@api_limit
async def get_all_translations(
    request: Request,
    response: Response,
    overlay: TranslationOverlay = Depends(get_overlay),
) -> dict[str, Any]:
    return {
        "languages": [get_language_info(code) for code in settings.supported_languages],
        "defaultLanguage": settings.default_language,
        "version": overlay.version,
        "translations": overlay.bundles(),
    }


@router.get("/translations/validate", response_model=CoverageReport)
@api_limit
async def validate_translations(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    store: LocaleStore = Depends(get_store),
) -> CoverageReport:
    overrides = await translation_service.fetch_overrides(db)
    return CoverageReport(**translation_service.coverage_report(store, overrides))


@router.get("/translations/live")
async def live_translations(
    request: Request,
    language: str | None = None,
    overlay: TranslationOverlay = Depends(get_overlay),
    _admin: AdminUser = Depends(require_platform_admin),
) -> StreamingResponse:
    """
    Server-sent ``bundles`` events for a translation editor.

    The first event carries the current bundles; another follows every
    time polling picks up a change. Polling runs only while at least one
    stream is open.
    """
    if language:
        language = _check_language(language)
    return StreamingResponse(
        _live_stream(request, overlay, language),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/translations/reload")
@admin_limit
async def reload_translations(
    request: Request,
    response: Response,
    overlay: TranslationOverlay = Depends(get_overlay),
    _admin: AdminUser = Depends(require_platform_admin),
) -> dict[str, Any]:
    changed = await overlay.load()
    return {"changed": changed, "version": overlay.version}


@router.get("/translations/{language}")
@api_limit
async def get_translations(
    request: Request,
    response: Response,
    language: str,
    overlay: TranslationOverlay = Depends(get_overlay),
) -> dict[str, Any]:
    language = _check_language(language)
    return {
        "language": language,
        "version": overlay.version,
        "translations": overlay.bundle(language),
    }


# ── Keys ──────────────────────────────────────────────────────────────────────


@router.get("/translation-keys", response_model=list[TranslationKeyResponse])
@api_limit
async def list_translation_keys(
    request: Request,
    response: Response,
    section: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> list[TranslationKeyResponse]:
    keys = await translation_service.list_keys(db, section)
    return [TranslationKeyResponse(**translation_service.serialize_key(key)) for key in keys]


@router.post("/translation-keys", response_model=TranslationKeyResponse, status_code=status.HTTP_201_CREATED)
@admin_limit
async def create_translation_key(
    request: Request,
    response: Response,
    payload: TranslationKeyCreate,
    db: AsyncSession = Depends(get_db),
    overlay: TranslationOverlay = Depends(get_overlay),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TranslationKeyResponse:
    key = await translation_service.create_key(
        payload.key,
        db,
        section=payload.section,
        description=payload.description,
        translations=payload.translations,
    )
    await overlay.load()
    return TranslationKeyResponse(**translation_service.serialize_key(key))


@router.get("/translation-keys/{key_id}", response_model=TranslationKeyResponse)
@api_limit
async def get_translation_key(
    request: Request,
    response: Response,
    key_id: int,
    db: AsyncSession = Depends(get_db),
) -> TranslationKeyResponse:
    key = await translation_service.get_key(key_id, db)
    return TranslationKeyResponse(**translation_service.serialize_key(key))


@router.patch("/translation-keys/{key_id}", response_model=TranslationKeyResponse)
@admin_limit
async def update_translation_key(
    request: Request,
    response: Response,
    key_id: int,
    payload: TranslationKeyUpdate,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TranslationKeyResponse:
    key = await translation_service.update_key(key_id, payload.model_dump(exclude_unset=True), db)
    return TranslationKeyResponse(**translation_service.serialize_key(key))


@router.delete("/translation-keys/{key_id}", status_code=status.HTTP_204_NO_CONTENT)
@admin_limit
async def delete_translation_key(
    request: Request,
    response: Response,
    key_id: int,
    db: AsyncSession = Depends(get_db),
    overlay: TranslationOverlay = Depends(get_overlay),
    _admin: AdminUser = Depends(require_platform_admin),
) -> None:
    await translation_service.delete_key(key_id, db)
    await overlay.load()


# ── Values ────────────────────────────────────────────────────────────────────


@router.api_route("/translation-values", methods=["POST", "PATCH"], response_model=TranslationValueResponse)
@admin_limit
async def upsert_translation_value(
    request: Request,
    response: Response,
    payload: TranslationValueUpsert,
    db: AsyncSession = Depends(get_db),
    overlay: TranslationOverlay = Depends(get_overlay),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TranslationValueResponse:
    """Create or replace the value for (key, language); 201 when a new value was created."""
    value, created = await translation_service.upsert_value(
        payload.language,
        payload.value,
        db,
        key_id=payload.key_id,
        key=payload.key,
    )
    if created:
        response.status_code = status.HTTP_201_CREATED
    await overlay.load()
    return TranslationValueResponse.model_validate(value)
