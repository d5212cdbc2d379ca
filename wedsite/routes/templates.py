"""
Template Routes

Guest-facing:
    GET    /api/templates/{identifier}/config               - composed config
    POST   /api/templates/{identifier}/maintenance/verify   - check maintenance password
    POST   /api/templates/{template_id}/rsvp                - submit an RSVP
    GET    /api/template-types                              - registered template types

Template admin (own template, or any template for platform admins):
    GET    /api/templates/{template_id}/rsvps               - list RSVPs
    GET    /api/templates/{template_id}/rsvps/export        - CSV export
    PATCH  /api/templates/{template_id}/config              - merge config changes
    POST   /api/templates/{template_id}/maintenance         - toggle maintenance
    POST   /api/templates/{template_id}/images              - register image metadata
"""

import logging
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.auth import require_template_admin
from wedsite.database import get_db
from wedsite.dependencies import get_composer, get_locale, get_overlay
from wedsite.exceptions import ValidationError
from wedsite.middleware.rate_limit import admin_limit, api_limit, auth_limit, rsvp_limit, upload_limit
from wedsite.models.admin_user import AdminUser
from wedsite.schemas.rsvp import RsvpAccepted, RsvpCreate, RsvpResponse
from wedsite.schemas.template import (
    ImageCreate,
    ImageResponse,
    MaintenancePassword,
    MaintenanceToggle,
    TemplateConfigResponse,
    TemplateResponse,
)
from wedsite.services import rsvp_service, template_service
from wedsite.services.config_composer import ConfigComposer
from wedsite.services.outbox import NotificationOutbox
from wedsite.services.template_resolver import resolve_template
from wedsite.services.translation_overlay import TranslationOverlay
from wedsite.template_types import list_template_types

router = APIRouter(tags=["Templates"])
logger = logging.getLogger(__name__)


# ── Guest-facing ──────────────────────────────────────────────────────────────


@router.get("/templates/{identifier:path}/config", response_model=TemplateConfigResponse)
@api_limit
async def get_template_config(
    request: Request,
    response: Response,
    identifier: str,
    locale: str = Depends(get_locale),
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
) -> TemplateConfigResponse:
    """
    Composed configuration for a template, by id or slug.

    Legacy ``t/...`` identifiers are always 404. Identifiers that only
    differ from a valid slug by case or surrounding whitespace answer with
    a 308 redirect to the canonical path.
    """
    template = await resolve_template(identifier, db)
    config = await composer.compose(template, locale, db)
    return TemplateConfigResponse(
        template_id=template.id,
        template_key=template.template_key,
        slug=template.slug,
        locale=locale,
        maintenance=template.maintenance,
        config=config.to_public(),
    )


@router.post("/templates/{identifier}/maintenance/verify")
@auth_limit
async def verify_maintenance_password(
    request: Request,
    response: Response,
    identifier: str,
    payload: MaintenancePassword,
    locale: str = Depends(get_locale),
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
) -> dict[str, bool]:
    template = await resolve_template(identifier, db)
    config = await composer.compose(template, locale, db)
    valid = template_service.verify_maintenance_password(config.maintenance.password, payload.password)
    if not valid:
        logger.info("Maintenance password rejected for template %s", template.id)
    return {"valid": valid}


async def read_rsvp_payload(request: Request) -> RsvpCreate:
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON", field="body")
    return RsvpCreate.model_validate(body)


@router.post(
    "/templates/{template_id}/rsvp",
    response_model=RsvpAccepted,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {"content": {"application/json": {"schema": RsvpCreate.model_json_schema()}}, "required": True}
    },
)
@rsvp_limit
async def submit_rsvp(
    request: Request,
    response: Response,
    template_id: str,
    background_tasks: BackgroundTasks,
    locale: str = Depends(get_locale),
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
    overlay: TranslationOverlay = Depends(get_overlay),
) -> RsvpAccepted:
    """
    Submit a guest RSVP.

    400 for invalid input or an email already used for this template
    (message localized to the request locale), 503 while the template is
    in maintenance. Notification e-mails go out after the response.

    The body is parsed here rather than by FastAPI so malformed
    submissions still count against the RSVP bucket.
    """
    payload = await read_rsvp_payload(request)
    template = await resolve_template(template_id, db)
    outbox = NotificationOutbox()
    outcome = await rsvp_service.submit_rsvp(template, payload, locale, db, composer, overlay, outbox=outbox)
    if not outcome.accepted:
        raise outcome.error

    background_tasks.add_task(outbox.dispatch)
    return RsvpAccepted(message=outcome.message, rsvp=RsvpResponse.model_validate(outcome.rsvp))


@router.get("/template-types")
@api_limit
async def get_template_types(request: Request, response: Response) -> list[dict[str, Any]]:
    return [template_type.summary() for template_type in list_template_types()]


# ── Template admin ────────────────────────────────────────────────────────────


@router.get("/templates/{template_id}/rsvps", response_model=list[RsvpResponse])
@admin_limit
async def get_template_rsvps(
    request: Request,
    response: Response,
    template_id: str,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_template_admin),
) -> list[RsvpResponse]:
    template = await template_service.get_template(template_id, db)
    rsvps = await rsvp_service.list_rsvps(template.id, db)
    return [RsvpResponse.model_validate(rsvp) for rsvp in rsvps]


@router.get("/templates/{template_id}/rsvps/export")
@admin_limit
async def export_template_rsvps(
    request: Request,
    response: Response,
    template_id: str,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_template_admin),
) -> Response:
    template = await template_service.get_template(template_id, db)
    rsvps = await rsvp_service.list_rsvps(template.id, db)
    return Response(
        content=rsvp_service.export_rsvps_csv(rsvps),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="rsvps-{template.slug}.csv"'},
    )


@router.patch("/templates/{template_id}/config", response_model=TemplateResponse)
@admin_limit
async def patch_template_config(
    request: Request,
    response: Response,
    template_id: str,
    patch: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
    _admin: AdminUser = Depends(require_template_admin),
) -> TemplateResponse:
    """Merge the posted sections into the stored config (camelCase keys, as served)."""
    template = await template_service.get_template(template_id, db)
    template = await template_service.update_config(template, patch, db, composer)
    return TemplateResponse.model_validate(template)


@router.post("/templates/{template_id}/maintenance", response_model=TemplateResponse)
@admin_limit
async def toggle_maintenance(
    request: Request,
    response: Response,
    template_id: str,
    payload: MaintenanceToggle,
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
    _admin: AdminUser = Depends(require_template_admin),
) -> TemplateResponse:
    template = await template_service.get_template(template_id, db)
    template = await template_service.set_maintenance(template, payload.enabled, db, composer)
    return TemplateResponse.model_validate(template)


@router.post("/templates/{template_id}/images", response_model=ImageResponse, status_code=status.HTTP_201_CREATED)
@upload_limit
async def register_template_image(
    request: Request,
    response: Response,
    template_id: str,
    payload: ImageCreate,
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
    _admin: AdminUser = Depends(require_template_admin),
) -> ImageResponse:
    template = await template_service.get_template(template_id, db)
    image = await template_service.add_image(
        template,
        payload.url,
        payload.category.value,
        db,
        composer,
        name=payload.name,
        order_index=payload.order_index,
    )
    return ImageResponse.model_validate(image)
