"""
Platform Administration Routes

All routes are restricted to platform admins.

GET    /api/platform-admin/templates                 → list templates
POST   /api/platform-admin/templates                 → create template
GET    /api/platform-admin/templates/{id}            → get template
PATCH  /api/platform-admin/templates/{id}            → update name/slug/owner/active
POST   /api/platform-admin/templates/{id}/clone      → clone into a new tenant
POST   /api/platform-admin/admins                    → create an admin account
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.auth import create_admin, get_admin_by_email, require_platform_admin
from wedsite.database import get_db
from wedsite.dependencies import get_composer
from wedsite.exceptions import DuplicateResourceError, ValidationError
from wedsite.middleware.rate_limit import admin_limit
from wedsite.models.admin_user import AdminRole, AdminUser
from wedsite.schemas.auth import AdminCreate, AdminResponse
from wedsite.schemas.template import TemplateClone, TemplateCreate, TemplateResponse, TemplateUpdate
from wedsite.services import template_service
from wedsite.services.config_composer import ConfigComposer

router = APIRouter(tags=["Platform Admin"])
logger = logging.getLogger(__name__)


@router.get("/templates", response_model=list[TemplateResponse])
@admin_limit
async def list_templates_route(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> list[TemplateResponse]:
    templates = await template_service.list_templates(db)
    return [TemplateResponse.model_validate(template) for template in templates]


@router.post("/templates", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
@admin_limit
async def create_template_route(
    request: Request,
    response: Response,
    payload: TemplateCreate,
    db: AsyncSession = Depends(get_db),
    admin: AdminUser = Depends(require_platform_admin),
) -> TemplateResponse:
    """Create a template; the slug is derived from the name when omitted."""
    template = await template_service.create_template(
        payload.name,
        db,
        slug=payload.slug,
        template_key=payload.template_key,
        owner_email=payload.owner_email,
        owner_name=payload.owner_name,
        config=payload.config,
    )
    logger.info("Admin %d created template %s", admin.id, template.id)
    return TemplateResponse.model_validate(template)


@router.get("/templates/{template_id}", response_model=TemplateResponse)
@admin_limit
async def get_template_route(
    request: Request,
    response: Response,
    template_id: str,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TemplateResponse:
    return TemplateResponse.model_validate(await template_service.get_template(template_id, db))


@router.patch("/templates/{template_id}", response_model=TemplateResponse)
@admin_limit
async def update_template_route(
    request: Request,
    response: Response,
    template_id: str,
    payload: TemplateUpdate,
    db: AsyncSession = Depends(get_db),
    composer: ConfigComposer = Depends(get_composer),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TemplateResponse:
    template = await template_service.update_template(
        template_id, payload.model_dump(exclude_unset=True), db, composer
    )
    return TemplateResponse.model_validate(template)


@router.post("/templates/{template_id}/clone", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
@admin_limit
async def clone_template_route(
    request: Request,
    response: Response,
    template_id: str,
    payload: TemplateClone,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> TemplateResponse:
    clone = await template_service.clone_template(
        template_id,
        payload.name,
        db,
        slug=payload.slug,
        owner_email=payload.owner_email,
        owner_name=payload.owner_name,
    )
    return TemplateResponse.model_validate(clone)


@router.post("/admins", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
@admin_limit
async def create_admin_route(
    request: Request,
    response: Response,
    payload: AdminCreate,
    db: AsyncSession = Depends(get_db),
    _admin: AdminUser = Depends(require_platform_admin),
) -> AdminResponse:
    if payload.role is AdminRole.template_admin:
        if not payload.template_id:
            raise ValidationError("Template admins need a templateId", field="templateId")
        await template_service.get_template(payload.template_id, db)
    if await get_admin_by_email(payload.email, db) is not None:
        raise DuplicateResourceError("Admin", "email", payload.email)

    try:
        admin = await create_admin(
            payload.email,
            payload.password,
            db,
            role=payload.role,
            template_id=payload.template_id if payload.role is AdminRole.template_admin else None,
        )
    except IntegrityError:
        await db.rollback()
        raise DuplicateResourceError("Admin", "email", payload.email)
    return AdminResponse.model_validate(admin)
