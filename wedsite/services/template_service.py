"""
Template Service

Async CRUD for templates (tenants) used by the platform and template
admin routes. All functions accept an injected AsyncSession.

Every write that changes what a guest would see calls
``composer.invalidate`` for the template so cached configs are dropped
straight away instead of waiting for the ``updated_at`` key to roll.
"""

import copy
import hmac
import logging
from typing import Any

import pydantic
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.exceptions import DuplicateResourceError, TemplateNotFoundError, ValidationError
from wedsite.models.image import TemplateImage
from wedsite.models.template import Template
from wedsite.schemas.wedding_config import WeddingConfig
from wedsite.services.config_composer import ConfigComposer
from wedsite.services.template_resolver import get_template_by_id, get_template_by_slug, is_legacy_identifier
from wedsite.template_types import get_template_type
from wedsite.utils.merge import merge_sections
from wedsite.utils.slugify import is_valid_slug, slugify

logger = logging.getLogger(__name__)


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Check tenant JSON against the config schema; returns it unchanged."""
    try:
        WeddingConfig.model_validate(config)
    except pydantic.ValidationError as e:
        raise ValidationError(
            "Invalid template configuration",
            field="config",
            details={"errors": e.errors(include_url=False, include_context=False)},
        )
    return config


def _check_template_key(template_key: str) -> None:
    if get_template_type(template_key) is None:
        raise ValidationError(f"Unknown template type '{template_key}'", field="templateKey")


async def _slug_taken(slug: str, db: AsyncSession, exclude_id: str | None = None) -> bool:
    existing = await get_template_by_slug(slug, db)
    return existing is not None and existing.id != exclude_id


async def _available_slug(name: str, slug: str | None, db: AsyncSession) -> str:
    """Explicit slugs must be free; derived slugs get a numeric suffix until free."""
    if slug:
        if not is_valid_slug(slug) or is_legacy_identifier(slug):
            raise ValidationError(f"Invalid slug '{slug}'", field="slug")
        if await _slug_taken(slug, db):
            raise DuplicateResourceError("Template", "slug", slug)
        return slug

    base = slugify(name)
    if not base:
        raise ValidationError("Cannot derive a slug from the template name", field="slug")
    candidate, suffix = base, 2
    while await _slug_taken(candidate, db):
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


async def list_templates(db: AsyncSession, include_inactive: bool = True) -> list[Template]:
    query = select(Template).order_by(Template.created_at.desc())
    if not include_inactive:
        query = query.where(Template.is_active.is_(True))
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_template(template_id: str, db: AsyncSession) -> Template:
    template = await get_template_by_id(template_id, db)
    if template is None:
        raise TemplateNotFoundError(template_id)
    return template


async def create_template(
    name: str,
    db: AsyncSession,
    *,
    slug: str | None = None,
    template_key: str = "pro",
    owner_email: str | None = None,
    owner_name: str | None = None,
    config: dict[str, Any] | None = None,
) -> Template:
    """Create a new template (platform admin)."""
    _check_template_key(template_key)
    config = validate_config(copy.deepcopy(config or {}))
    template = Template(
        name=name,
        slug=await _available_slug(name, slug, db),
        template_key=template_key,
        owner_email=owner_email,
        owner_name=owner_name,
        config=config,
    )
    db.add(template)
    await db.commit()
    await db.refresh(template)
    logger.info("Template created: id=%s slug=%s key=%s", template.id, template.slug, template.template_key)
    return template


async def clone_template(
    source_id: str,
    name: str,
    db: AsyncSession,
    *,
    slug: str | None = None,
    owner_email: str | None = None,
    owner_name: str | None = None,
) -> Template:
    """Copy a template's type, config and images into a new tenant.

    The clone starts out of maintenance and active regardless of the source.
    """
    source = await get_template(source_id, db)
    images = (
        await db.execute(select(TemplateImage).where(TemplateImage.template_id == source.id))
    ).scalars().all()

    clone = Template(
        name=name,
        slug=await _available_slug(name, slug, db),
        template_key=source.template_key,
        owner_email=owner_email,
        owner_name=owner_name,
        config=copy.deepcopy(source.config or {}),
        source_template_id=source.id,
    )
    clone.images = [
        TemplateImage(url=image.url, name=image.name, category=image.category, order_index=image.order_index)
        for image in images
    ]
    db.add(clone)
    await db.commit()
    await db.refresh(clone)
    logger.info("Template cloned: source=%s clone=%s slug=%s", source.id, clone.id, clone.slug)
    return clone


async def update_template(
    template_id: str,
    updates: dict[str, Any],
    db: AsyncSession,
    composer: ConfigComposer | None = None,
) -> Template:
    """Partial update of name, slug, owner fields and ``is_active``."""
    template = await get_template(template_id, db)

    new_slug = updates.get("slug")
    if new_slug and new_slug != template.slug:
        if is_legacy_identifier(new_slug):
            raise ValidationError(f"Invalid slug '{new_slug}'", field="slug")
        if await _slug_taken(new_slug, db, exclude_id=template.id):
            raise DuplicateResourceError("Template", "slug", new_slug)
        template.slug = new_slug

    for field in ("name", "owner_email", "owner_name", "is_active"):
        if field in updates and updates[field] is not None:
            setattr(template, field, updates[field])

    await db.commit()
    await db.refresh(template)
    if composer is not None:
        composer.invalidate(template.id)
    logger.info("Template updated: id=%s", template.id)
    return template


async def update_config(
    template: Template,
    patch: dict[str, Any],
    db: AsyncSession,
    composer: ConfigComposer | None = None,
    *,
    replace: bool = False,
) -> Template:
    """Merge ``patch`` into the stored config per section (or replace it)."""
    config = copy.deepcopy(patch) if replace else merge_sections(template.config or {}, patch)
    template.config = validate_config(config)
    await db.commit()
    await db.refresh(template)
    if composer is not None:
        composer.invalidate(template.id)
    logger.info("Template config updated: id=%s sections=%s", template.id, sorted(patch))
    return template


async def set_maintenance(
    template: Template,
    enabled: bool,
    db: AsyncSession,
    composer: ConfigComposer | None = None,
) -> Template:
    template.maintenance = enabled
    await db.commit()
    await db.refresh(template)
    if composer is not None:
        composer.invalidate(template.id)
    logger.info("Template %s maintenance %s", template.id, "enabled" if enabled else "disabled")
    return template


def verify_maintenance_password(expected: str | None, supplied: str) -> bool:
    """Constant-time check; a template without a password never verifies."""
    if not expected:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


async def add_image(
    template: Template,
    url: str,
    category: str,
    db: AsyncSession,
    composer: ConfigComposer | None = None,
    *,
    name: str | None = None,
    order_index: int | None = None,
) -> TemplateImage:
    """Register image metadata; appended to its category unless placed explicitly."""
    if order_index is None:
        order_index = await db.scalar(
            select(func.count(TemplateImage.id)).where(
                TemplateImage.template_id == template.id,
                TemplateImage.category == category,
            )
        )
    image = TemplateImage(
        template_id=template.id,
        url=url,
        name=name,
        category=category,
        order_index=order_index or 0,
    )
    db.add(image)
    await db.commit()
    await db.refresh(image)
    if composer is not None:
        composer.invalidate(template.id)
    logger.info("Image %d added to template %s (%s)", image.id, template.id, category)
    return image
