"""
Template Resolver

Maps a path-supplied identifier to its Template.

Identifier shapes:
- template id (uuid string)
- slug (``^[a-z0-9-]+$``)
- legacy ``t/<something>`` paths, always rejected even if a template
  with that literal slug exists, so stale bookmarks never land on
  someone else's site

Pure read; raises instead of returning None so callers can tell a 404
(``TemplateNotFoundError``) from a redirect
(``InvalidTemplateIdentifierError``).
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.exceptions import InvalidTemplateIdentifierError, TemplateNotFoundError
from wedsite.models.template import Template
from wedsite.utils.slugify import is_valid_slug

logger = logging.getLogger(__name__)

LEGACY_PREFIX = "t/"


def is_legacy_identifier(identifier: str) -> bool:
    return identifier.strip().lower().startswith(LEGACY_PREFIX)


def canonical_identifier(identifier: str) -> str:
    """Return ``identifier`` if already canonical, else raise.

    Raises:
        TemplateNotFoundError: legacy prefix, or no canonical form exists.
        InvalidTemplateIdentifierError: the lower-cased, trimmed form is a
            valid slug; ``canonical`` carries it for a redirect.
    """
    if is_legacy_identifier(identifier):
        logger.info("Rejected legacy template identifier: %s", identifier)
        raise TemplateNotFoundError(identifier, reason="legacy")
    if is_valid_slug(identifier):
        return identifier
    normalized = identifier.strip().lower()
    if is_valid_slug(normalized):
        raise InvalidTemplateIdentifierError(identifier, normalized)
    raise TemplateNotFoundError(identifier, reason="invalid")


async def get_template_by_id(template_id: str, db: AsyncSession) -> Template | None:
    result = await db.execute(select(Template).where(Template.id == template_id))
    return result.scalars().first()


async def get_template_by_slug(slug: str, db: AsyncSession) -> Template | None:
    result = await db.execute(select(Template).where(Template.slug == slug))
    return result.scalars().first()


async def resolve_template(identifier: str, db: AsyncSession, *, include_inactive: bool = False) -> Template:
    """Resolve an id or slug to a Template; id wins over slug.

    Inactive templates count as not found unless ``include_inactive``.
    """
    identifier = canonical_identifier(identifier)

    template = await get_template_by_id(identifier, db)
    if template is None:
        template = await get_template_by_slug(identifier, db)

    if template is None or (not template.is_active and not include_inactive):
        raise TemplateNotFoundError(identifier)
    return template
