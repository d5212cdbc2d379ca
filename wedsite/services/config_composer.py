"""
Config Composer

Builds a template's effective configuration:

1. defaults of the template's type (``template_key``)
2. guest-facing strings from the overlay's ``template`` namespace for the
   request locale (blank strings skipped)
3. the tenant's stored JSON

Each layer is merged per top-level section with a deep merge, so an
override that names one field of a section keeps every other default
of that section. Afterwards theme colors are back-filled, image rows
are folded into ``hero.images`` / ``photos.images``, and the result is
validated into a ``WeddingConfig``.

Composed configs are cached in an LRU keyed by
(template id, updated_at, locale, overlay version); any write to the
template or to the overlay changes the key.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.i18n.store import should_render
from wedsite.models.image import ImageCategory, TemplateImage
from wedsite.models.template import Template
from wedsite.schemas.wedding_config import WeddingConfig
from wedsite.services.translation_overlay import TranslationOverlay
from wedsite.template_types import NEUTRAL_PALETTE, get_default_config
from wedsite.utils.cache import LRUCache
from wedsite.utils.merge import merge_sections

logger = logging.getLogger(__name__)

TRANSLATION_NAMESPACE = "template"


def resolve_theme_colors(colors: Mapping[str, Any] | None, type_colors: Mapping[str, Any] | None) -> dict[str, Any]:
    """Blank color → type default → neutral palette, per key."""
    colors = dict(colors or {})
    type_colors = type_colors or {}
    for name, neutral in NEUTRAL_PALETTE.items():
        if should_render(colors.get(name)):
            continue
        fallback = type_colors.get(name)
        colors[name] = fallback if should_render(fallback) else neutral
    return colors


def apply_images(config: dict[str, Any], images: Iterable[TemplateImage]) -> None:
    """Replace hero/photo image lists with uploaded image URLs, when any exist."""
    ordered = sorted(images, key=lambda image: (image.order_index, image.id or 0))
    hero = [image.url for image in ordered if image.category == ImageCategory.hero.value]
    gallery = [image.url for image in ordered if image.category == ImageCategory.gallery.value]
    if hero:
        config.setdefault("hero", {})["images"] = hero
    if gallery:
        config.setdefault("photos", {})["images"] = gallery


async def load_template_images(template_id: str, db: AsyncSession) -> list[TemplateImage]:
    result = await db.execute(
        select(TemplateImage)
        .where(TemplateImage.template_id == template_id)
        .order_by(TemplateImage.category, TemplateImage.order_index)
    )
    return list(result.scalars().all())


class ConfigComposer:
    def __init__(self, overlay: TranslationOverlay, cache_size: int = 512, ready_timeout: float = 5.0):
        self.overlay = overlay
        self.ready_timeout = ready_timeout
        self._cache = LRUCache(max_size=cache_size)

    def build(
        self,
        template: Template,
        locale: str,
        images: Iterable[TemplateImage] = (),
    ) -> WeddingConfig:
        """Compose without caching. Raises UnsupportedTemplateTypeError."""
        defaults = get_default_config(template.template_key)
        strings = self.overlay.section(locale, TRANSLATION_NAMESPACE)

        merged = merge_sections(defaults, strings)
        merged = merge_sections(merged, template.config or {})

        locations = merged.setdefault("locations", {})
        if locations.get("venues") is None:
            locations["venues"] = []

        theme = merged.setdefault("theme", {})
        theme["colors"] = resolve_theme_colors(theme.get("colors"), defaults.get("theme", {}).get("colors"))

        apply_images(merged, images)

        merged.setdefault("maintenance", {})["enabled"] = bool(template.maintenance)
        return WeddingConfig.model_validate(merged)

    async def compose(self, template: Template, locale: str, db: AsyncSession | None = None) -> WeddingConfig:
        """Cached compose. The returned config is shared; treat it as read-only."""
        ready = self.overlay.is_ready or await self.overlay.wait_ready(self.ready_timeout)
        if not ready:
            logger.warning(
                "Translation overlay not ready after %.1fs, composing %s with static bundles",
                self.ready_timeout,
                template.id,
            )

        cache_key = (template.id, template.updated_at, locale, self.overlay.version)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        images = await load_template_images(template.id, db) if db is not None else []
        config = self.build(template, locale, images)
        if ready:
            # Static-only results would outlive the overrides once they load
            self._cache.set(cache_key, config)
        logger.debug("Composed config for template=%s locale=%s", template.id, locale)
        return config

    def invalidate(self, template_id: str | None = None) -> int:
        if template_id is None:
            size = len(self._cache)
            self._cache.clear()
            return size
        return self._cache.delete_where(lambda key: key[0] == template_id)

    def cache_stats(self) -> dict:
        return self._cache.get_stats()
