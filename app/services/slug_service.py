"""Slug uniqueness resolution against persistent storage."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import SlugExhaustedError
from app.middleware.metrics import slug_collisions_total
from app.models.monument import Monument
from app.utils.slug import MonumentSlugs

logger = logging.getLogger(__name__)


class SlugLang(str, Enum):
    """Slug namespaces; uniqueness is enforced per namespace."""

    EN = "en"
    AR = "ar"

    @property
    def field_name(self) -> str:
        return f"slug_{self.value}"


class SlugStore(Protocol):
    """Lookup primitive the resolver needs from storage."""

    async def slug_taken(self, lang: SlugLang, slug: str, exclude_id: Optional[int] = None) -> bool:
        ...


class MonumentSlugStore:
    """``SlugStore`` backed by the ``monuments`` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def slug_taken(self, lang: SlugLang, slug: str, exclude_id: Optional[int] = None) -> bool:
        column = getattr(Monument, SlugLang(lang).field_name)
        query = select(Monument.id).where(column == slug)
        if exclude_id is not None:
            query = query.where(Monument.id != exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None


async def ensure_unique_slug(
    base_slug: str,
    lang: SlugLang,
    exclude_id: Optional[int],
    store: SlugStore,
    *,
    max_attempts: Optional[int] = None,
) -> str:
    """Return ``base_slug`` or the first free ``{base_slug}-{n}`` for ``n >= 2``.

    ``exclude_id`` keeps an entity being updated from colliding with itself.
    Empty slugs are exempt and returned as-is. The check is read-only; the
    caller persists the result. Raises ``SlugExhaustedError`` once ``n`` would
    exceed ``max_attempts``.
    """
    if not base_slug:
        return ""

    lang = SlugLang(lang)
    limit = settings.SLUG_MAX_ATTEMPTS if max_attempts is None else max_attempts

    if not await store.slug_taken(lang, base_slug, exclude_id):
        return base_slug

    slug_collisions_total.labels(lang.value).inc()
    logger.debug(f"Slug collision for {lang.value} slug '{base_slug}', probing suffixes")

    for counter in range(2, limit + 1):
        candidate = f"{base_slug}-{counter}"
        if not await store.slug_taken(lang, candidate, exclude_id):
            return candidate
        slug_collisions_total.labels(lang.value).inc()

    logger.error(f"Exhausted {limit} suffixes for {lang.value} slug '{base_slug}'")
    raise SlugExhaustedError(base_slug, lang.value, limit)


async def assign_unique_slugs(
    store: SlugStore,
    *,
    slug_en: str,
    slug_ar: str,
    exclude_id: Optional[int] = None,
    max_attempts: Optional[int] = None,
) -> MonumentSlugs:
    """Resolve both namespaces for one monument."""
    return MonumentSlugs(
        slug_en=await ensure_unique_slug(
            slug_en, SlugLang.EN, exclude_id, store, max_attempts=max_attempts
        ),
        slug_ar=await ensure_unique_slug(
            slug_ar, SlugLang.AR, exclude_id, store, max_attempts=max_attempts
        ),
    )
