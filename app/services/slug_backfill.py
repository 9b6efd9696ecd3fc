"""Back-fill slugs for monuments created before slugs existed."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import SlugExhaustedError
from app.models.monument import Monument
from app.services.slug_service import MonumentSlugStore, SlugLang, ensure_unique_slug
from app.utils.slug import generate_monument_slugs

logger = logging.getLogger(__name__)

PROGRESS_LOG_INTERVAL = 10


@dataclass
class SlugBackfillResult:
    """Counts from a back-fill run."""

    total: int = 0
    updated: int = 0
    failed_ids: List[int] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return len(self.failed_ids)


async def populate_missing_slugs(
    db: AsyncSession,
    *,
    max_attempts: Optional[int] = None,
) -> SlugBackfillResult:
    """Give every monument lacking a slug one, in id order.

    Only empty namespaces are filled; existing slugs are left alone. Each
    monument is committed on its own so one failure does not undo the rest.
    """
    result = await db.execute(
        select(Monument.id)
        .where(or_(Monument.slug_en.is_(None), Monument.slug_ar.is_(None)))
        .order_by(Monument.id)
    )
    monument_ids = list(result.scalars().all())
    outcome = SlugBackfillResult(total=len(monument_ids))
    logger.info(f"Found {outcome.total} monuments without slugs")

    store = MonumentSlugStore(db)
    for monument_id in monument_ids:
        monument = await db.get(Monument, monument_id)
        if monument is None:
            continue

        generated = generate_monument_slugs(monument.monument_name_en, monument.monument_name_ar)
        try:
            for lang, base_slug in ((SlugLang.EN, generated.slug_en), (SlugLang.AR, generated.slug_ar)):
                if getattr(monument, lang.field_name) is None:
                    slug = await ensure_unique_slug(
                        base_slug, lang, monument_id, store, max_attempts=max_attempts
                    )
                    setattr(monument, lang.field_name, slug or None)
            await db.commit()
        except (SQLAlchemyError, SlugExhaustedError):
            await db.rollback()
            outcome.failed_ids.append(monument_id)
            logger.exception(f"Failed to populate slugs for monument #{monument_id}")
            continue

        outcome.updated += 1
        if outcome.updated % PROGRESS_LOG_INTERVAL == 0:
            logger.info(f"Processed {outcome.updated}/{outcome.total} monuments")

    logger.info(
        f"Slug back-fill complete: total={outcome.total} "
        f"updated={outcome.updated} errors={outcome.errors}"
    )
    return outcome
