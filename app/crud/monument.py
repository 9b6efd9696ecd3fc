"""Monument CRUD operations with slug assignment."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import ConflictError
from app.crud.base import CRUDBase
from app.localization.helpers import get_translation
from app.middleware.metrics import slug_write_retries_total
from app.models.monument import Monument
from app.schemas.monument import MonumentCreate, MonumentUpdate
from app.services.slug_service import MonumentSlugStore, SlugLang, ensure_unique_slug
from app.utils.slug import generate_arabic_slug, generate_english_slug

logger = logging.getLogger(__name__)

_NAME_FIELDS = {
    SlugLang.EN: "monument_name_en",
    SlugLang.AR: "monument_name_ar",
}

_GENERATORS = {
    SlugLang.EN: generate_english_slug,
    SlugLang.AR: generate_arabic_slug,
}


def _as_dict(obj_in: Union[MonumentCreate, MonumentUpdate, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(obj_in, dict):
        return dict(obj_in)
    return obj_in.model_dump(exclude_unset=True, mode="python")


# Postgres reports the constraint name, SQLite the column
_SLUG_VIOLATION_MARKERS = (
    "uq_monuments_slug_en",
    "uq_monuments_slug_ar",
    "monuments.slug_en",
    "monuments.slug_ar",
)


def is_slug_violation(exc: IntegrityError) -> bool:
    """True when the integrity error comes from a slug unique constraint."""
    message = str(exc.orig)
    return any(marker in message for marker in _SLUG_VIOLATION_MARKERS)


class CRUDMonument(CRUDBase[Monument, MonumentCreate, MonumentUpdate]):
    """CRUD operations for Monument."""

    async def _save_with_unique_slugs(
        self,
        db: AsyncSession,
        *,
        values: Dict[str, Any],
        base_slugs: Dict[SlugLang, str],
        db_obj: Optional[Monument] = None,
        locale: str = "en",
    ) -> Monument:
        """Resolve slugs, then write; re-resolve if the unique constraint fires.

        Two writers can both see a slug as free. The unique constraints on
        ``slug_en``/``slug_ar`` reject the second write, which is rolled back
        and retried against the new state of the table.
        """
        exclude_id = db_obj.id if db_obj is not None else None
        attempts = max(settings.SLUG_WRITE_RETRIES, 1)
        store = MonumentSlugStore(db)

        attempt = 0
        while True:
            attempt += 1
            resolved: Dict[str, Optional[str]] = {}
            for lang, base_slug in base_slugs.items():
                slug = await ensure_unique_slug(base_slug, lang, exclude_id, store)
                resolved[lang.field_name] = slug or None

            target = db_obj if db_obj is not None else self.model()
            for field, value in {**values, **resolved}.items():
                setattr(target, field, value)

            db.add(target)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                if not is_slug_violation(exc):
                    raise
                if attempt >= attempts:
                    logger.error(f"Slug write failed after {attempts} attempts: {resolved}")
                    raise ConflictError(get_translation("errors.slug_conflict", locale))
                slug_write_retries_total.inc()
                logger.warning(f"Slug constraint violation on attempt {attempt}, re-resolving {resolved}")
                continue

            await db.refresh(target)
            logger.info(f"Monument {target.id} slugs: en={target.slug_en!r} ar={target.slug_ar!r}")
            return target

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: Union[MonumentCreate, Dict[str, Any]],
        locale: str = "en",
    ) -> Monument:
        """Create a monument, generating slugs unless overrides are given."""
        values = _as_dict(obj_in)
        base_slugs: Dict[SlugLang, str] = {}
        for lang, name_field in _NAME_FIELDS.items():
            override = values.pop(lang.field_name, None)
            base_slugs[lang] = override or _GENERATORS[lang](values.get(name_field))

        return await self._save_with_unique_slugs(
            db, values=values, base_slugs=base_slugs, locale=locale
        )

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: Monument,
        obj_in: Union[MonumentUpdate, Dict[str, Any]],
        locale: str = "en",
    ) -> Monument:
        """Update a monument.

        A namespace's slug is regenerated only when its name changed and no
        override was supplied. Overrides always go through uniqueness checks.
        """
        values = _as_dict(obj_in)
        base_slugs: Dict[SlugLang, str] = {}
        for lang, name_field in _NAME_FIELDS.items():
            override = values.pop(lang.field_name, None)
            if override:
                base_slugs[lang] = override
                continue
            new_name = values.get(name_field)
            if new_name is not None and new_name != getattr(db_obj, name_field):
                base_slugs[lang] = _GENERATORS[lang](new_name)

        return await self._save_with_unique_slugs(
            db, values=values, base_slugs=base_slugs, db_obj=db_obj, locale=locale
        )


monument = CRUDMonument(Monument)
