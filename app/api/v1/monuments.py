"""Monument management endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import NotFoundError
from app.core.security import Permission
from app.crud.monument import monument as monument_crud
from app.database import get_db
from app.dependencies import get_locale, require_permission
from app.localization.helpers import get_translation
from app.models.monument import Monument
from app.models.user import User
from app.schemas.common import PaginatedResponse
from app.schemas.monument import (
    MonumentCreate,
    MonumentResponse,
    MonumentUpdate,
    SlugBackfillResponse,
)
from app.services.slug_backfill import populate_missing_slugs
from app.utils.urls import build_monument_urls

router = APIRouter()


def serialize_monument(monument: Monument) -> MonumentResponse:
    """Response model with canonical portal URLs attached."""
    response = MonumentResponse.model_validate(monument)
    response.urls = build_monument_urls(monument, settings.PUBLIC_BASE_URL)
    return response


async def _get_or_404(db: AsyncSession, monument_id: int, locale: str) -> Monument:
    monument = await monument_crud.get(db, monument_id)
    if monument is None:
        raise NotFoundError(get_translation("errors.monument_not_found", locale))
    return monument


@router.get("", response_model=PaginatedResponse[MonumentResponse])
async def list_monuments(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MONUMENT_VIEW)),
):
    """List monuments."""
    items = await monument_crud.get_multi(db, skip=skip, limit=limit)
    total = await monument_crud.count(db)
    return PaginatedResponse[MonumentResponse](
        total=total,
        skip=skip,
        limit=limit,
        items=[serialize_monument(item) for item in items],
    )


@router.post("", response_model=MonumentResponse, status_code=status.HTTP_201_CREATED)
async def create_monument(
    payload: MonumentCreate,
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
    current_user: User = Depends(require_permission(Permission.MONUMENT_CREATE)),
):
    """Create a monument; slugs are generated from the names unless supplied."""
    monument = await monument_crud.create(db, obj_in=payload, locale=locale)
    return serialize_monument(monument)


@router.post("/slugs/populate", response_model=SlugBackfillResponse)
async def populate_slugs(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_permission(Permission.MONUMENT_UPDATE)),
):
    """Generate slugs for monuments that do not have them yet."""
    result = await populate_missing_slugs(db)
    return SlugBackfillResponse(
        total=result.total,
        updated=result.updated,
        errors=result.errors,
        failed_ids=result.failed_ids,
    )


@router.get("/{monument_id}", response_model=MonumentResponse)
async def get_monument(
    monument_id: int,
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
    current_user: User = Depends(require_permission(Permission.MONUMENT_VIEW)),
):
    """Fetch monument by id."""
    return serialize_monument(await _get_or_404(db, monument_id, locale))


@router.put("/{monument_id}", response_model=MonumentResponse)
async def update_monument(
    monument_id: int,
    payload: MonumentUpdate,
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
    current_user: User = Depends(require_permission(Permission.MONUMENT_UPDATE)),
):
    """Update monument data, regenerating slugs for renamed namespaces."""
    monument = await _get_or_404(db, monument_id, locale)
    monument = await monument_crud.update(db, db_obj=monument, obj_in=payload, locale=locale)
    return serialize_monument(monument)


@router.delete("/{monument_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_monument(
    monument_id: int,
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
    current_user: User = Depends(require_permission(Permission.MONUMENT_DELETE)),
):
    """Delete monument."""
    await _get_or_404(db, monument_id, locale)
    await monument_crud.remove(db, id=monument_id)
