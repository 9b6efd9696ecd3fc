"""Public portal endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.monuments import serialize_monument
from app.core.exceptions import InvalidIdentifierError, NotFoundError
from app.crud.monument import monument as monument_crud
from app.database import get_db
from app.dependencies import get_locale
from app.localization.helpers import get_translation
from app.schemas.common import PaginatedResponse
from app.schemas.monument import MonumentResponse
from app.utils.urls import parse_entity_url

router = APIRouter()


@router.get("/monuments", response_model=PaginatedResponse[MonumentResponse])
async def list_portal_monuments(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """List monuments with their canonical URLs."""
    items = await monument_crud.get_multi(db, skip=skip, limit=limit)
    total = await monument_crud.count(db)
    return PaginatedResponse[MonumentResponse](
        total=total,
        skip=skip,
        limit=limit,
        items=[serialize_monument(item) for item in items],
    )


@router.get("/monuments/{id_or_slug}", response_model=MonumentResponse)
async def get_portal_monument(
    id_or_slug: str,
    db: AsyncSession = Depends(get_db),
    locale: str = Depends(get_locale),
):
    """Fetch a monument by ``{id}`` or ``{id}-{slug}``.

    Only the id is used for the lookup, so links with an outdated slug keep
    working after a rename.
    """
    not_found = NotFoundError(get_translation("errors.monument_not_found", locale))
    try:
        parsed = parse_entity_url(id_or_slug)
    except InvalidIdentifierError:
        raise not_found

    monument = await monument_crud.get(db, parsed.id)
    if monument is None:
        raise not_found
    return serialize_monument(monument)
