"""Schemas for monuments."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"


class MonumentBase(BaseModel):
    """Base schema for monuments."""

    monument_name_en: str = Field(..., min_length=1, max_length=255)
    monument_name_ar: str = Field(..., min_length=1, max_length=255)
    monument_biography_en: Optional[str] = None
    monument_biography_ar: Optional[str] = None
    lat: Optional[str] = None
    lng: Optional[str] = None
    zoom: Optional[str] = None
    center: Optional[str] = None
    image: Optional[str] = None
    m_date: Optional[str] = None


class MonumentCreate(MonumentBase):
    """Create monument payload.

    ``slug_en``/``slug_ar`` override generation; they are still made unique.
    """

    slug_en: Optional[str] = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    slug_ar: Optional[str] = Field(default=None, max_length=255, pattern=SLUG_PATTERN)


class MonumentUpdate(BaseModel):
    """Update monument payload."""

    monument_name_en: Optional[str] = Field(default=None, min_length=1, max_length=255)
    monument_name_ar: Optional[str] = Field(default=None, min_length=1, max_length=255)
    monument_biography_en: Optional[str] = None
    monument_biography_ar: Optional[str] = None
    lat: Optional[str] = None
    lng: Optional[str] = None
    zoom: Optional[str] = None
    center: Optional[str] = None
    image: Optional[str] = None
    m_date: Optional[str] = None
    slug_en: Optional[str] = Field(default=None, max_length=255, pattern=SLUG_PATTERN)
    slug_ar: Optional[str] = Field(default=None, max_length=255, pattern=SLUG_PATTERN)

    @field_validator("monument_name_en", "monument_name_ar")
    @classmethod
    def names_not_null(cls, value: Optional[str]) -> str:
        # names may be omitted but never cleared
        if value is None:
            raise ValueError("Monument names cannot be null")
        return value


class MonumentResponse(MonumentBase):
    """Response schema for monuments."""

    id: int
    slug_en: Optional[str] = None
    slug_ar: Optional[str] = None
    urls: Dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SlugBackfillResponse(BaseModel):
    """Outcome of a slug back-fill run."""

    total: int
    updated: int
    errors: int
    failed_ids: list[int] = Field(default_factory=list)
