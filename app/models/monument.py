"""Monument model."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from app.database import Base


class Monument(Base):
    """Heritage site with bilingual names and per-language slugs."""

    __tablename__ = "monuments"
    __table_args__ = (
        UniqueConstraint("slug_en", name="uq_monuments_slug_en"),
        UniqueConstraint("slug_ar", name="uq_monuments_slug_ar"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    monument_name_en = Column(String(255), nullable=False)
    monument_name_ar = Column(String(255), nullable=False)
    monument_biography_en = Column(Text, nullable=True)
    monument_biography_ar = Column(Text, nullable=True)
    lat = Column(String(50), nullable=True)
    lng = Column(String(50), nullable=True)
    zoom = Column(String(20), nullable=True)
    center = Column(String(100), nullable=True)
    image = Column(String(1024), nullable=True)
    m_date = Column(String(100), nullable=True)

    # NULL means "no slug"; empty strings are never stored
    slug_en = Column(String(255), nullable=True)
    slug_ar = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
