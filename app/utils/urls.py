"""Canonical ``{id}-{slug}`` path segments for public monument pages."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.core.exceptions import InvalidIdentifierError

SITES_SEGMENT = "/sites/"
_ID_RE = re.compile(r"[0-9]+")
# monuments.id is a 32-bit signed INTEGER
MAX_ENTITY_ID = 2**31 - 1


@dataclass(frozen=True)
class ParsedEntityUrl:
    """Result of parsing an ``{id}`` or ``{id}-{slug}`` segment."""

    id: int
    slug: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        if self.slug:
            data["slug"] = self.slug
        return data


def _validate_id(entity_id: object) -> int:
    if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
        raise InvalidIdentifierError(entity_id)
    return entity_id


def build_entity_url(
    entity_id: int,
    slug: Optional[str],
    lang: str = "en",
    base_url: Optional[str] = None,
) -> str:
    """Return ``/{lang}/sites/{id}-{slug}`` (or ``/{lang}/sites/{id}`` without a slug).

    ``base_url`` is prefixed verbatim.
    """
    entity_id = _validate_id(entity_id)
    path = f"/{lang}/sites/{entity_id}-{slug}" if slug else f"/{lang}/sites/{entity_id}"
    return f"{base_url}{path}" if base_url else path


def parse_entity_url(value: str) -> ParsedEntityUrl:
    """Extract the id and optional slug from a path or path segment.

    Accepts ``"21"``, ``"21-al-masmak-fort"`` or a full path such as
    ``"/en/sites/21-al-masmak-fort"``. Only the id is authoritative; the slug is
    returned as-is and never validated against stored data.
    """
    if not value or not isinstance(value, str):
        raise InvalidIdentifierError(value)

    segment = value.strip()
    if SITES_SEGMENT in segment:
        segment = segment.rsplit(SITES_SEGMENT, 1)[-1]

    id_part, _, slug_part = segment.partition("-")
    if not _ID_RE.fullmatch(id_part):
        raise InvalidIdentifierError(id_part)

    entity_id = int(id_part)
    if entity_id <= 0 or entity_id > MAX_ENTITY_ID:
        raise InvalidIdentifierError(id_part)

    return ParsedEntityUrl(id=entity_id, slug=slug_part or None)


def build_monument_urls(monument, base_url: Optional[str] = None) -> Dict[str, str]:
    """Canonical portal URLs for both languages of a monument."""
    return {
        "en": build_entity_url(monument.id, monument.slug_en, "en", base_url),
        "ar": build_entity_url(monument.id, monument.slug_ar, "ar", base_url),
    }
