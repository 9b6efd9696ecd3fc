"""Helpers for generating URL-friendly monument slugs.

English names are slugified directly. Arabic (or any non-Latin) names are
transliterated to ASCII first. Both paths end in the same normalization, so
every non-empty result matches ``^[a-z0-9]+(-[a-z0-9]+)*$``.
"""
from __future__ import annotations

import re
from typing import Callable, NamedTuple, Optional

from unidecode import unidecode

Transliterator = Callable[[str], str]

_INVALID_CHARS_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATOR_RE = re.compile(r"[\s_-]+")


class MonumentSlugs(NamedTuple):
    """Slug pair for the two language namespaces."""

    slug_en: str
    slug_ar: str


def transliterate(text: str) -> str:
    """Map every character to its closest ASCII spelling."""
    return unidecode(text)


def _normalize(text: str) -> str:
    lowered = text.lower().strip()
    cleaned = _INVALID_CHARS_RE.sub("", lowered)
    return _SEPARATOR_RE.sub("-", cleaned).strip("-")


def generate_slug(text: object, *, transliterator: Optional[Transliterator] = None) -> str:
    """Convert text into a slug, or ``""`` when there is nothing usable."""
    if not text or not isinstance(text, str):
        return ""
    if transliterator is not None:
        text = transliterator(text)
    return _normalize(text)


def generate_english_slug(text: object) -> str:
    """Slug for text already in Latin script."""
    return generate_slug(text)


def generate_arabic_slug(text: object, *, transliterator: Transliterator = transliterate) -> str:
    """Slug for Arabic text, transliterated to Latin first."""
    return generate_slug(text, transliterator=transliterator)


def generate_monument_slugs(
    name_en: object,
    name_ar: object,
    *,
    transliterator: Transliterator = transliterate,
) -> MonumentSlugs:
    """Build both namespace slugs from an (English, Arabic) name pair."""
    return MonumentSlugs(
        slug_en=generate_english_slug(name_en),
        slug_ar=generate_arabic_slug(name_ar, transliterator=transliterator),
    )
