"""Tests for monument create/update slug handling."""
import re

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

import app.crud.monument as monument_module
from app.config import settings
from app.core.exceptions import ConflictError
from app.crud.monument import monument as monument_crud
from app.schemas.monument import MonumentCreate, MonumentUpdate
from app.services import slug_service
from app.services.slug_service import SlugLang

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def _payload(name_en="Al-Masmak Fort", name_ar="قصر المصمك", **extra):
    return MonumentCreate(monument_name_en=name_en, monument_name_ar=name_ar, **extra)


@pytest.mark.asyncio
async def test_create_generates_both_slugs(db_session):
    """Slugs are derived from the English and Arabic names."""
    created = await monument_crud.create(db_session, obj_in=_payload())

    assert created.id is not None
    assert created.slug_en == "al-masmak-fort"
    assert SLUG_RE.match(created.slug_ar)


@pytest.mark.asyncio
async def test_create_with_same_names_gets_suffixes(db_session):
    """Name clashes are resolved per namespace with -2, -3 ..."""
    first = await monument_crud.create(db_session, obj_in=_payload("Temple", "معبد"))
    second = await monument_crud.create(db_session, obj_in=_payload("Temple", "معبد"))
    third = await monument_crud.create(db_session, obj_in=_payload("Temple", "معبد آخر"))

    assert [first.slug_en, second.slug_en, third.slug_en] == ["temple", "temple-2", "temple-3"]
    assert second.slug_ar == f"{first.slug_ar}-2"
    assert third.slug_ar != first.slug_ar


@pytest.mark.asyncio
async def test_create_override_skips_generation_but_stays_unique(db_session):
    """Caller-supplied slugs are used verbatim unless already taken."""
    first = await monument_crud.create(db_session, obj_in=_payload(slug_en="masmak", slug_ar="qasr-masmak"))
    second = await monument_crud.create(db_session, obj_in=_payload("Other Fort", slug_en="masmak"))

    assert first.slug_en == "masmak"
    assert first.slug_ar == "qasr-masmak"
    assert second.slug_en == "masmak-2"


@pytest.mark.asyncio
async def test_untransliterable_name_stores_null_slug(db_session):
    """A name that yields no slug leaves the column empty."""
    first = await monument_crud.create(db_session, obj_in=_payload("Fort One", "!!!"))
    second = await monument_crud.create(db_session, obj_in=_payload("Fort Two", "؟؟"))

    assert first.slug_ar is None
    assert second.slug_ar is None


@pytest.mark.asyncio
async def test_update_regenerates_slug_when_name_changes(db_session):
    """Renaming regenerates that namespace only."""
    created = await monument_crud.create(db_session, obj_in=_payload())
    original_ar = created.slug_ar

    updated = await monument_crud.update(
        db_session,
        db_obj=created,
        obj_in=MonumentUpdate(monument_name_en="Masmak Palace"),
    )

    assert updated.slug_en == "masmak-palace"
    assert updated.slug_ar == original_ar


@pytest.mark.asyncio
async def test_update_without_name_change_keeps_slug(db_session):
    """Unrelated edits and same-name updates do not touch slugs."""
    created = await monument_crud.create(db_session, obj_in=_payload(slug_en="custom-slug"))

    updated = await monument_crud.update(
        db_session,
        db_obj=created,
        obj_in=MonumentUpdate(lat="24.63", monument_name_en="Al-Masmak Fort"),
    )

    assert updated.slug_en == "custom-slug"
    assert updated.lat == "24.63"


@pytest.mark.asyncio
async def test_update_does_not_collide_with_itself(db_session):
    """Re-slugging to the current value keeps it without a suffix."""
    created = await monument_crud.create(db_session, obj_in=_payload())

    updated = await monument_crud.update(
        db_session,
        db_obj=created,
        obj_in=MonumentUpdate(monument_name_en="Al Masmak Fort!"),
    )

    assert updated.slug_en == "al-masmak-fort"


@pytest.mark.asyncio
async def test_update_override_wins_over_name_change(db_session):
    """An explicit slug beats regeneration and is still made unique."""
    await monument_crud.create(db_session, obj_in=_payload("Karnak", "الكرنك", slug_en="karnak"))
    target = await monument_crud.create(db_session, obj_in=_payload())

    updated = await monument_crud.update(
        db_session,
        db_obj=target,
        obj_in=MonumentUpdate(monument_name_en="Something Else", slug_en="karnak"),
    )

    assert updated.monument_name_en == "Something Else"
    assert updated.slug_en == "karnak-2"


@pytest.mark.asyncio
async def test_create_retries_after_unique_violation(db_session, make_monument, monkeypatch):
    """A slug grabbed between check and write is re-resolved."""
    await make_monument(name_en="Race", slug_en="race")
    real_resolver = slug_service.ensure_unique_slug
    calls = {"stale": 0}

    async def stale_then_real(base_slug, lang, exclude_id, store, **kwargs):
        if SlugLang(lang) is SlugLang.EN and calls["stale"] == 0:
            calls["stale"] += 1
            return base_slug
        return await real_resolver(base_slug, lang, exclude_id, store, **kwargs)

    monkeypatch.setattr(monument_module, "ensure_unique_slug", stale_then_real)

    created = await monument_crud.create(db_session, obj_in=_payload("Race", "سباق"))

    assert calls["stale"] == 1
    assert created.slug_en == "race-2"


@pytest.mark.asyncio
async def test_create_gives_up_after_configured_retries(db_session, make_monument, monkeypatch):
    """Persistent violations surface as a conflict."""
    await make_monument(name_en="Race", slug_en="race")

    async def always_stale(base_slug, lang, exclude_id, store, **kwargs):
        return base_slug

    monkeypatch.setattr(monument_module, "ensure_unique_slug", always_stale)
    monkeypatch.setattr(settings, "SLUG_WRITE_RETRIES", 2)

    with pytest.raises(ConflictError):
        await monument_crud.create(db_session, obj_in=_payload("Race", "سباق"))


@pytest.mark.asyncio
async def test_other_integrity_errors_are_not_retried(db_session, monkeypatch):
    """Only slug constraint violations are re-resolved."""
    created = await monument_crud.create(db_session, obj_in=_payload("Karnak", "الكرنك"))
    resolver_calls = []

    async def counting_resolver(base_slug, lang, exclude_id, store, **kwargs):
        resolver_calls.append(lang)
        return base_slug

    monkeypatch.setattr(monument_module, "ensure_unique_slug", counting_resolver)

    with pytest.raises(IntegrityError):
        await monument_crud.update(
            db_session,
            db_obj=created,
            obj_in={"monument_name_ar": None, "slug_en": "karnak-new"},
        )

    assert resolver_calls == [SlugLang.EN]


def test_update_schema_rejects_null_names():
    with pytest.raises(ValidationError):
        MonumentUpdate(monument_name_en=None)

    assert MonumentUpdate(lat="1").model_dump(exclude_unset=True) == {"lat": "1"}
