"""Pytest configuration and fixtures."""
import os
import uuid
from pathlib import Path
from typing import Dict, Optional

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

TEST_DB_PATH = Path("test_app.db")
if TEST_DB_PATH.exists():
    TEST_DB_PATH.unlink()

TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("LOG_FORMAT", "text")

from app.main import app  # noqa: E402
from app.database import Base, get_db  # noqa: E402
from app.models.monument import Monument  # noqa: E402
from app.models.user import User, Role  # noqa: E402
from app.services.auth_service import AuthService  # noqa: E402
from app.services.bootstrap_service import ensure_roles  # noqa: E402
from app.services.slug_service import SlugLang  # noqa: E402
from app.utils.security import create_access_token  # noqa: E402


test_engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class InMemorySlugStore:
    """Slug store over a dict of ``{id: {"en": slug, "ar": slug}}``."""

    def __init__(self, rows: Optional[Dict[int, Dict[str, str]]] = None):
        self.rows = rows or {}
        self.lookups = []

    async def slug_taken(self, lang, slug, exclude_id=None):
        lang = SlugLang(lang)
        self.lookups.append((lang.value, slug, exclude_id))
        return any(
            row.get(lang.value) == slug
            for row_id, row in self.rows.items()
            if row_id != exclude_id
        )


@pytest.fixture
def slug_store():
    """Empty in-memory slug store."""
    return InMemorySlugStore()


@pytest.fixture
def slug_store_factory():
    """Build in-memory slug stores from row dicts."""
    return InMemorySlugStore


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create a test database session."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
def client(db_session: AsyncSession):
    """Create a test client overriding database dependency."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_admin_role(db_session: AsyncSession) -> Role:
    """Admin role with every permission."""
    role_map = await ensure_roles(db_session, role_names=["admin"])
    return role_map["admin"]


@pytest_asyncio.fixture
async def test_viewer_role(db_session: AsyncSession) -> Role:
    """Read-only role."""
    role_map = await ensure_roles(db_session, role_names=["viewer"])
    return role_map["viewer"]


async def _make_user(db_session: AsyncSession, email: str, role: Role) -> User:
    user = User(
        id=uuid.uuid4(),
        email=email,
        password_hash=AuthService.hash_password("testpassword"),
        full_name="Test User",
        is_active=True,
    )
    user.roles = [role]
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, test_admin_role: Role) -> User:
    """Create a test user with the admin role."""
    return await _make_user(db_session, "test@example.com", test_admin_role)


@pytest_asyncio.fixture
async def test_viewer(db_session: AsyncSession, test_viewer_role: Role) -> User:
    """Create a read-only test user."""
    return await _make_user(db_session, "viewer@example.com", test_viewer_role)


def _headers_for(user: User) -> Dict[str, str]:
    token = create_access_token({"sub": str(user.id), "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user):
    """Get authentication headers."""
    return _headers_for(test_user)


@pytest.fixture
def viewer_headers(test_viewer):
    """Authentication headers for the read-only user."""
    return _headers_for(test_viewer)


@pytest_asyncio.fixture
async def make_monument(db_session: AsyncSession):
    """Factory inserting monuments directly, bypassing slug generation."""

    async def _make(name_en="Temple of Karnak", name_ar="معبد الكرنك", slug_en=None, slug_ar=None):
        monument = Monument(
            monument_name_en=name_en,
            monument_name_ar=name_ar,
            slug_en=slug_en,
            slug_ar=slug_ar,
        )
        db_session.add(monument)
        await db_session.commit()
        await db_session.refresh(monument)
        return monument

    return _make
