"""Database engine, session factory and lifecycle hooks."""
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.core.security import ROLE_PERMISSIONS


engine_kwargs = {
    "echo": settings.DATABASE_ECHO,
    "pool_pre_ping": True,
}

if settings.DATABASE_URL.startswith("sqlite"):
    engine_kwargs["poolclass"] = StaticPool
else:
    engine_kwargs.update({"pool_size": 10, "max_overflow": 20})

engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    """Dependency for getting database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db() -> None:
    """Create tables and make sure default roles and the admin account exist."""
    import app.models  # noqa: F401  registers mappers on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    from app.services.bootstrap_service import ensure_default_admin, ensure_roles

    async with AsyncSessionLocal() as session:
        role_map = await ensure_roles(session, role_names=ROLE_PERMISSIONS.keys())
        await ensure_default_admin(session, role_map=role_map)


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
