# app/infrastructure/database/session.py

from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    async_sessionmaker,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from app.config.settings import get_settings

DATABASE_URL = get_settings().database_url


def _engine_options(url: str) -> dict:
    # In-memory SQLite: one shared connection so every session sees the same DB.
    if url.startswith("sqlite") and ":memory:" in url:
        return {"poolclass": StaticPool}
    if url.startswith("sqlite"):
        return {}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    **_engine_options(DATABASE_URL),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
    class_=AsyncSession,
)

Base = declarative_base()


async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def create_tables() -> None:
    """Create all tables registered on Base. Used at startup for SQLite and in tests."""
    from app.infrastructure.database import models  # noqa: F401 - register with Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
