"""SQLAlchemy async engine and session factory."""

from __future__ import annotations

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .models import Base

logger = structlog.get_logger(__name__)

_engine = None
_session_factory = None


def _engine_kwargs(database_url: str) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_size": 10, "max_overflow": 20}
    if url.database in (None, "", ":memory:"):
        # One shared connection, otherwise every checkout sees an empty database
        return {"poolclass": StaticPool}
    return {}


def init_db(database_url: str):
    """Initialise the async engine and session factory.

    Must be called once at application startup before any database access.
    """
    global _engine, _session_factory
    _engine = create_async_engine(database_url, **_engine_kwargs(database_url))
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    logger.info("database_initialized", backend=make_url(database_url).get_backend_name())


async def create_tables():
    """Create any missing tables. Safe to call on every startup."""
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncSession:
    """FastAPI-compatible dependency that yields an ``AsyncSession``."""
    async with _session_factory() as session:
        yield session


async def close_db():
    """Dispose of the engine connection pool.  Call at shutdown."""
    global _engine, _session_factory
    if _engine:
        await _engine.dispose()
    _engine = None
    _session_factory = None
