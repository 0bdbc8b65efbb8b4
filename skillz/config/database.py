"""
Async engine and session wiring.

One engine per process. Request handlers get a session from
``get_db_session``; repositories flush, use cases commit.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from skillz.config.logging import get_logger
from skillz.config.settings import settings

logger = get_logger(__name__)


def _engine_options(url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.DATABASE_ECHO}

    # SQLite files and the test run get no pooling; Postgres gets a sized pool.
    if settings.ENVIRONMENT == "test" or make_url(url).get_backend_name() == "sqlite":
        options["poolclass"] = NullPool
        return options

    options.update(
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_recycle=settings.DATABASE_POOL_RECYCLE,
        pool_pre_ping=True,
    )
    return options


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create the async engine for ``database_url`` (defaults to settings)."""
    url = database_url or str(settings.DATABASE_URL)
    logger.debug("Creating database engine", backend=make_url(url).get_backend_name())
    return create_async_engine(url, **_engine_options(url))


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = create_engine()
async_session_factory = create_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a session; uncommitted work is rolled back."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
