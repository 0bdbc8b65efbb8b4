"""
Database connection utilities.
"""

import time
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skillz.config.database import async_session_factory, engine
from skillz.config.logging import get_logger

logger = get_logger(__name__)


async def get_database_health(
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> Dict[str, Any]:
    """Check database health with a round trip on a fresh session."""
    factory = session_factory or async_session_factory
    try:
        start_time = time.time()

        async with factory() as session:
            result = await session.execute(text("SELECT 1"))
            result.fetchone()

        response_time = (time.time() - start_time) * 1000

        return {
            "status": "healthy",
            "response_time_ms": round(response_time, 2),
            "dialect": factory.kw["bind"].dialect.name
            if factory.kw.get("bind") is not None
            else "unknown",
        }

    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        return {"status": "unhealthy", "error": str(e)}


async def close_database_connections() -> None:
    """Dispose the process-wide engine pool."""
    await engine.dispose()
    logger.info("Database connections closed")
