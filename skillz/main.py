"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from skillz.api.app import create_app
from skillz.config.logging import configure_logging, get_logger
from skillz.config.settings import settings
from skillz.infrastructure.database.connection import close_database_connections

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Skillz career service",
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )
    try:
        yield
    finally:
        logger.info("Shutting down Skillz career service")
        await close_database_connections()


def create_main_app() -> FastAPI:
    """Create the main FastAPI application."""
    app = create_app()
    app.router.lifespan_context = lifespan
    return app


app = create_main_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skillz.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.AUTO_RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )
