"""
FastAPI application factory.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillz.api.middleware.error_handler import ErrorHandlerMiddleware
from skillz.api.middleware.logging import LoggingMiddleware
from skillz.api.routes import health, job_experiences, resumes, skills
from skillz.api.schemas.common import ErrorResponse
from skillz.config.logging import get_logger
from skillz.config.settings import settings

logger = get_logger(__name__)

# Error bodies shared by every identity-scoped resource route
ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 401, 404, 409, 503)
}


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Skill tree progression and resume-skill association service",
        openapi_url=f"{settings.API_PREFIX}/openapi.json"
        if settings.ENABLE_SWAGGER
        else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.ENABLE_SWAGGER else None,
        redoc_url=None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    app.include_router(health.router, prefix=settings.API_PREFIX)
    # Job routes first: they share the "/skills/user/" prefix with "{skill_id}"
    app.include_router(
        job_experiences.router, prefix=settings.API_PREFIX, responses=ERROR_RESPONSES
    )
    app.include_router(
        skills.router, prefix=settings.API_PREFIX, responses=ERROR_RESPONSES
    )
    app.include_router(
        resumes.router, prefix=settings.API_PREFIX, responses=ERROR_RESPONSES
    )

    return app
