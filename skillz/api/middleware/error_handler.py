"""
Error handling middleware.

Domain exceptions are raised freely by use cases and translated here into
``{"error", "message", "type"}`` JSON bodies.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DisconnectionError, OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillz.config.logging import get_logger
from skillz.domain.exceptions import (
    ComparisonError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from skillz.infrastructure.monitoring.metrics import record_error

logger = get_logger(__name__)


def _error_response(status_code: int, error: str, message, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "type": error_type},
    )


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.info("Resource not found", error=str(exc), path=request.url.path)
        return _error_response(404, "Not Found", str(exc), "not_found")

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        logger.info("Conflict", error=str(exc), path=request.url.path)
        return _error_response(409, "Conflict", str(exc), "conflict")

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return _error_response(400, "Validation Error", str(exc), "validation_error")

    @app.exception_handler(ComparisonError)
    async def comparison_error_handler(request: Request, exc: ComparisonError):
        logger.warning("Comparison error", error=str(exc), path=request.url.path)
        return _error_response(400, "Comparison Error", str(exc), "comparison_error")

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        logger.warning(
            "Request validation error", errors=len(errors), path=request.url.path
        )
        message = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in errors
        )
        return _error_response(400, "Validation Error", message, "validation_error")

    @app.exception_handler(OperationalError)
    @app.exception_handler(DisconnectionError)
    async def database_unavailable_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database unavailable", error=str(exc), path=request.url.path)
        record_error(type(exc).__name__, "database")
        return _error_response(
            503,
            "Service Unavailable",
            "The database is temporarily unavailable",
            "unavailable",
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error", error=str(exc), path=request.url.path)
        record_error(type(exc).__name__, "database")
        return _error_response(
            500, "Database Error", "A database error occurred", "database_error"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "HTTP Error", "message": exc.detail, "type": "http_error"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        record_error(type(exc).__name__, "api")
        return _error_response(
            500,
            "Internal Server Error",
            "An unexpected error occurred",
            "internal_error",
        )
