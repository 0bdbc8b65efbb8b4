"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.infrastructure.monitoring.health_checks import health_checker
from skillz.infrastructure.monitoring.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    health = await health_checker.get_overall_health()
    return {
        "status": health["status"],
        "version": settings.APP_VERSION,
        "timestamp": health["timestamp"],
    }


@router.get("/ready")
async def readiness_check() -> Dict[str, Any]:
    """Readiness check: the database must answer."""
    health = await health_checker.get_overall_health()
    if not health["critical_services_healthy"]:
        logger.warning("Service not ready", services=health["services"])
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return {"status": "ready", "services": health["services"], "timestamp": _now()}


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check."""
    return {"status": "alive", "timestamp": _now()}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Metrics disabled")

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
