"""
Health check implementations for the application.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional

from skillz.config.logging import get_logger
from skillz.config.settings import settings
from skillz.infrastructure.database.connection import get_database_health

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    critical_services = ("database",)

    def __init__(
        self, checks: Optional[Dict[str, Callable[[], Awaitable[Dict[str, Any]]]]] = None
    ):
        self.checks = checks or {"database": get_database_health}

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks, each bounded by the configured timeout."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await asyncio.wait_for(
                    check_func(), timeout=settings.HEALTH_CHECK_TIMEOUT
                )
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def get_overall_health(self) -> Dict[str, Any]:
        """Get overall application health status."""
        results = await self.run_health_checks()
        critical_healthy = all(
            results.get(service, {}).get("status") == "healthy"
            for service in self.critical_services
        )

        return {
            "status": "healthy" if critical_healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": results,
            "critical_services_healthy": critical_healthy,
        }


health_checker = HealthChecker()


async def get_application_health() -> Dict[str, Any]:
    """Get application health status."""
    return await health_checker.get_overall_health()
