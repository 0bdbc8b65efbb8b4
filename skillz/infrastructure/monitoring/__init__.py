"""
Monitoring package.
"""

from .health_checks import HealthChecker, get_application_health, health_checker
from .metrics import get_metrics, get_metrics_content_type

__all__ = [
    "HealthChecker",
    "health_checker",
    "get_application_health",
    "get_metrics",
    "get_metrics_content_type",
]
