"""
Prometheus metrics for the skills and resume services.
"""

import time
from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


SKILL_GRANTS = Counter(
    "skill_grants_total",
    "Skill grants processed by the unlock engine",
    ["outcome"],
    registry=registry,
)

SKILL_LEVEL_SETS = Counter(
    "skill_level_sets_total",
    "Direct level/XP assignments outside of a job grant",
    ["outcome"],
    registry=registry,
)

RESUME_SKILL_OPERATIONS = Counter(
    "resume_skill_operations_total",
    "Resume-skill association operations",
    ["operation", "status"],
    registry=registry,
)

MERGE_OUTCOMES = Counter(
    "resume_merge_outcomes_total",
    "Per-item outcomes of resume comparison copy and drop operations",
    ["item_type", "status"],
    registry=registry,
)

API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)

ERRORS_TOTAL = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)


def record_skill_grant(outcome: str):
    """Record one grant: ``created``, ``updated`` or ``skipped``."""
    SKILL_GRANTS.labels(outcome=outcome).inc()


def record_skill_level_set(outcome: str):
    SKILL_LEVEL_SETS.labels(outcome=outcome).inc()


def record_resume_skill_operation(operation: str, status: str):
    """Record an add/remove of a resume-skill association."""
    RESUME_SKILL_OPERATIONS.labels(operation=operation, status=status).inc()


def record_merge_outcome(item_type: str, status: str):
    """Record the outcome of copying one item between resumes."""
    MERGE_OUTCOMES.labels(item_type=item_type, status=status).inc()


def record_api_request(
    method: str, endpoint: str, status_code: int, start_time: Optional[float] = None
):
    """Record an API request and, when given a start time, its duration."""
    API_REQUESTS.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()
    if start_time is not None:
        API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(
            time.time() - start_time
        )


def record_error(error_type: str, component: str):
    """Record error metric."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
