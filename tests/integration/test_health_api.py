"""
API tests for health and metrics endpoints.
"""

import pytest

from skillz.infrastructure.monitoring.health_checks import HealthChecker


class TestHealthEndpoints:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"

    def test_ready(self, client):
        response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["services"]["database"]["status"] == "healthy"

    def test_live(self, client):
        assert client.get("/api/health/live").json()["status"] == "alive"

    def test_health_does_not_require_identity(self, client):
        response = client.get("/api/health/live", headers={"X-User-ID": ""})
        assert response.status_code == 200

    def test_metrics(self, client, skill_ids):
        client.get("/api/skills/categories")

        response = client.get("/api/health/metrics")

        assert response.status_code == 200
        assert "api_requests_total" in response.text

    def test_request_id_echoed(self, client):
        response = client.get("/api/health/live", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"
        assert "X-Process-Time" in response.headers


class TestHealthChecker:
    @pytest.mark.asyncio
    async def test_unhealthy_critical_service(self):
        async def failing_check():
            raise ConnectionError("refused")

        checker = HealthChecker({"database": failing_check})

        health = await checker.get_overall_health()

        assert health["status"] == "unhealthy"
        assert health["critical_services_healthy"] is False
        assert health["services"]["database"]["error"] == "refused"
