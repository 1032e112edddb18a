# =============================================================================
# tests/test_health.py - Health Endpoint Tests
# =============================================================================
# Contract tests for /api/health, /health, /api/health/report, /ready, /live.
# All of them must answer without an access token.
#
# Run with: pytest tests/test_health.py -v
# =============================================================================

from datetime import datetime, timezone

import pytest
from fastapi import status

from lastwords.api.dependencies.services import get_environment_service
from lastwords.api.main import app
from lastwords.shared.services.environment_service import EnvironmentService


COMPLETE_ENV = {
    "NODE_ENV": "production",
    "NEXTAUTH_URL": "https://lastwords.example.com",
    "NEXTAUTH_SECRET": "s3cret",
    "GOOGLE_CLIENT_ID": "1234567890-abcdef.apps.googleusercontent.com",
    "GOOGLE_CLIENT_SECRET": "google-secret",
}


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    return parsed


# =============================================================================
# Legacy /api/health
# =============================================================================

class TestLegacyHealth:
    """Tests for the DAST health endpoint."""

    def test_returns_healthy_payload(self, client, use_env):
        use_env({})

        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "last-words-web"
        assert data["version"] == "1.0.0"
        assert set(data) == {"status", "timestamp", "service", "version"}

    def test_timestamp_is_current_iso8601(self, client, use_env):
        use_env({})
        before = datetime.now(timezone.utc)

        data = client.get("/api/health").json()

        stamp = parse_timestamp(data["timestamp"])
        assert data["timestamp"].endswith("Z")
        assert abs((stamp - before).total_seconds()) < 5

    def test_version_from_package_version(self, client, use_env):
        use_env({"npm_package_version": "2.4.1"})

        assert client.get("/api/health").json()["version"] == "2.4.1"

    def test_empty_package_version_falls_back(self, client, use_env):
        use_env({"npm_package_version": ""})

        assert client.get("/api/health").json()["version"] == "1.0.0"

    def test_no_token_needed(self, client, use_env):
        use_env({})

        response = client.get("/api/health", headers={"Authorization": "Bearer garbage"})

        assert response.status_code == status.HTTP_200_OK


# =============================================================================
# Backend /health
# =============================================================================

class TestServiceHealth:
    """Tests for the backend health endpoint."""

    def test_reports_process_details(self, client, use_env):
        use_env({"NODE_ENV": "staging"})

        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "last-words-api"
        assert data["environment"] == "staging"
        assert data["uptime"] >= 0
        assert data["memory"]["rss"] > 0
        assert data["memory"]["vms"] > 0
        parse_timestamp(data["timestamp"])

    def test_environment_defaults_to_development(self, client, use_env):
        use_env({})

        assert client.get("/health").json()["environment"] == "development"


# =============================================================================
# Configuration report
# =============================================================================

class TestConfigurationReport:
    """Tests for /api/health/report."""

    def test_complete_configuration_is_healthy(self, client, use_env):
        use_env(dict(COMPLETE_ENV, npm_package_version="3.0.0"))

        data = client.get("/api/health/report").json()

        assert data["status"] == "healthy"
        assert data["issues"] == []
        assert data["recommendations"] == []
        assert data["version"] == "3.0.0"
        assert data["environment"] == "production"
        assert data["env"] == {
            "NEXTAUTH_URL": "https://lastwords.example.com",
            "NEXTAUTH_SECRET": "SET",
            "GOOGLE_CLIENT_ID": "SET",
            "GOOGLE_CLIENT_SECRET": "SET",
            "NODE_ENV": "production",
        }

    def test_empty_environment_needs_configuration(self, client, use_env):
        use_env({})

        response = client.get("/api/health/report")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "needs_configuration"
        assert data["version"] == "unknown"
        assert len(data["issues"]) == 3
        assert len(data["recommendations"]) == 3
        assert data["env"]["NEXTAUTH_URL"] == "NOT_SET (falling back to localhost:3000)"
        assert data["env"]["NEXTAUTH_SECRET"] == "NOT_SET"

    def test_localhost_url_is_an_issue(self, client, use_env):
        use_env(dict(COMPLETE_ENV, NEXTAUTH_URL="http://localhost:3000"))

        data = client.get("/api/health/report").json()

        assert data["status"] == "needs_configuration"
        assert data["issues"] == ["NEXTAUTH_URL is not set or is using localhost"]

    def test_one_google_credential_is_not_enough(self, client, use_env):
        use_env(dict(COMPLETE_ENV, GOOGLE_CLIENT_SECRET=""))

        data = client.get("/api/health/report").json()

        assert data["issues"] == ["Google OAuth credentials are not configured"]

    def test_failure_reports_unhealthy(self, client):
        class BrokenEnvironment(EnvironmentService):
            def configuration_report(self):
                raise RuntimeError("environment unreadable")

        app.dependency_overrides[get_environment_service] = lambda: BrokenEnvironment({})

        response = client.get("/api/health/report")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["error"] == "environment unreadable"
        parse_timestamp(data["timestamp"])


# =============================================================================
# Readiness / liveness
# =============================================================================

class TestProbes:
    """Tests for /ready and /live."""

    def test_ready_when_database_answers(self, client, use_diagnostics):
        stub = use_diagnostics()

        response = client.get("/ready")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ready", "database": "ok"}
        assert stub.calls == 1

    @pytest.mark.parametrize(
        "error",
        [ConnectionRefusedError("connection refused"), TimeoutError(), RuntimeError("boom")],
    )
    def test_not_ready_when_probe_fails(self, client, use_diagnostics, error):
        use_diagnostics(error=error)

        response = client.get("/ready")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        body = response.json()["error"]
        assert body["code"] == "SERVICE_UNAVAILABLE"
        assert body["details"]["service"] == "database"
        assert body["details"]["error_type"] == type(error).__name__

    def test_ready_against_in_memory_database(self, client):
        response = client.get("/ready")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ready", "database": "ok"}

    def test_live(self, client):
        response = client.get("/live")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "alive"}
