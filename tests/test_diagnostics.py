# =============================================================================
# tests/test_diagnostics.py - Diagnostic Endpoint Tests
# =============================================================================
# Contract tests for /api/debug-env and /api/diag/*:
# - SET exactly when the variable is a non-empty string at request time
# - /api/diag/db reports {ok: false, error} with 500 for any raised error
#
# Run with: pytest tests/test_diagnostics.py -v
# =============================================================================

from urllib.parse import parse_qs, urlparse

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from lastwords.api.dependencies.database import get_read_session
from lastwords.api.main import app, create_application
from lastwords.config.settings import settings


AUTH_VARIABLES = ("NEXTAUTH_SECRET", "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET")


# =============================================================================
# /api/debug-env
# =============================================================================

class TestDebugEnv:
    """Tests for the environment debug endpoint."""

    def test_all_variables_set(self, client, use_env):
        use_env({
            "NODE_ENV": "production",
            "NEXTAUTH_URL": "https://lastwords.example.com",
            "NEXTAUTH_SECRET": "s3cret",
            "GOOGLE_CLIENT_ID": "1234567890-abcdef.apps.googleusercontent.com",
            "GOOGLE_CLIENT_SECRET": "google-secret",
        })

        response = client.get("/api/debug-env")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "NODE_ENV": "production",
            "NEXTAUTH_URL": "https://lastwords.example.com",
            "NEXTAUTH_SECRET": "SET",
            "GOOGLE_CLIENT_ID": "SET",
            "GOOGLE_CLIENT_SECRET": "SET",
            "GOOGLE_CLIENT_ID_PREVIEW": "1234567890...",
        }

    def test_nothing_set(self, client, use_env):
        use_env({})

        data = client.get("/api/debug-env").json()

        assert data["NODE_ENV"] is None
        assert data["NEXTAUTH_URL"] is None
        for name in AUTH_VARIABLES:
            assert data[name] == "NOT SET"
        assert data["GOOGLE_CLIENT_ID_PREVIEW"] == "NOT SET"

    @pytest.mark.parametrize("name", AUTH_VARIABLES)
    def test_empty_string_is_not_set(self, client, use_env, name):
        use_env({name: ""})

        assert client.get("/api/debug-env").json()[name] == "NOT SET"

    def test_short_client_id_preview(self, client, use_env):
        use_env({"GOOGLE_CLIENT_ID": "abc"})

        assert client.get("/api/debug-env").json()["GOOGLE_CLIENT_ID_PREVIEW"] == "abc..."

    def test_reads_process_environment_per_request(self, client, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "live-value")
        assert client.get("/api/debug-env").json()["GOOGLE_CLIENT_SECRET"] == "SET"

        monkeypatch.delenv("GOOGLE_CLIENT_SECRET")
        assert client.get("/api/debug-env").json()["GOOGLE_CLIENT_SECRET"] == "NOT SET"

        monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "")
        assert client.get("/api/debug-env").json()["GOOGLE_CLIENT_SECRET"] == "NOT SET"


# =============================================================================
# /api/diag/env
# =============================================================================

class TestEnvPresence:
    """Tests for the presence map."""

    def test_presence_map(self, client, use_env):
        use_env({
            "DATABASE_URL": "postgresql://db",
            "WEBAUTHN_RP_ID": "lastwords.example.com",
            "AUTH_TRUST_HOST": "",
            "NODE_ENV": "production",
        })

        data = client.get("/api/diag/env").json()

        assert data["present"] == {
            "NEXTAUTH_URL": False,
            "NEXTAUTH_SECRET": False,
            "GOOGLE_CLIENT_ID": False,
            "GOOGLE_CLIENT_SECRET": False,
            "DATABASE_URL": True,
            "WEBAUTHN_ORIGIN": False,
            "WEBAUTHN_RP_ID": True,
            "AUTH_TRUST_HOST": False,
        }
        assert data["runtime"] == "python"
        assert data["nodeEnv"] == "production"

    def test_runtime_override(self, client, use_env):
        use_env({"NEXT_RUNTIME": "edge"})

        assert client.get("/api/diag/env").json()["runtime"] == "edge"


# =============================================================================
# /api/diag/db
# =============================================================================

class TestDatabaseDiagnostic:
    """Tests for the SELECT 1 probe."""

    def test_success(self, client, use_diagnostics):
        use_diagnostics(rows=[{"ok": 1}])

        response = client.get("/api/diag/db")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ok": True, "result": [{"ok": 1}]}

    @pytest.mark.parametrize(
        "error, message",
        [
            (ConnectionRefusedError("connection refused"), "connection refused"),
            (TimeoutError("query timed out"), "query timed out"),
            (RuntimeError("relation does not exist"), "relation does not exist"),
            (ValueError(), "ValueError"),
            (KeyError("ok"), "'ok'"),
        ],
    )
    def test_any_error_is_reported(self, client, use_diagnostics, error, message):
        stub = use_diagnostics(error=error)

        response = client.get("/api/diag/db")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"ok": False, "error": message}
        assert stub.calls == 1


class TestDatabaseDiagnosticWiring:
    """The route runs the real probe through a read session."""

    def test_in_memory_database_answers(self, client):
        response = client.get("/api/diag/db")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ok": True, "result": [{"ok": 1}]}

    def test_unreachable_database_is_reported(self, client, tmp_path):
        missing = tmp_path / "missing-dir" / "db.sqlite"

        async def unreachable_session():
            engine = create_async_engine(f"sqlite+aiosqlite:///{missing}")
            try:
                async with AsyncSession(engine) as session:
                    yield session
            finally:
                await engine.dispose()

        app.dependency_overrides[get_read_session] = unreachable_session

        response = client.get("/api/diag/db")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        data = response.json()
        assert data["ok"] is False
        assert "unable to open database file" in data["error"]


# =============================================================================
# /api/diag/auth and /api/diag/oauth
# =============================================================================

class TestAuthDiagnostics:
    """Tests for the sign-in configuration summaries."""

    def test_email_provider_only(self, client, use_env):
        use_env({})

        assert client.get("/api/diag/auth").json() == {
            "ok": True,
            "providers": ["Email"],
            "count": 1,
            "hasAdapter": False,
            "secretSet": False,
        }

    def test_google_enabled_with_both_credentials(self, client, use_env):
        use_env({
            "GOOGLE_CLIENT_ID": "client",
            "GOOGLE_CLIENT_SECRET": "secret",
            "NEXTAUTH_SECRET": "s3cret",
        })

        data = client.get("/api/diag/auth").json()

        assert data["providers"] == ["Email", "Google"]
        assert data["count"] == 2
        assert data["secretSet"] is True

    def test_oauth_configuration(self, client, use_env):
        use_env({
            "NODE_ENV": "production",
            "NEXTAUTH_URL": "https://lastwords.example.com",
            "GOOGLE_CLIENT_ID": "client-id",
            "GOOGLE_CLIENT_SECRET": "secret",
        })

        data = client.get("/api/diag/oauth").json()

        assert data["status"] == "testing_oauth"
        assert data["environment"] == "production"
        assert data["recommendations"] == []
        config = data["oauth_config"]
        assert config["client_id"] == "SET"
        assert config["client_secret"] == "SET"
        assert config["redirect_uri"] == "https://lastwords.example.com/api/auth/callback/google"
        query = parse_qs(urlparse(config["auth_url"]).query)
        assert query["client_id"] == ["client-id"]
        assert query["redirect_uri"] == [config["redirect_uri"]]
        assert query["scope"] == ["openid email profile"]

    def test_oauth_recommendations(self, client, use_env):
        use_env({"NEXTAUTH_URL": "http://localhost:3000"})

        data = client.get("/api/diag/oauth").json()

        assert data["oauth_config"]["client_id"] == "NOT_SET"
        assert data["recommendations"] == [
            "Google OAuth credentials are not set",
            "NEXTAUTH_URL should be your production domain, not localhost",
        ]

    def test_oauth_without_nextauth_url(self, client, use_env):
        use_env({})

        data = client.get("/api/diag/oauth").json()

        assert data["oauth_config"]["redirect_uri"] is None
        assert data["oauth_config"]["auth_url"] is None
        assert "NEXTAUTH_URL is not set" in data["recommendations"]


# =============================================================================
# Mounting
# =============================================================================

class TestDebugRoutesToggle:
    """Diagnostics are only mounted when ENABLE_DEBUG_ROUTES is true."""

    def test_disabled_routes_are_absent(self, monkeypatch):
        monkeypatch.setattr(settings, "ENABLE_DEBUG_ROUTES", False)
        client = TestClient(create_application())

        assert client.get("/api/debug-env").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/diag/db").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/health").status_code == status.HTTP_200_OK
