# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets up the test environment before the application is imported and
# provides fixtures for the API client, access tokens, and dependency
# overrides for the environment and database diagnostics.
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# lastwords.config.settings loads settings (and the engine is created) at import

os.environ["NODE_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["EMAIL_HMAC_KEY"] = "test-email-hmac-key"
os.environ["ENABLE_DEBUG_ROUTES"] = "true"
os.environ["ENFORCE_WEBAUTHN"] = "true"

from datetime import timedelta
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from lastwords.api.dependencies.services import (
    get_diagnostics_service,
    get_environment_service,
)
from lastwords.api.main import app
from lastwords.config.settings import settings
from lastwords.shared.services.environment_service import EnvironmentService
from lastwords.shared.utils.security import SecurityUtils


# =============================================================================
# Stubs
# =============================================================================

class StubDiagnostics:
    """Stands in for DiagnosticsService; returns rows or raises `error`."""

    def __init__(self, rows: Optional[list] = None, error: Optional[BaseException] = None):
        self.rows = rows if rows is not None else [{"ok": 1}]
        self.error = error
        self.calls = 0

    async def probe_database(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rows


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """API client; dependency overrides are cleared after each test."""
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_env():
    """Serve a fixed environment mapping to every EnvironmentService consumer."""

    def _use(values: dict[str, str]) -> EnvironmentService:
        service = EnvironmentService(values)
        app.dependency_overrides[get_environment_service] = lambda: service
        return service

    yield _use
    app.dependency_overrides.pop(get_environment_service, None)


@pytest.fixture
def use_diagnostics():
    """Replace the database probe with a StubDiagnostics."""

    def _use(rows: Optional[list] = None, error: Optional[BaseException] = None) -> StubDiagnostics:
        stub = StubDiagnostics(rows=rows, error=error)
        app.dependency_overrides[get_diagnostics_service] = lambda: stub
        return stub

    yield _use
    app.dependency_overrides.pop(get_diagnostics_service, None)


@pytest.fixture
def make_token():
    """Sign an access token with the test secret."""

    def _make(
        claims: Optional[dict[str, Any]] = None,
        secret: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        data = {"sub": "user_abc123", "email": "alice@example.com"}
        if claims is not None:
            data = claims
        return SecurityUtils.create_access_token(
            data=data,
            secret_key=secret or settings.jwt_secret,
            expires_delta=expires_delta,
        )

    return _make


@pytest.fixture
def auth_headers(make_token):
    """Authorization header for a default, non-WebAuthn user."""
    return {"Authorization": f"Bearer {make_token()}"}
