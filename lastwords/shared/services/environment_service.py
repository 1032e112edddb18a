"""
Environment Service

Reads the process environment at call time and turns it into the
diagnostic payloads served by /api/debug-env, /api/diag/* and
/api/health/report.

A variable counts as set exactly when it is present AND non-empty.

Usage:
======
    from lastwords.shared.services.environment_service import EnvironmentService

    service = EnvironmentService()              # reads os.environ
    service = EnvironmentService({"NODE_ENV": "test"})  # explicit mapping
    service.debug_snapshot().GOOGLE_CLIENT_ID   # "SET" / "NOT SET"
"""

import os
from typing import Mapping, Optional
from urllib.parse import quote

from lastwords.shared.schemas.common import iso_timestamp
from lastwords.shared.schemas.diagnostics import (
    NOT_SET,
    SET,
    AuthDiagnosticResponse,
    DebugEnvResponse,
    EnvPresenceResponse,
    OAuthConfig,
    OAuthDiagnosticResponse,
)
from lastwords.shared.schemas.health import HealthReport


# Variables whose presence /api/diag/env reports
PRESENCE_KEYS = (
    "NEXTAUTH_URL",
    "NEXTAUTH_SECRET",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "DATABASE_URL",
    "WEBAUTHN_ORIGIN",
    "WEBAUTHN_RP_ID",
    "AUTH_TRUST_HOST",
)

PREVIEW_LENGTH = 10
LOCAL_NEXTAUTH_URL = "http://localhost:3000"
GOOGLE_AUTH_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"


class EnvironmentService:
    """
    Environment inspection for diagnostics.

    Attributes:
        environ: Mapping read on every call (os.environ unless given)
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMITIVES
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, name: str) -> Optional[str]:
        """Raw value, or None when absent."""
        return self.environ.get(name)

    def is_set(self, name: str) -> bool:
        return bool(self.environ.get(name))

    def flag(self, name: str, unset: str = NOT_SET) -> str:
        return SET if self.is_set(name) else unset

    def package_version(self, default: str) -> str:
        """npm_package_version when set, `default` otherwise."""
        return self.environ.get("npm_package_version") or default

    # ═══════════════════════════════════════════════════════════════════════════
    # PAYLOADS
    # ═══════════════════════════════════════════════════════════════════════════

    def debug_snapshot(self) -> DebugEnvResponse:
        """
        Build the /api/debug-env payload.

        The client id preview is its first 10 characters plus "..."; when the
        id is not set the preview is "NOT SET".
        """
        client_id = self.get("GOOGLE_CLIENT_ID")
        preview = f"{client_id[:PREVIEW_LENGTH]}..." if client_id else NOT_SET

        return DebugEnvResponse(
            NODE_ENV=self.get("NODE_ENV"),
            NEXTAUTH_URL=self.get("NEXTAUTH_URL"),
            NEXTAUTH_SECRET=self.flag("NEXTAUTH_SECRET"),
            GOOGLE_CLIENT_ID=self.flag("GOOGLE_CLIENT_ID"),
            GOOGLE_CLIENT_SECRET=self.flag("GOOGLE_CLIENT_SECRET"),
            GOOGLE_CLIENT_ID_PREVIEW=preview,
        )

    def presence(self) -> EnvPresenceResponse:
        return EnvPresenceResponse(
            present={key: self.is_set(key) for key in PRESENCE_KEYS},
            runtime=self.get("NEXT_RUNTIME") or "python",
            node_env=self.get("NODE_ENV"),
        )

    def configuration_report(self) -> HealthReport:
        """
        Audit the authentication configuration.

        Returns:
            HealthReport with one issue/recommendation pair per problem and
            status "needs_configuration" when any problem was found
        """
        issues: list[str] = []
        recommendations: list[str] = []

        nextauth_url = self.get("NEXTAUTH_URL")
        if not nextauth_url or nextauth_url == LOCAL_NEXTAUTH_URL:
            issues.append("NEXTAUTH_URL is not set or is using localhost")
            recommendations.append("Set NEXTAUTH_URL to your production domain")

        if not self.is_set("GOOGLE_CLIENT_ID") or not self.is_set("GOOGLE_CLIENT_SECRET"):
            issues.append("Google OAuth credentials are not configured")
            recommendations.append(
                "Set GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET environment variables"
            )

        if not self.is_set("NEXTAUTH_SECRET"):
            issues.append("NEXTAUTH_SECRET is not set")
            recommendations.append("Set NEXTAUTH_SECRET to a secure random string")

        return HealthReport(
            status="needs_configuration" if issues else "healthy",
            timestamp=iso_timestamp(),
            environment=self.get("NODE_ENV"),
            version=self.package_version("unknown"),
            env={
                "NEXTAUTH_URL": nextauth_url or "NOT_SET (falling back to localhost:3000)",
                "NEXTAUTH_SECRET": self.flag("NEXTAUTH_SECRET", unset="NOT_SET"),
                "GOOGLE_CLIENT_ID": self.flag("GOOGLE_CLIENT_ID", unset="NOT_SET"),
                "GOOGLE_CLIENT_SECRET": self.flag("GOOGLE_CLIENT_SECRET", unset="NOT_SET"),
                "NODE_ENV": self.get("NODE_ENV"),
            },
            issues=issues,
            recommendations=recommendations,
        )

    def sign_in_providers(self) -> list[str]:
        """Email credentials are always offered; Google only with both credentials."""
        providers = ["Email"]
        if self.is_set("GOOGLE_CLIENT_ID") and self.is_set("GOOGLE_CLIENT_SECRET"):
            providers.append("Google")
        return providers

    def auth_summary(self) -> AuthDiagnosticResponse:
        providers = self.sign_in_providers()
        return AuthDiagnosticResponse(
            providers=providers,
            count=len(providers),
            has_adapter=False,
            secret_set=self.is_set("NEXTAUTH_SECRET") or self.is_set("JWT_SECRET"),
        )

    def oauth_diagnostic(self) -> OAuthDiagnosticResponse:
        """Describe the Google OAuth redirect configuration."""
        nextauth_url = self.get("NEXTAUTH_URL")
        redirect_uri = None
        auth_url = None
        if nextauth_url:
            redirect_uri = f"{nextauth_url}/api/auth/callback/google"
            auth_url = (
                f"{GOOGLE_AUTH_ENDPOINT}?client_id={self.get('GOOGLE_CLIENT_ID') or ''}"
                f"&redirect_uri={quote(redirect_uri, safe='')}"
                "&response_type=code&scope=openid%20email%20profile"
            )

        recommendations: list[str] = []
        if not self.is_set("GOOGLE_CLIENT_ID") or not self.is_set("GOOGLE_CLIENT_SECRET"):
            recommendations.append("Google OAuth credentials are not set")
        if not nextauth_url:
            recommendations.append("NEXTAUTH_URL is not set")
        elif "localhost" in nextauth_url:
            recommendations.append(
                "NEXTAUTH_URL should be your production domain, not localhost"
            )

        return OAuthDiagnosticResponse(
            timestamp=iso_timestamp(),
            environment=self.get("NODE_ENV"),
            oauth_config=OAuthConfig(
                client_id=self.flag("GOOGLE_CLIENT_ID", unset="NOT_SET"),
                client_secret=self.flag("GOOGLE_CLIENT_SECRET", unset="NOT_SET"),
                redirect_uri=redirect_uri,
                auth_url=auth_url,
            ),
            recommendations=recommendations,
        )
