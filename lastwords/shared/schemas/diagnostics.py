"""
Diagnostic Schemas

Response models for /api/debug-env and /api/diag/*.

The environment-echo payloads keep the exact key names the frontend tooling
expects (upper-case variable names, camelCase flags), exposed through
aliases where they are not valid snake_case.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from lastwords.shared.schemas.common import BaseSchema


# Flag values used by /api/debug-env
SET = "SET"
NOT_SET = "NOT SET"


class DebugEnvResponse(BaseModel):
    """
    Snapshot of authentication-related environment variables.

    Secrets are reported as SET / NOT SET only; NODE_ENV and NEXTAUTH_URL
    are echoed as-is (null when absent).
    """

    NODE_ENV: Optional[str] = None
    NEXTAUTH_URL: Optional[str] = None
    NEXTAUTH_SECRET: str
    GOOGLE_CLIENT_ID: str
    GOOGLE_CLIENT_SECRET: str
    GOOGLE_CLIENT_ID_PREVIEW: str


class EnvPresenceResponse(BaseSchema):
    """Presence map for /api/diag/env."""

    present: dict[str, bool]
    runtime: str
    node_env: Optional[str] = Field(default=None, alias="nodeEnv")


class DbDiagnosticSuccess(BaseModel):
    ok: bool = True
    result: list[dict[str, Any]]


class DiagnosticFailure(BaseModel):
    ok: bool = False
    error: str


class AuthDiagnosticResponse(BaseSchema):
    """Summary of the configured sign-in providers."""

    ok: bool = True
    providers: list[str]
    count: int
    has_adapter: bool = Field(default=False, alias="hasAdapter")
    secret_set: bool = Field(alias="secretSet")


class OAuthConfig(BaseModel):
    client_id: str
    client_secret: str
    redirect_uri: Optional[str] = None
    auth_url: Optional[str] = None


class OAuthDiagnosticResponse(BaseModel):
    status: str = "testing_oauth"
    timestamp: str
    environment: Optional[str] = None
    oauth_config: OAuthConfig
    recommendations: list[str] = Field(default_factory=list)
