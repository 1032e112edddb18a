"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error responses, timestamps
- health: Health endpoint payloads
- diagnostics: Environment and database diagnostic payloads
- auth: Authenticated user and token payloads

Usage:
======
    from lastwords.shared.schemas.auth import AuthenticatedUser
    from lastwords.shared.schemas.common import ErrorResponse
"""

from lastwords.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    iso_timestamp,
)
from lastwords.shared.schemas.health import (
    HealthResponse,
    ServiceHealthResponse,
    MemoryUsage,
    HealthReport,
    UnhealthyResponse,
    ReadinessResponse,
    LivenessResponse,
)
from lastwords.shared.schemas.diagnostics import (
    DebugEnvResponse,
    EnvPresenceResponse,
    DbDiagnosticSuccess,
    DiagnosticFailure,
    AuthDiagnosticResponse,
    OAuthConfig,
    OAuthDiagnosticResponse,
)
from lastwords.shared.schemas.auth import (
    AuthenticatedUser,
    TokenResponse,
    WebAuthnCheckResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "iso_timestamp",
    # Health
    "HealthResponse",
    "ServiceHealthResponse",
    "MemoryUsage",
    "HealthReport",
    "UnhealthyResponse",
    "ReadinessResponse",
    "LivenessResponse",
    # Diagnostics
    "DebugEnvResponse",
    "EnvPresenceResponse",
    "DbDiagnosticSuccess",
    "DiagnosticFailure",
    "AuthDiagnosticResponse",
    "OAuthConfig",
    "OAuthDiagnosticResponse",
    # Auth
    "AuthenticatedUser",
    "TokenResponse",
    "WebAuthnCheckResponse",
]
