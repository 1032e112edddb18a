"""
API Handlers

Route handlers for the Last Words API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Modules:
========
- health_handler: health, readiness, liveness and configuration report
- diagnostics_handler: environment and database diagnostics
- auth_handler: current user, token issuance, WebAuthn check
"""

from lastwords.api.handlers import (
    auth_handler,
    diagnostics_handler,
    health_handler,
)

__all__ = [
    "auth_handler",
    "diagnostics_handler",
    "health_handler",
]
