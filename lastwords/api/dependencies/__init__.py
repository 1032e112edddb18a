"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_read_session(), ReadSession
- Authentication: guards, route markers, get_current_user(), CurrentUser
- Services: get_environment_service(), get_diagnostics_service()

Usage:
======
    from lastwords.api.dependencies import CurrentUser, public

    @router.get("/me")
    async def me(user: CurrentUser):
        return user
"""

from lastwords.api.dependencies.database import (
    get_read_session,
    ReadSession,
)
from lastwords.api.dependencies.auth import (
    IS_PUBLIC_KEY,
    REQUIRES_WEBAUTHN_KEY,
    set_metadata,
    get_metadata,
    public,
    requires_webauthn,
    authenticate,
    enforce_webauthn,
    get_current_user,
    CurrentUser,
)
from lastwords.api.dependencies.services import (
    get_environment_service,
    get_diagnostics_service,
)

__all__ = [
    # Database
    "get_read_session",
    "ReadSession",
    # Authentication
    "IS_PUBLIC_KEY",
    "REQUIRES_WEBAUTHN_KEY",
    "set_metadata",
    "get_metadata",
    "public",
    "requires_webauthn",
    "authenticate",
    "enforce_webauthn",
    "get_current_user",
    "CurrentUser",
    # Services
    "get_environment_service",
    "get_diagnostics_service",
]
