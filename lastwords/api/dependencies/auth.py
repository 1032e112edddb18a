"""
Authentication Dependencies

Route metadata markers, the app-wide guards, and current-user injection.

Route Metadata:
===============
    @public()              → IS_PUBLIC_KEY        ("isPublic")
    @requires_webauthn()   → REQUIRES_WEBAUTHN_KEY ("requiresWebAuthn")

Markers are stored on the endpoint function and read back by the guards
from request.scope["endpoint"].

Guard Chain (app-wide dependencies, in order):
==============================================
    authenticate()       ← Public endpoints pass; otherwise verify Bearer JWT
           │               and store AuthenticatedUser on request.state.user
           ▼
    enforce_webauthn()   ← Endpoints marked requires_webauthn need
                           user.webauthn_verified is True

Type Aliases:
=============
    CurrentUser - AuthenticatedUser placed on the request by authenticate()

Usage:
======
    from lastwords.api.dependencies.auth import CurrentUser, public, requires_webauthn

    @router.get("/health")
    @public()
    async def health(): ...

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user

    @router.post("/secrets/release")
    @requires_webauthn()
    async def release(current_user: CurrentUser): ...
"""

from typing import Annotated, Any, Callable, Optional, TypeVar

from fastapi import Depends, Request

from lastwords.config.settings import settings
from lastwords.shared.core.exceptions import AuthenticationError, WebAuthnRequiredError
from lastwords.shared.core.logging import get_logger
from lastwords.shared.schemas.auth import AuthenticatedUser
from lastwords.shared.utils.security import SecurityUtils


auth_logger = get_logger("lastwords.auth")

F = TypeVar("F", bound=Callable[..., Any])

IS_PUBLIC_KEY = "isPublic"
REQUIRES_WEBAUTHN_KEY = "requiresWebAuthn"

# Attribute holding the metadata dict on endpoint functions
METADATA_ATTR = "__route_metadata__"


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE METADATA
# ═══════════════════════════════════════════════════════════════════════════════


def set_metadata(key: str, value: Any) -> Callable[[F], F]:
    """
    Decorator factory attaching `key=value` to an endpoint function.

    The function itself is returned unchanged, so the decorator can sit above
    or below the router decorator.
    """

    def decorator(func: F) -> F:
        metadata = dict(getattr(func, METADATA_ATTR, {}))
        metadata[key] = value
        setattr(func, METADATA_ATTR, metadata)
        return func

    return decorator


def get_metadata(endpoint: Optional[Callable[..., Any]], key: str, default: Any = None) -> Any:
    """Read a metadata value from an endpoint function (default when unmarked)."""
    if endpoint is None:
        return default
    return getattr(endpoint, METADATA_ATTR, {}).get(key, default)


def public() -> Callable[[F], F]:
    """Mark an endpoint as reachable without an access token."""
    return set_metadata(IS_PUBLIC_KEY, True)


def requires_webauthn() -> Callable[[F], F]:
    """Mark an endpoint as requiring a WebAuthn-verified session."""
    return set_metadata(REQUIRES_WEBAUTHN_KEY, True)


# ═══════════════════════════════════════════════════════════════════════════════
# GUARDS
# ═══════════════════════════════════════════════════════════════════════════════


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of a "Bearer <token>" header, None for anything else."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]


def user_from_token(token: str) -> AuthenticatedUser:
    """
    Verify an access token and build the user it describes.

    Tokens without an emailHmac claim get one derived from the email with
    the server HMAC key.

    Raises:
        AuthenticationError: Token invalid, expired, or missing id/email claims
    """
    try:
        claims = SecurityUtils.decode_access_token(
            token,
            settings.jwt_secret,
            algorithm=settings.JWT_ALGORITHM,
        )
        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise ValueError("Token carries no email claim")
        email_hmac = claims.get("emailHmac")
        if not email_hmac:
            email_hmac, _ = SecurityUtils.generate_email_hmac(
                email,
                settings.email_hmac_key,
            )
        return AuthenticatedUser.from_claims(claims, email_hmac=email_hmac)
    except (ValueError, KeyError, TypeError) as e:
        auth_logger.info("Access token rejected", reason=str(e))
        raise AuthenticationError("Invalid access token") from e


async def authenticate(request: Request) -> None:
    """
    App-wide guard: require a valid Bearer token unless the endpoint is public.

    Raises:
        AuthenticationError: Missing or invalid token
    """
    if get_metadata(request.scope.get("endpoint"), IS_PUBLIC_KEY):
        return

    token = extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise AuthenticationError("Access token is required")

    request.state.user = user_from_token(token)


async def enforce_webauthn(request: Request) -> None:
    """
    App-wide guard: endpoints marked requires_webauthn need a verified session.

    Raises:
        WebAuthnRequiredError: The user has no webAuthnVerified claim set to true
    """
    if not settings.ENFORCE_WEBAUTHN:
        return
    if not get_metadata(request.scope.get("endpoint"), REQUIRES_WEBAUTHN_KEY):
        return

    user: Optional[AuthenticatedUser] = getattr(request.state, "user", None)
    if user is None or user.webauthn_verified is not True:
        raise WebAuthnRequiredError()


# ═══════════════════════════════════════════════════════════════════════════════
# CURRENT USER
# ═══════════════════════════════════════════════════════════════════════════════


async def get_current_user(request: Request) -> AuthenticatedUser:
    """
    Return the user stored by authenticate().

    Raises:
        AuthenticationError: No user on the request (e.g. used on a public route)
    """
    user: Optional[AuthenticatedUser] = getattr(request.state, "user", None)
    if user is None:
        raise AuthenticationError("Access token is required")
    return user


# Authenticated user (most common dependency)
CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
