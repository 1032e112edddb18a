"""
Authentication Handler

Endpoints that expose the authenticated user resolved by the guard chain.

Routes (prefix /api/auth):
==========================
    GET /me               → Current user
    GET /token            → Short-lived access token for the current user
    GET /webauthn/check   → Succeeds only for WebAuthn-verified sessions

None of these routes are public; the app-wide authenticate() guard has
already verified the Bearer token before a handler runs.
"""

from datetime import timedelta

from fastapi import APIRouter

from lastwords.api.dependencies.auth import CurrentUser, requires_webauthn
from lastwords.config.settings import settings
from lastwords.shared.core.logging import get_logger
from lastwords.shared.schemas.auth import (
    AuthenticatedUser,
    TokenResponse,
    WebAuthnCheckResponse,
)
from lastwords.shared.schemas.common import ErrorResponse
from lastwords.shared.utils.security import SecurityUtils


router = APIRouter(
    responses={401: {"model": ErrorResponse, "description": "Missing or invalid access token"}},
)

auth_logger = get_logger("lastwords.auth")


@router.get("/me", response_model=AuthenticatedUser)
async def get_me(current_user: CurrentUser):
    """Return the user described by the access token."""
    return current_user


@router.get("/token", response_model=TokenResponse)
async def issue_token(current_user: CurrentUser):
    """
    Issue a fresh access token for the current user.

    The token carries sub, email and emailHmac; WebAuthn verification is
    not carried over.
    """
    expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    token = SecurityUtils.create_access_token(
        data={
            "sub": current_user.id,
            "email": current_user.email,
            "emailHmac": current_user.email_hmac,
        },
        secret_key=settings.jwt_secret,
        expires_delta=timedelta(seconds=expires_in),
        algorithm=settings.JWT_ALGORITHM,
    )
    auth_logger.info("Access token issued", user_id=current_user.id, expires_in=expires_in)
    return TokenResponse(token=token, expires_in=expires_in)


@router.get(
    "/webauthn/check",
    response_model=WebAuthnCheckResponse,
    responses={403: {"model": ErrorResponse, "description": "WebAuthn verification required"}},
)
@requires_webauthn()
async def webauthn_check(current_user: CurrentUser):
    """Reachable only when enforce_webauthn() let the request through."""
    return WebAuthnCheckResponse(verified=True)
