"""
Auth Schemas

The authenticated-user shape carried by access tokens, and token responses.
"""

from typing import Any, Optional

from pydantic import Field

from lastwords.shared.schemas.common import BaseSchema


class AuthenticatedUser(BaseSchema):
    """
    User resolved from a verified access token.

    Serialized with camelCase aliases (emailHmac, webAuthnVerified) to match
    the claim names inside the token.
    """

    id: str
    email: str
    email_hmac: str = Field(alias="emailHmac")
    webauthn_verified: Optional[bool] = Field(default=None, alias="webAuthnVerified")
    iat: Optional[int] = None
    exp: Optional[int] = None

    @classmethod
    def from_claims(cls, claims: dict[str, Any], email_hmac: str) -> "AuthenticatedUser":
        """
        Build from decoded JWT claims.

        The user id is read from "id", falling back to the standard "sub"
        claim. `email_hmac` is used when the token carries no emailHmac claim.
        """
        return cls(
            id=str(claims.get("id") or claims["sub"]),
            email=claims["email"],
            email_hmac=claims.get("emailHmac") or email_hmac,
            webauthn_verified=claims.get("webAuthnVerified"),
            iat=claims.get("iat"),
            exp=claims.get("exp"),
        )


class TokenResponse(BaseSchema):
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Lifetime in seconds")


class WebAuthnCheckResponse(BaseSchema):
    verified: bool = True
