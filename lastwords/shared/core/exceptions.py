"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    LastWordsException (base)
       │
       ├── AuthenticationError (401)      ← Missing or invalid bearer token
       ├── AuthorizationError (403)       ← Access denied
       │      └── WebAuthnRequiredError   ← Route needs a WebAuthn-verified session
       ├── ValidationError (400)          ← Invalid input data (e.g. argon2 parameters)
       └── ServiceUnavailableError (503)  ← Dependency down
              └── DatabaseUnavailableError

Usage:
======
    from lastwords.shared.core.exceptions import AuthenticationError

    raise AuthenticationError("Access token is required")
    # Results in: {"error": {"code": "AUTHENTICATION_ERROR", "message": "Access token is required"}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "WEBAUTHN_REQUIRED",
            "message": "WebAuthn verification required",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class LastWordsException(Exception):
    """
    Base exception for all Last Words application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(LastWordsException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - The Authorization header is missing or not a Bearer token
    - The token is expired, malformed or signed with another key
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(LastWordsException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but lacks permission.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "AUTHORIZATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code=error_code,
            details=details,
        )


class WebAuthnRequiredError(AuthorizationError):
    """Route is marked requires_webauthn and the session has no WebAuthn verification."""

    def __init__(
        self,
        message: str = "WebAuthn verification required",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            details=details,
            error_code="WEBAUTHN_REQUIRED",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(LastWordsException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(LastWordsException):
    """
    Service temporarily unavailable error (503).

    Raised when a backing service (database, etc.) is down.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class DatabaseUnavailableError(ServiceUnavailableError):
    """Database could not be reached or failed a probe query."""

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = {**(details or {}), "service": "database"}
        super().__init__(message=message or "Database unavailable", details=extra_details)
