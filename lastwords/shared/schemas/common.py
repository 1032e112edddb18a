"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- ErrorResponse: Body of every application error, documented on guarded routes
- iso_timestamp(): ISO-8601 UTC timestamps with millisecond precision

Usage:
======
    from lastwords.shared.schemas.common import BaseSchema, ErrorResponse, iso_timestamp

    class TokenResponse(BaseSchema):
        token: str
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC string, e.g. 2026-10-19T14:33:00.123Z.

    Args:
        moment: Timezone-aware datetime (default: now)
    """
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - from_attributes: Allow creating from arbitrary objects
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors (except the diagnostic routes) return this format.
    Routers list it under `responses=` so the OpenAPI document shows it.

    Example:
        {
            "error": {
                "code": "AUTHENTICATION_ERROR",
                "message": "Access token is required",
                "details": {}
            }
        }
    """

    error: ErrorDetail
