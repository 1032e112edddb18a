"""
Health Schemas

Response models for the health endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Legacy /api/health payload used for DAST scanning."""

    status: str = "healthy"
    timestamp: str = Field(description="ISO-8601 UTC timestamp")
    service: str
    version: str


class MemoryUsage(BaseModel):
    """Process memory in bytes."""

    rss: int
    vms: int


class ServiceHealthResponse(HealthResponse):
    """Backend /health payload with process details."""

    uptime: float = Field(description="Seconds since process start")
    memory: MemoryUsage
    environment: str


class HealthReport(BaseModel):
    """
    Configuration audit returned by /api/health/report.

    status is "healthy" when issues is empty, "needs_configuration" otherwise.
    """

    status: str
    timestamp: str
    environment: Optional[str] = None
    version: str
    env: dict[str, Optional[str]]
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class UnhealthyResponse(BaseModel):
    status: str = "unhealthy"
    timestamp: str
    error: str


class ReadinessResponse(BaseModel):
    status: str = "ready"
    database: str = "ok"


class LivenessResponse(BaseModel):
    status: str = "alive"
