"""
Health Check Handler

Provides health check endpoints for monitoring, load balancers and DAST scans.

Routes:
=======
    GET /api/health          → Legacy static payload (DAST target)
    GET /health              → Backend status with uptime and memory
    GET /api/health/report   → Authentication configuration audit
    GET /ready               → Database probe
    GET /live                → Liveness

All routes are public.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lastwords.api.dependencies.auth import public
from lastwords.api.dependencies.services import (
    get_diagnostics_service,
    get_environment_service,
)
from lastwords.config.settings import settings
from lastwords.shared.core.exceptions import DatabaseUnavailableError
from lastwords.shared.core.logging import logger
from lastwords.shared.schemas.common import ErrorResponse, iso_timestamp
from lastwords.shared.schemas.health import (
    HealthReport,
    HealthResponse,
    LivenessResponse,
    ReadinessResponse,
    ServiceHealthResponse,
    UnhealthyResponse,
)
from lastwords.shared.services.diagnostics_service import (
    DiagnosticsService,
    memory_usage,
    uptime_seconds,
)
from lastwords.shared.services.environment_service import EnvironmentService


router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
@public()
async def legacy_health_check(
    env: EnvironmentService = Depends(get_environment_service),
):
    """
    Static health payload for DAST scanning.

    Always 200; version comes from npm_package_version when set.
    """
    return HealthResponse(
        status="healthy",
        timestamp=iso_timestamp(),
        service=settings.SERVICE_NAME,
        version=env.package_version(settings.APP_VERSION),
    )


@router.get("/health", response_model=ServiceHealthResponse)
@public()
async def health_check(
    env: EnvironmentService = Depends(get_environment_service),
):
    """
    Backend health check.

    Returns:
        ServiceHealthResponse with process uptime and memory
    """
    return ServiceHealthResponse(
        status="healthy",
        timestamp=iso_timestamp(),
        service=settings.API_SERVICE_NAME,
        version=env.package_version(settings.APP_VERSION),
        uptime=uptime_seconds(),
        memory=memory_usage(),
        environment=env.get("NODE_ENV") or "development",
    )


@router.get(
    "/api/health/report",
    response_model=HealthReport,
    responses={500: {"model": UnhealthyResponse}},
)
@public()
async def configuration_report(
    env: EnvironmentService = Depends(get_environment_service),
):
    """
    Audit the sign-in configuration.

    status is "needs_configuration" when any issue is found. A failure while
    building the report is answered with 500 and status "unhealthy".
    """
    try:
        return env.configuration_report()
    except Exception as e:
        logger.error("Health report failed", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=UnhealthyResponse(
                timestamp=iso_timestamp(),
                error=str(e) or "Unknown error",
            ).model_dump(),
        )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ErrorResponse, "description": "Database unavailable"}},
)
@public()
async def readiness_check(
    diagnostics: DiagnosticsService = Depends(get_diagnostics_service),
):
    """
    Readiness check for Kubernetes/load balancers.

    Raises:
        DatabaseUnavailableError: The probe query failed (503)
    """
    try:
        await diagnostics.probe_database()
    except Exception as e:
        raise DatabaseUnavailableError(details={"error_type": type(e).__name__}) from e
    return ReadinessResponse()


@router.get("/live", response_model=LivenessResponse)
@public()
async def liveness_check():
    """Liveness check for Kubernetes."""
    return LivenessResponse()
