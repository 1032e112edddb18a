"""
Diagnostics Handler

Environment and database diagnostics for deployment troubleshooting.

Routes:
=======
    GET /api/debug-env    → SET / NOT SET flags for auth variables
    GET /api/diag/env     → Presence map of deployment variables
    GET /api/diag/db      → SELECT 1 probe, raw error message on failure
    GET /api/diag/auth    → Configured sign-in providers
    GET /api/diag/oauth   → Google OAuth redirect configuration

All routes are public and only mounted when ENABLE_DEBUG_ROUTES is true.
Values are read from the process environment on every request.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from lastwords.api.dependencies.auth import public
from lastwords.api.dependencies.services import (
    get_diagnostics_service,
    get_environment_service,
)
from lastwords.shared.core.logging import logger
from lastwords.shared.schemas.diagnostics import (
    AuthDiagnosticResponse,
    DiagnosticFailure,
    DbDiagnosticSuccess,
    DebugEnvResponse,
    EnvPresenceResponse,
    OAuthDiagnosticResponse,
)
from lastwords.shared.services.diagnostics_service import DiagnosticsService
from lastwords.shared.services.environment_service import EnvironmentService


router = APIRouter()


def error_message(exc: BaseException) -> str:
    """The exception's message, or its class name when the message is empty."""
    return str(exc) or type(exc).__name__


@router.get("/api/debug-env", response_model=DebugEnvResponse)
@public()
async def debug_env(
    env: EnvironmentService = Depends(get_environment_service),
):
    return env.debug_snapshot()


@router.get("/api/diag/env", response_model=EnvPresenceResponse)
@public()
async def env_presence(
    env: EnvironmentService = Depends(get_environment_service),
):
    return env.presence()


@router.get(
    "/api/diag/db",
    response_model=DbDiagnosticSuccess,
    responses={500: {"model": DiagnosticFailure}},
)
@public()
async def database_diagnostic(
    diagnostics: DiagnosticsService = Depends(get_diagnostics_service),
):
    """
    Run SELECT 1 AS ok against the configured database.

    Any failure (connection, query, timeout or otherwise) is answered with
    500 and the error message; there is no retry.
    """
    try:
        rows = await diagnostics.probe_database()
    except Exception as e:
        logger.error(
            "Database diagnostic failed",
            error=error_message(e),
            error_type=type(e).__name__,
        )
        return JSONResponse(
            status_code=500,
            content=DiagnosticFailure(error=error_message(e)).model_dump(),
        )

    logger.info("Database diagnostic succeeded")
    return DbDiagnosticSuccess(result=rows)


@router.get(
    "/api/diag/auth",
    response_model=AuthDiagnosticResponse,
    responses={500: {"model": DiagnosticFailure}},
)
@public()
async def auth_diagnostic(
    env: EnvironmentService = Depends(get_environment_service),
):
    """Summarize sign-in providers without running a sign-in flow."""
    try:
        return env.auth_summary()
    except Exception as e:
        logger.error("Auth diagnostic failed", error=error_message(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=DiagnosticFailure(error=error_message(e)).model_dump(),
        )


@router.get("/api/diag/oauth", response_model=OAuthDiagnosticResponse)
@public()
async def oauth_diagnostic(
    env: EnvironmentService = Depends(get_environment_service),
):
    return env.oauth_diagnostic()
