"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request:
- EnvironmentService reads os.environ on every call
- DiagnosticsService holds the request's probe session

Tests swap either through app.dependency_overrides.

Usage:
======
    from lastwords.api.dependencies.services import get_environment_service

    @router.get("/api/debug-env")
    async def debug_env(
        env: EnvironmentService = Depends(get_environment_service),
    ):
        return env.debug_snapshot()
"""

from lastwords.api.dependencies.database import ReadSession
from lastwords.shared.services.diagnostics_service import DiagnosticsService
from lastwords.shared.services.environment_service import EnvironmentService


async def get_environment_service() -> EnvironmentService:
    """
    Dependency to get an EnvironmentService over the live process environment.
    """
    return EnvironmentService()


async def get_diagnostics_service(db: ReadSession) -> DiagnosticsService:
    """
    Dependency to get DiagnosticsService bound to a probe-only session.
    """
    return DiagnosticsService(db)
