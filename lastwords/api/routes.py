"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /api/health, /health, /ready, /live   → Health checks (public)
    /api/debug-env, /api/diag/*           → Diagnostics (public, optional)
    /api/auth                             → Current user, tokens (authenticated)

Usage:
======
    from lastwords.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from lastwords.api.handlers import (
    auth_handler,
    diagnostics_handler,
    health_handler,
)
from lastwords.config.settings import settings


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (paths are absolute)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Diagnostic endpoints
    if settings.ENABLE_DEBUG_ROUTES:
        app.include_router(
            diagnostics_handler.router,
            tags=["Diagnostics"],
        )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/api/auth",
        tags=["Authentication"],
    )
