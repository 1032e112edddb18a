"""
Last Words API Application Entry Point

FastAPI application setup with all routers, middleware, guards and
lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           LAST WORDS API                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  CORS → Request context (request_id, access log)            │          │
│   │  Exception handlers                                          │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Guards (app-wide dependencies)                  │          │
│   │  authenticate() → enforce_webauthn()                         │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌──────────┐ ┌─────────────┐ ┌──────────┐                  │          │
│   │  │  Health  │ │ Diagnostics │ │   Auth   │                  │          │
│   │  └──────────┘ └─────────────┘ └──────────┘                  │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connectivity checked (warning only)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Database connections closed

Usage:
======
    # Run with uvicorn
    uvicorn lastwords.api.main:app --host 0.0.0.0 --port 3001 --reload

    # Or programmatically
    from lastwords.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lastwords.api.dependencies.auth import authenticate, enforce_webauthn
from lastwords.api.middleware import RequestContextMiddleware, setup_exception_handlers
from lastwords.api.routes import register_routes
from lastwords.config.settings import settings
from lastwords.shared.core.logging import logger
from lastwords.shared.db import close_db, init_db


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Check database connectivity

    Shutdown:
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Last Words API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.NODE_ENV,
        debug_routes=settings.ENABLE_DEBUG_ROUTES,
    )

    await init_db()

    logger.info("Last Words API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Last Words API")

    await close_db()

    logger.info("Last Words API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings and the guard chain
    2. Adds middleware (CORS, request context)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Diagnostics and authentication surface for Last Words",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        # Guards run in order for every API route
        dependencies=[Depends(authenticate), Depends(enforce_webauthn)],
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestContextMiddleware)

    # CORS is added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
