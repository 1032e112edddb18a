"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "AUTHENTICATION_ERROR",
            "message": "Access token is required",
            "details": {}
        }
    }

Exception Handling:
===================
1. LastWordsException subclasses → Use their status_code and to_dict()
2. Pydantic ValidationError → 400 with validation details
3. Other exceptions → 500 with generic message (details hidden)

The database diagnostic route reports its own failures and never reaches
the generic handler.

Usage:
======
    from lastwords.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from lastwords.shared.core.exceptions import LastWordsException
from lastwords.shared.core.logging import logger


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(LastWordsException)
    async def application_exception_handler(
        request: Request,
        exc: LastWordsException,
    ) -> JSONResponse:
        """Application errors carry their own status code and error code."""
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors raised inside handlers or services.
        """
        errors = jsonable_encoder(exc.errors(include_url=False, include_context=False))
        logger.warning(
            "Validation error",
            errors=errors,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": {"errors": errors},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
