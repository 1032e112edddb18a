"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2026-01-15 10:30:00 [info     ] Database diagnostic succeeded  path=/api/diag/db

Production (JSON):
    {"timestamp": "2026-01-15T10:30:00Z", "level": "info", "service": "last-words-api", "event": "Database diagnostic succeeded"}

Features:
=========
- Structured key-value logging
- Context variables (request_id, method and path bound per request)
- Every event tagged with the service name
- Colored console output in development or with DEBUG
- JSON output everywhere else

Usage:
======
    from lastwords.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Token issued", user_id=user.id)

    # Get named logger
    auth_logger = get_logger("auth")
    auth_logger.debug("Bearer token verified", user_id=user.id)

    # Add context to all subsequent logs
    log_context(request_id=request_id)
    logger.info("Processing request")  # Includes request_id
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from lastwords.config.settings import settings


def add_service_name(
    _logger: Any, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the backend service name unless a caller set one."""
    event_dict.setdefault("service", settings.API_SERVICE_NAME)
    return event_dict


def use_console_renderer() -> bool:
    """Coloured console output in development or when DEBUG is on."""
    return settings.DEBUG or settings.is_development


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - Development or DEBUG: Colored console output for readability
    - Other environments: JSON output for log aggregation

    Uvicorn's own access log is raised to WARNING; RequestContextMiddleware
    writes one access line per request carrying the request id.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_service_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_console_renderer():
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context is stored in context variables and automatically included
    in all log messages until cleared or the request ends.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Called by the request context middleware once a response is produced.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("lastwords")
