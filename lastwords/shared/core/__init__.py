"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from lastwords.shared.core.logging import logger, get_logger
    from lastwords.shared.core.exceptions import LastWordsException, AuthenticationError

    logger.info("Starting operation", user_id=user_id)
"""

from lastwords.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from lastwords.shared.core.exceptions import (
    LastWordsException,
    AuthenticationError,
    AuthorizationError,
    WebAuthnRequiredError,
    ValidationError,
    ServiceUnavailableError,
    DatabaseUnavailableError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "LastWordsException",
    "AuthenticationError",
    "AuthorizationError",
    "WebAuthnRequiredError",
    "ValidationError",
    "ServiceUnavailableError",
    "DatabaseUnavailableError",
]
