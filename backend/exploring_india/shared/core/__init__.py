"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions
- Request context (authenticated caller)

Usage:
======
    from exploring_india.shared.core.logging import logger, get_logger
    from exploring_india.shared.core.exceptions import PlaceNotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from exploring_india.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from exploring_india.shared.core.exceptions import (
    ExploringIndiaException,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    PlaceNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
)
from exploring_india.shared.core.context import RequestContext

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "ExploringIndiaException",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "PlaceNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    # Context
    "RequestContext",
]
