"""
structlog configuration for the Exploring India backend.

Every module logs through `get_logger(__name__)` with key/value pairs:

    logger.info("Review created", review_id=review.id, place_id=place.id)

APP_ENV=development renders coloured console lines; any other environment
writes one JSON object per line. RequestLoggingMiddleware binds
`request_id`, `method` and `path` with `log_context()`, so lines emitted
while a request is handled carry them automatically.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from exploring_india.config.settings import settings

# Chatty third-party loggers held at WARNING unless LOG_LEVEL is DEBUG
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "passlib")


def _renderer() -> list[Processor]:
    if settings.is_development:
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging() -> None:
    """Route stdlib logging to stdout and configure structlog on top of it."""
    level = getattr(logging, settings.LOG_LEVEL.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    if level > logging.DEBUG:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind values onto every log line of the current request (contextvars)."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("exploring_india")
