"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_logging: Per-request log context and access log

Usage:
======
    from exploring_india.api.middleware import setup_exception_handlers, RequestLoggingMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
"""

from exploring_india.api.middleware.error_handler import setup_exception_handlers
from exploring_india.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestLoggingMiddleware",
]
