"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Place with id 'abc-123' not found",
            "details": {}
        }
    }

Exception Handling:
===================
1. ExploringIndiaException subclasses → Their status_code and to_dict()
2. RequestValidationError / Pydantic ValidationError → 400 VALIDATION_ERROR
3. HTTPException (raised by handlers) → Its status code, same envelope
4. Other exceptions → 500 with generic message (details only in logs)

Usage:
======
    from exploring_india.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from exploring_india.shared.core.exceptions import ExploringIndiaException
from exploring_india.shared.core.logging import logger
from exploring_india.shared.schemas.validation import format_validation_errors


_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "AUTHENTICATION_ERROR",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            }
        },
        headers=headers,
    )


def _validation_response(request: Request, raw_errors: list[Any]) -> JSONResponse:
    errors = format_validation_errors(raw_errors)
    logger.warning(
        "Validation error",
        errors=errors,
        path=request.url.path,
    )
    message = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
    return _error_response(
        400,
        "VALIDATION_ERROR",
        message or "Request validation failed",
        {"errors": errors},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ExploringIndiaException)
    async def app_exception_handler(
        request: Request,
        exc: ExploringIndiaException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from ExploringIndiaException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Request body, path or query did not match the declared schema."""
        return _validation_response(request, list(exc.errors()))

    @app.exception_handler(PydanticValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: PydanticValidationError,
    ) -> JSONResponse:
        return _validation_response(request, exc.errors(include_url=False, include_context=False))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap HTTPException raised by handlers (or routing) in the error envelope."""
        logger.warning(
            "HTTP error",
            status_code=exc.status_code,
            message=str(exc.detail),
            path=request.url.path,
        )
        return _error_response(
            exc.status_code,
            _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")
