"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ExploringIndiaException (base, 500)
       │
       ├── AuthenticationError (401)    ← No valid session, bad credentials
       ├── NotFoundError (404)          ← Resource not found
       │      ├── UserNotFoundError
       │      └── PlaceNotFoundError
       ├── ValidationError (400)        ← Invalid input data
       └── ConflictError (409)          ← Resource already exists
              └── DuplicateResourceError

Usage:
======
    from exploring_india.shared.core.exceptions import PlaceNotFoundError

    raise PlaceNotFoundError(place_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Place with id 'abc' not found"}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Place with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class ExploringIndiaException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ExploringIndiaException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No session cookie, or its signature/expiry is invalid
    - The session was logged out or has expired
    - Login credentials do not match
    """

    def __init__(
        self,
        message: str = "Unauthorized",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(ExploringIndiaException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Place", place_id)
        # Message: "Place with id 'abc-123' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class PlaceNotFoundError(NotFoundError):
    """Place not found error."""

    def __init__(self, place_id: str) -> None:
        super().__init__(resource="Place", resource_id=place_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(ExploringIndiaException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(ExploringIndiaException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Username already taken")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Conflict raised when creating a resource that already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
