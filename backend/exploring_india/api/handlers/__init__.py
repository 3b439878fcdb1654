"""
API Handlers

Route handlers for the Exploring India API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

All business logic is delegated to the service layer.
"""

from exploring_india.api.handlers import (
    auth_handler,
    contact_handler,
    health_handler,
    place_handler,
    review_handler,
    user_place_handler,
)

__all__ = [
    "auth_handler",
    "contact_handler",
    "health_handler",
    "place_handler",
    "review_handler",
    "user_place_handler",
]
