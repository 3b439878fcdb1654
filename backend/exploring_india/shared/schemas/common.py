"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- UtcDateTime: datetime that always carries a UTC offset
- Generic Responses: MessageResponse, ErrorResponse, HealthResponse

Usage:
======
    from exploring_india.shared.schemas.common import BaseSchema, MessageResponse

    class PlaceResponse(BaseSchema):
        id: str
        name: str

    PlaceResponse.model_validate(place_orm_object)
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values (SQLite drops the offset) and convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Place with id 'abc-123' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "exploring-india"
    version: str = "1.0.0"
    timestamp: UtcDateTime = Field(default_factory=lambda: datetime.now(timezone.utc))
