"""
Contact form schemas.
"""

from pydantic import BaseModel, EmailStr, Field

from exploring_india.shared.schemas.common import BaseSchema, UtcDateTime


class ContactMessageCreate(BaseModel):
    """Contact form submission."""

    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=10, description="Message (minimum 10 characters)")


class ContactMessageResponse(BaseSchema):
    """Stored contact message, echoed back to the sender."""

    id: str
    name: str
    email: str
    message: str
    created_at: UtcDateTime
