"""
User Schemas

Request/response models for registration, login and the current user.
"""

from pydantic import BaseModel, Field, field_validator

from exploring_india.shared.schemas.common import BaseSchema
from exploring_india.shared.utils.security import BCRYPT_MAX_PASSWORD_BYTES


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(min_length=1, description="Unique username")
    password: str = Field(min_length=1, description="Plain text password (hashed on save)")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    """Schema for user login. Empty values count as missing."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(BaseSchema):
    """Public view of a user: never includes the password hash."""

    id: str
    username: str
