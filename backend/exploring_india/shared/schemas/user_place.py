"""
UserPlace-related Pydantic schemas.
"""

from pydantic import BaseModel, Field

from exploring_india.shared.models.enums import UserPlaceStatus
from exploring_india.shared.schemas.common import BaseSchema, UtcDateTime
from exploring_india.shared.schemas.place import PlaceResponse


class UserPlaceCreate(BaseModel):
    """Request to mark a place as explored or upcoming."""

    place_id: str = Field(min_length=1)
    status: UserPlaceStatus = Field(description="'explored' or 'upcoming'")


class UserPlaceResponse(BaseSchema):
    """Response for a user place entry."""

    id: str
    user_id: str
    place_id: str
    status: UserPlaceStatus
    created_at: UtcDateTime


class UserPlaceWithPlaceResponse(UserPlaceResponse):
    """A user place entry with its place embedded."""

    place: PlaceResponse
