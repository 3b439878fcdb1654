"""
Review-related Pydantic schemas.
"""

from pydantic import BaseModel, Field

from exploring_india.shared.schemas.common import BaseSchema, UtcDateTime
from exploring_india.shared.schemas.place import PlaceResponse


class ReviewCreate(BaseModel):
    """
    Request to review a place.

    The author is never part of the payload; it comes from the session.
    """

    place_id: str = Field(min_length=1, description="Place being reviewed")
    # strict: rejects true, "5" and 4.0
    rating: int = Field(ge=1, le=5, strict=True, description="Star rating, 1-5")
    comment: str = Field(min_length=10, description="Review text (minimum 10 characters)")


class ReviewResponse(BaseSchema):
    """Response for a review."""

    id: str
    user_id: str
    place_id: str
    rating: int
    comment: str
    created_at: UtcDateTime


class ReviewWithPlaceResponse(ReviewResponse):
    """A review with the reviewed place embedded."""

    place: PlaceResponse
