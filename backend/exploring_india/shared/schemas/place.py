"""
Place-related Pydantic schemas.
"""

from pydantic import BaseModel, Field

from exploring_india.shared.schemas.common import BaseSchema


class PlaceCreate(BaseModel):
    """Seed record for a destination."""

    name: str = Field(min_length=1)
    description: str
    importance: str
    image_url: str
    location: str
    category: str = Field(description="Free-text tag, e.g. 'Historical', 'Beach'")


class PlaceResponse(BaseSchema):
    """Response for a place."""

    id: str
    name: str
    description: str
    importance: str
    image_url: str
    location: str
    category: str
