"""
Place Handler

Public, read-only endpoints for curated destinations.
"""

from typing import List

from fastapi import APIRouter, Depends

from exploring_india.shared.schemas.place import PlaceResponse
from exploring_india.shared.services.place_service import PlaceService
from exploring_india.api.dependencies.services import get_place_service


router = APIRouter()


@router.get("", response_model=List[PlaceResponse])
async def list_places(
    place_service: PlaceService = Depends(get_place_service),
):
    """List every place."""
    places = await place_service.list_places()
    return [PlaceResponse.model_validate(place) for place in places]


@router.get("/{place_id}", response_model=PlaceResponse)
async def get_place(
    place_id: str,
    place_service: PlaceService = Depends(get_place_service),
):
    """
    Get one place.

    Raises:
        404: If the place does not exist
    """
    place = await place_service.get_place(place_id)
    return PlaceResponse.model_validate(place)
