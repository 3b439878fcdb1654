"""
UserPlace Handler

The logged-in user's explored / upcoming places.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from exploring_india.shared.schemas.place import PlaceResponse
from exploring_india.shared.schemas.user_place import (
    UserPlaceCreate,
    UserPlaceResponse,
    UserPlaceWithPlaceResponse,
)
from exploring_india.shared.services.user_place_service import UserPlaceService
from exploring_india.api.dependencies.auth import CurrentUser
from exploring_india.api.dependencies.services import get_user_place_service


router = APIRouter()


@router.get("", response_model=List[UserPlaceWithPlaceResponse])
async def list_user_places(
    ctx: CurrentUser,
    user_place_service: UserPlaceService = Depends(get_user_place_service),
):
    """Entries newest first, each with its place."""
    rows = await user_place_service.list_user_places(ctx)
    return [
        UserPlaceWithPlaceResponse(
            **UserPlaceResponse.model_validate(user_place).model_dump(),
            place=PlaceResponse.model_validate(place),
        )
        for user_place, place in rows
    ]


@router.post(
    "",
    response_model=UserPlaceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_user_place(
    entry: UserPlaceCreate,
    ctx: CurrentUser,
    user_place_service: UserPlaceService = Depends(get_user_place_service),
):
    """
    Mark a place as explored or upcoming.

    Raises:
        401: No valid session
        400: Unknown status
        404: Place does not exist
    """
    user_place = await user_place_service.add_user_place(
        ctx,
        place_id=entry.place_id,
        status=entry.status,
    )
    return UserPlaceResponse.model_validate(user_place)
