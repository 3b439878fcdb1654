"""
Review Handler

Creating reviews (session required) and listing them by author or by place.

ARCHITECTURE:
=============
    Handler → ReviewService → ReviewRepository / PlaceRepository → Model

The author is always the session user; the body carries only place_id,
rating and comment.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from exploring_india.shared.models.place import Place
from exploring_india.shared.models.review import Review
from exploring_india.shared.schemas.place import PlaceResponse
from exploring_india.shared.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    ReviewWithPlaceResponse,
)
from exploring_india.shared.services.review_service import ReviewService
from exploring_india.api.dependencies.auth import CurrentUser
from exploring_india.api.dependencies.services import get_review_service


router = APIRouter()


def _build_review_with_place(review: Review, place: Place) -> ReviewWithPlaceResponse:
    """Helper to build ReviewWithPlaceResponse from a joined row."""
    return ReviewWithPlaceResponse(
        **ReviewResponse.model_validate(review).model_dump(),
        place=PlaceResponse.model_validate(place),
    )


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    review_data: ReviewCreate,
    ctx: CurrentUser,
    review_service: ReviewService = Depends(get_review_service),
):
    """
    Review a place as the logged-in user.

    Raises:
        401: No valid session
        400: Rating outside 1-5 or comment shorter than 10 characters
        404: Place does not exist
    """
    review = await review_service.create_review(
        ctx,
        place_id=review_data.place_id,
        rating=review_data.rating,
        comment=review_data.comment,
    )
    return ReviewResponse.model_validate(review)


@router.get("/user", response_model=List[ReviewWithPlaceResponse])
async def list_my_reviews(
    ctx: CurrentUser,
    review_service: ReviewService = Depends(get_review_service),
):
    """The logged-in user's reviews, newest first, each with its place."""
    rows = await review_service.list_user_reviews(ctx)
    return [_build_review_with_place(review, place) for review, place in rows]


@router.get("/place/{place_id}", response_model=List[ReviewResponse])
async def list_place_reviews(
    place_id: str,
    review_service: ReviewService = Depends(get_review_service),
):
    """Reviews of a place, newest first. Unknown places give an empty list."""
    reviews = await review_service.list_place_reviews(place_id)
    return [ReviewResponse.model_validate(review) for review in reviews]
