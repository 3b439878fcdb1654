"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request with the request's db session. They only
hold that session, so there is no shared state between requests.

Usage:
======
    from exploring_india.api.dependencies.services import get_review_service

    @router.post("/reviews")
    async def create_review(
        data: ReviewCreate,
        review_service: ReviewService = Depends(get_review_service),
    ):
        ...
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.db import get_db
from exploring_india.shared.services.auth_service import AuthService
from exploring_india.shared.services.contact_service import ContactService
from exploring_india.shared.services.place_service import PlaceService
from exploring_india.shared.services.review_service import ReviewService
from exploring_india.shared.services.user_place_service import UserPlaceService


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_place_service(db: AsyncSession = Depends(get_db)) -> PlaceService:
    return PlaceService(db)


async def get_review_service(db: AsyncSession = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


async def get_user_place_service(db: AsyncSession = Depends(get_db)) -> UserPlaceService:
    return UserPlaceService(db)


async def get_contact_service(db: AsyncSession = Depends(get_db)) -> ContactService:
    return ContactService(db)
