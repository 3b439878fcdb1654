"""
UserPlace Repository

Database operations for a user's explored/upcoming places.
"""

from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.enums import UserPlaceStatus
from exploring_india.shared.models.place import Place
from exploring_india.shared.models.user_place import UserPlace


class UserPlaceRepository(BaseRepository[UserPlace]):
    """Repository for UserPlace entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserPlace, session)

    async def get_user_places(self, user_id: str) -> List[Tuple[UserPlace, Place]]:
        """
        Get a user's entries with their place attached, newest first.

        Inner join: entries pointing at a missing place are excluded.
        """
        result = await self.session.execute(
            select(UserPlace, Place)
            .join(Place, UserPlace.place_id == Place.id)
            .where(UserPlace.user_id == user_id)
            .order_by(UserPlace.created_at.desc())
        )
        return [(user_place, place) for user_place, place in result.all()]

    async def create_user_place(
        self,
        user_id: str,
        place_id: str,
        status: UserPlaceStatus,
    ) -> UserPlace:
        """Insert an entry. No deduplication: repeated calls add new rows."""
        return await self.create(
            user_id=user_id,
            place_id=place_id,
            status=status,
        )
