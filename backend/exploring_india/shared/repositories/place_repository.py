"""
Place Repository

Read access to curated destinations, plus the insert used by seeding.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.place import Place


class PlaceRepository(BaseRepository[Place]):
    """Repository for Place database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Place, session)

    async def get_all_places(self) -> List[Place]:
        """
        Get every place.

        No ORDER BY: results come back in storage order, which is the
        order the seed inserted them.
        """
        result = await self.session.execute(select(Place))
        return list(result.scalars().all())

    async def create_place(
        self,
        *,
        name: str,
        description: str,
        importance: str,
        image_url: str,
        location: str,
        category: str,
    ) -> Place:
        """Insert a place. Only the seeding script calls this."""
        return await self.create(
            name=name,
            description=description,
            importance=importance,
            image_url=image_url,
            location=location,
            category=category,
        )
