"""
Review Repository

Database operations for reviews.

Common Operations:
==================
- get_by_place_id()   → Reviews of one place, newest first
- get_by_user_id()    → A user's reviews joined with their place, newest first
- create_review()     → Insert a review

The user listing is an INNER JOIN against places: a review whose place no
longer exists is left out instead of being returned without a place.
"""

from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.place import Place
from exploring_india.shared.models.review import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ReviewRepository.

        Args:
            session: Async database session
        """
        super().__init__(Review, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_place_id(self, place_id: str) -> List[Review]:
        """
        Get all reviews for a place.

        Args:
            place_id: Place id

        Returns:
            Reviews ordered by created_at descending
        """
        result = await self.session.execute(
            select(Review).where(Review.place_id == place_id).order_by(Review.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_user_id(self, user_id: str) -> List[Tuple[Review, Place]]:
        """
        Get a user's reviews, each paired with the reviewed place.

        Args:
            user_id: Author's id

        Returns:
            (Review, Place) pairs ordered by review created_at descending

        SQL Generated:
            SELECT reviews.*, places.* FROM reviews
            JOIN places ON reviews.place_id = places.id
            WHERE reviews.user_id = '...'
            ORDER BY reviews.created_at DESC
        """
        result = await self.session.execute(
            select(Review, Place)
            .join(Place, Review.place_id == Place.id)
            .where(Review.user_id == user_id)
            .order_by(Review.created_at.desc())
        )
        return [(review, place) for review, place in result.all()]

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_review(
        self,
        user_id: str,
        place_id: str,
        rating: int,
        comment: str,
    ) -> Review:
        """Insert a review. Callers validate input and the place first."""
        return await self.create(
            user_id=user_id,
            place_id=place_id,
            rating=rating,
            comment=comment,
        )
