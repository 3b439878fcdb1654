"""
Place Service

Read access to curated destinations and the idempotent seed used to load them.
"""

from typing import Any, Iterable, List, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.core.exceptions import PlaceNotFoundError, ValidationError
from exploring_india.shared.core.logging import get_logger
from exploring_india.shared.models.place import Place
from exploring_india.shared.repositories.place_repository import PlaceRepository
from exploring_india.shared.schemas.place import PlaceCreate
from exploring_india.shared.schemas.validation import validate_payload

logger = get_logger(__name__)


class PlaceService:
    """Service for place lookups and seeding."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = PlaceRepository(session)

    async def list_places(self) -> List[Place]:
        return await self.repo.get_all_places()

    async def get_place(self, place_id: str) -> Place:
        """
        Get a place by id.

        Raises:
            PlaceNotFoundError: If no place has this id
        """
        place = await self.repo.get(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        return place

    async def seed_places(self, places: Iterable[Mapping[str, Any]]) -> int:
        """
        Insert the given places unless the table already has rows.

        Every record is validated before anything is inserted.

        Args:
            places: Place records (name, description, importance,
                image_url, location, category)

        Returns:
            Number of places inserted (0 when the table was not empty)

        Raises:
            ValidationError: If any record is malformed
        """
        existing = await self.repo.count()
        if existing:
            logger.info("Places already seeded, skipping", existing=existing)
            return 0

        records: List[PlaceCreate] = []
        for index, data in enumerate(places):
            result = validate_payload(PlaceCreate, data)
            if not result.ok:
                raise ValidationError(
                    f"Invalid place record at index {index}: {result.message}",
                    details={"index": index, "errors": result.errors},
                )
            records.append(result.value)

        for record in records:
            await self.repo.create_place(**record.model_dump())

        logger.info("Seeded places", count=len(records))
        return len(records)
