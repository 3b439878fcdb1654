"""
UserPlace Service

Tracks which places a user has explored or plans to visit. Entries are
append-only: adding the same place twice, or with both statuses, keeps
every row.
"""

from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.core.context import RequestContext
from exploring_india.shared.core.exceptions import PlaceNotFoundError, ValidationError
from exploring_india.shared.core.logging import get_logger
from exploring_india.shared.models.enums import UserPlaceStatus
from exploring_india.shared.models.place import Place
from exploring_india.shared.models.user_place import UserPlace
from exploring_india.shared.repositories.place_repository import PlaceRepository
from exploring_india.shared.repositories.user_place_repository import UserPlaceRepository
from exploring_india.shared.schemas.user_place import UserPlaceCreate
from exploring_india.shared.schemas.validation import validate_payload

logger = get_logger(__name__)


class UserPlaceService:
    """Service for a user's explored/upcoming places."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserPlaceRepository(session)
        self.place_repo = PlaceRepository(session)

    async def add_user_place(
        self,
        ctx: RequestContext,
        place_id: str,
        status: str | UserPlaceStatus,
    ) -> UserPlace:
        """
        Record a place for the caller.

        Args:
            ctx: Authenticated caller
            place_id: Place to record
            status: "explored" or "upcoming"

        Raises:
            ValidationError: If status is not a known value
            PlaceNotFoundError: If the place does not exist
        """
        result = validate_payload(UserPlaceCreate, {"place_id": place_id, "status": status})
        if not result.ok:
            raise ValidationError(result.message, details={"errors": result.errors})
        entry = result.value

        if not await self.place_repo.exists(entry.place_id):
            raise PlaceNotFoundError(entry.place_id)

        user_place = await self.repo.create_user_place(
            user_id=ctx.user_id,
            place_id=entry.place_id,
            status=entry.status,
        )

        logger.info(
            "User place added",
            user_place_id=user_place.id,
            user_id=ctx.user_id,
            place_id=entry.place_id,
            status=entry.status.value,
        )
        return user_place

    async def list_user_places(self, ctx: RequestContext) -> List[Tuple[UserPlace, Place]]:
        """Caller's entries with their places, newest first."""
        return await self.repo.get_user_places(ctx.user_id)
