"""
Review Service

Business logic for reviews.

Rules:
======
- rating is an integer from 1 to 5
- comment is at least 10 characters
- the place must exist; it is checked before the insert
- the author always comes from the RequestContext, never from the payload

Usage:
======
    from exploring_india.shared.services.review_service import ReviewService

    service = ReviewService(db)
    review = await service.create_review(ctx, place_id, 5, "Amazing trip overall")
"""

from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.core.context import RequestContext
from exploring_india.shared.core.exceptions import PlaceNotFoundError, ValidationError
from exploring_india.shared.core.logging import get_logger
from exploring_india.shared.models.place import Place
from exploring_india.shared.models.review import Review
from exploring_india.shared.repositories.place_repository import PlaceRepository
from exploring_india.shared.repositories.review_repository import ReviewRepository
from exploring_india.shared.schemas.review import ReviewCreate
from exploring_india.shared.schemas.validation import validate_payload

logger = get_logger(__name__)


class ReviewService:
    """
    Service for review-related business logic.

    Attributes:
        session: Database session
        repo: ReviewRepository instance
        place_repo: PlaceRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize ReviewService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = ReviewRepository(session)
        self.place_repo = PlaceRepository(session)

    async def create_review(
        self,
        ctx: RequestContext,
        place_id: str,
        rating: int,
        comment: str,
    ) -> Review:
        """
        Create a review authored by the caller.

        Args:
            ctx: Authenticated caller
            place_id: Place being reviewed
            rating: 1-5
            comment: Review text, 10+ characters

        Returns:
            The created Review

        Raises:
            ValidationError: If rating or comment break the rules
            PlaceNotFoundError: If the place does not exist
        """
        result = validate_payload(
            ReviewCreate,
            {"place_id": place_id, "rating": rating, "comment": comment},
        )
        if not result.ok:
            raise ValidationError(result.message, details={"errors": result.errors})
        review_in = result.value

        if not await self.place_repo.exists(review_in.place_id):
            raise PlaceNotFoundError(review_in.place_id)

        review = await self.repo.create_review(
            user_id=ctx.user_id,
            place_id=review_in.place_id,
            rating=review_in.rating,
            comment=review_in.comment,
        )

        logger.info(
            "Review created",
            review_id=review.id,
            user_id=ctx.user_id,
            place_id=review.place_id,
            rating=review.rating,
        )
        return review

    async def list_user_reviews(self, ctx: RequestContext) -> List[Tuple[Review, Place]]:
        """Caller's reviews with their places, newest first."""
        return await self.repo.get_by_user_id(ctx.user_id)

    async def list_place_reviews(self, place_id: str) -> List[Review]:
        """
        Reviews of a place, newest first.

        An unknown place id yields an empty list.
        """
        return await self.repo.get_by_place_id(place_id)
