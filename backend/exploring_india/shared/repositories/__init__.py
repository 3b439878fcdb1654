"""
Repository Pattern Implementations

Repositories encapsulate database queries and are the only code that talks
to the Entity Store.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]             ← get / count / exists / create
         │
         ├── UserRepository               ← Lookup by username, create user
         ├── PlaceRepository              ← List places, seed insert
         ├── ReviewRepository             ← Reviews by place / by user (+place)
         ├── UserPlaceRepository          ← Explored/upcoming list (+place)
         ├── ContactMessageRepository     ← Contact form sink
         └── UserSessionRepository        ← Server-side login sessions

Usage Example:
==============
    from exploring_india.shared.repositories import PlaceRepository, ReviewRepository

    async def place_page(db: AsyncSession, place_id: str):
        place = await PlaceRepository(db).get(place_id)
        reviews = await ReviewRepository(db).get_by_place_id(place_id)
        return place, reviews
"""

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.repositories.user_repository import UserRepository
from exploring_india.shared.repositories.place_repository import PlaceRepository
from exploring_india.shared.repositories.review_repository import ReviewRepository
from exploring_india.shared.repositories.user_place_repository import UserPlaceRepository
from exploring_india.shared.repositories.contact_message_repository import (
    ContactMessageRepository,
)
from exploring_india.shared.repositories.user_session_repository import UserSessionRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "PlaceRepository",
    "ReviewRepository",
    "UserPlaceRepository",
    "ContactMessageRepository",
    "UserSessionRepository",
]
