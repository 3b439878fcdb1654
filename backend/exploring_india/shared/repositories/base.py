"""
Base Repository

Generic base repository with the read and create operations every entity
repository shares. Entities are never updated or deleted through the
application, so there are no update/delete helpers here.

What This Provides:
===================
- get(id)        → Fetch single record by id
- count()        → Count records with filtering
- exists()       → Check if record exists
- create()       → Create new record

Generic Type Pattern:
=====================
    class PlaceRepository(BaseRepository[Place]):
        pass

    repo = PlaceRepository(db)
    place = await repo.get(place_id)  # Returns Place, not Any

flush() vs commit():
====================
Repository methods only flush(). The request-scoped session from get_db()
commits once the handler has returned, so a request's writes succeed or
fail together.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from exploring_india.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing shared read/create operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Place, Review)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: str) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM places WHERE id = '770e8400-...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filters.

        Args:
            filters: Dict of field=value for WHERE clauses

        Returns:
            Number of matching records

        SQL Generated:
            SELECT COUNT(*) FROM reviews WHERE place_id = '...'
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    async def exists(self, record_id: str) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The id to check

        Returns:
            True if record exists, False otherwise
        """
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance to the session, flushes to send the INSERT and
        refreshes to pick up database-generated values.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
