"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get()               → Find user by id (inherited)
- get_by_username()   → Find user by username
- username_exists()   → Check if username is already registered
- create_user()       → Insert a user with an already-hashed password

Usage Example:
==============
    async def authenticate_user(db: AsyncSession, username: str, password: str):
        repo = UserRepository(db)
        user = await repo.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid credentials")
        # Verify password...
        return user
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.core.exceptions import DuplicateResourceError
from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by username
    - Checking username availability
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_username(self, username: str) -> Optional[User]:
        """
        Get user by username (exact match).

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE username = 'alice'
        """
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """
        Check if username already exists.

        Used as the registration pre-check; the unique constraint on
        users.username still has the final word under concurrency.
        """
        user = await self.get_by_username(username)
        return user is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_user(self, username: str, password_hash: str) -> User:
        """
        Insert a new user.

        Args:
            username: Unique username
            password_hash: Password already hashed by the caller

        Returns:
            The created User

        Raises:
            DuplicateResourceError: If the unique constraint rejects the
                username (a concurrent registration won the race)
        """
        try:
            return await self.create(username=username, password_hash=password_hash)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateResourceError("Username already taken") from e
