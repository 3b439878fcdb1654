"""
UserSession Repository

Storage for server-side login sessions.

Common Operations:
==================
- create_session()   → Persist a new session for a user
- get_active()       → Load a session only if it has not expired
- delete_session()   → Remove a session (logout)
- purge_expired()    → Remove every expired session

Expiry comparisons run in SQL against a UTC "now" supplied by the caller,
so the same code works for timestamptz on PostgreSQL and naive UTC text on
SQLite. Bulk deletes skip session synchronization: evaluating the criteria in
Python would compare aware "now" against naive rows loaded from SQLite.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.user_session import UserSession


class UserSessionRepository(BaseRepository[UserSession]):
    """Repository for UserSession database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(UserSession, session)

    async def create_session(
        self,
        session_id: str,
        user_id: str,
        expires_at: datetime,
    ) -> UserSession:
        return await self.create(id=session_id, user_id=user_id, expires_at=expires_at)

    async def get_active(self, session_id: str, now: datetime) -> Optional[UserSession]:
        """
        Get a session by id if it is still valid at `now`.

        Returns:
            UserSession, or None when missing or expired
        """
        result = await self.session.execute(
            select(UserSession).where(
                UserSession.id == session_id,
                UserSession.expires_at > now,
            )
        )
        return result.scalar_one_or_none()

    async def delete_session(self, session_id: str) -> bool:
        """
        Delete a session.

        Returns:
            True if a row was removed
        """
        result = await self.session.execute(
            delete(UserSession)
            .where(UserSession.id == session_id)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0

    async def purge_expired(self, now: datetime) -> int:
        """Delete every session that expired before `now`; returns the count."""
        result = await self.session.execute(
            delete(UserSession)
            .where(UserSession.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0
