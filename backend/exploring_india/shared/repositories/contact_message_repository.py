"""
ContactMessage repository for data access.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.repositories.base import BaseRepository
from exploring_india.shared.models.contact_message import ContactMessage


class ContactMessageRepository(BaseRepository[ContactMessage]):
    """Repository for ContactMessage entity (insert only)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContactMessage, session)

    async def create_message(self, name: str, email: str, message: str) -> ContactMessage:
        return await self.create(name=name, email=email, message=message)
