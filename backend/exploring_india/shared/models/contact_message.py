"""
ContactMessage Entity Model

Message left through the public contact form. Write-only: nothing in the
API reads these back.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from exploring_india.shared.models.base import Base, TimestampMixin, new_id


class ContactMessage(Base, TimestampMixin):
    """Anonymous visitor message for the site operators."""

    __tablename__ = "contact_messages"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<ContactMessage(id={self.id}, email={self.email})>"
