"""
UserSession Entity Model

Server-side login session. The session id travels to the browser inside a
signed, HTTP-only cookie; the row is the source of truth for whether the
session is still valid.

SAMPLE USER_SESSION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "Jq3x...(43 url-safe chars)"                              │
│ user_id          │ "660e8400-e29b-41d4-a716-446655440000"                    │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ expires_at       │ 2024-01-08T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exploring_india.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from exploring_india.shared.models.user import User


class UserSession(Base, TimestampMixin):
    """
    Login session with a fixed lifetime.

    Attributes:
        id: Random URL-safe token generated at login
        user_id: Authenticated user
        expires_at: Hard expiry, never extended
    """

    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
    )

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="sessions",
    )

    def __repr__(self) -> str:
        return f"<UserSession(user_id={self.user_id}, expires_at={self.expires_at})>"
