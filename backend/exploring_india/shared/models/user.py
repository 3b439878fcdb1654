"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── reviews (Review[])         - Reviews written by the user
       ├── user_places (UserPlace[])  - Places marked explored/upcoming
       └── sessions (UserSession[])   - Active login sessions

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "550e8400-e29b-41d4-a716-446655440000"                    │
│ username         │ "alice"                                                   │
│ password_hash    │ "$2b$10$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exploring_india.shared.models.base import Base, TimestampMixin, new_id


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from exploring_india.shared.models.review import Review
    from exploring_india.shared.models.user_place import UserPlace
    from exploring_india.shared.models.user_session import UserSession


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Users are created once at registration and never modified or deleted
    through the API.

    Attributes:
        id: Unique identifier (UUID4 text)
        username: Login name (unique, indexed)
        password_hash: Bcrypt hashed password, never the plaintext

    Relationships:
        reviews: All reviews written by this user
        user_places: All explored/upcoming entries of this user
        sessions: Server-side login sessions
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    # Unique constraint backs up the registration pre-check under races
    username: Mapped[str] = mapped_column(
        Text,
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    user_places: Mapped[list["UserPlace"]] = relationship(
        "UserPlace",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    sessions: Mapped[list["UserSession"]] = relationship(
        "UserSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
