"""
UserPlace Entity Model

A user's relationship to a place: already explored, or an upcoming trip.

SAMPLE USER_PLACE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "550e8400-e29b-41d4-a716-446655440000"                    │
│ user_id          │ "660e8400-e29b-41d4-a716-446655440000"                    │
│ place_id         │ "770e8400-e29b-41d4-a716-446655440000"                    │
│ status           │ "explored"                                                │
└──────────────────────────────────────────────────────────────────────────────┘

There is deliberately no unique constraint on (user_id, place_id) or
(user_id, place_id, status): adding the same place twice creates two rows.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Enum as SQLEnum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exploring_india.shared.models.base import Base, TimestampMixin, new_id
from exploring_india.shared.models.enums import UserPlaceStatus


if TYPE_CHECKING:
    from exploring_india.shared.models.user import User
    from exploring_india.shared.models.place import Place


class UserPlace(Base, TimestampMixin):
    """
    UserPlace model.

    Attributes:
        id: Unique identifier (UUID4 text)
        user_id: Owning user
        place_id: Target place, must exist at creation
        status: explored | upcoming, fixed at creation
    """

    __tablename__ = "user_places"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    place_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("places.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Stored as the lowercase value ("explored"), not the member name
    status: Mapped[UserPlaceStatus] = mapped_column(
        SQLEnum(
            UserPlaceStatus,
            name="userplacestatus",
            native_enum=False,
            length=16,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="user_places",
    )

    place: Mapped["Place"] = relationship(
        "Place",
        back_populates="user_places",
    )

    def __repr__(self) -> str:
        return f"<UserPlace(id={self.id}, place_id={self.place_id}, status={self.status})>"
