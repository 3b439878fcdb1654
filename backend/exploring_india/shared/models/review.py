"""
Review Entity Model

A star rating with a text comment, written by one user about one place.

SAMPLE REVIEW RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "550e8400-e29b-41d4-a716-446655440000"                    │
│ user_id          │ "660e8400-e29b-41d4-a716-446655440000"                    │
│ place_id         │ "770e8400-e29b-41d4-a716-446655440000"                    │
│ rating           │ 5                                                         │
│ comment          │ "Amazing trip overall"                                    │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exploring_india.shared.models.base import Base, TimestampMixin, new_id


if TYPE_CHECKING:
    from exploring_india.shared.models.user import User
    from exploring_india.shared.models.place import Place


class Review(Base, TimestampMixin):
    """
    Review model.

    A user may review the same place any number of times; there is no
    uniqueness constraint on (user_id, place_id).

    Attributes:
        id: Unique identifier (UUID4 text)
        user_id: Author, always the authenticated caller
        place_id: Reviewed place, must exist at creation
        rating: Integer 1-5
        comment: At least 10 characters
    """

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )

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

    # ═══════════════════════════════════════════════════════════════════════════
    # REVIEW CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="reviews",
    )

    place: Mapped["Place"] = relationship(
        "Place",
        back_populates="reviews",
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, place_id={self.place_id}, rating={self.rating})>"
