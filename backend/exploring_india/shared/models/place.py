"""
Place Entity Model

A curated destination. Places are inserted by the seeding script only and
are read-only to the API.

SAMPLE PLACE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ "770e8400-e29b-41d4-a716-446655440000"                    │
│ name             │ "Taj Mahal"                                               │
│ location         │ "Agra, Uttar Pradesh"                                     │
│ category         │ "Historical"                                              │
│ image_url        │ "/generated_images/Taj_Mahal_sunrise_hero_2ac0516e.png"   │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exploring_india.shared.models.base import Base, new_id


if TYPE_CHECKING:
    from exploring_india.shared.models.review import Review
    from exploring_india.shared.models.user_place import UserPlace


class Place(Base):
    """
    Place model - a destination users can review and track.

    Attributes:
        id: Unique identifier (UUID4 text)
        name: Display name
        description: Long-form description
        importance: Why the place matters
        image_url: Hero image path
        location: City / state text
        category: Free-text tag ("Historical", "Beach", ...)

    Relationships:
        reviews: Reviews of this place
        user_places: Users' explored/upcoming entries for this place
    """

    __tablename__ = "places"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    importance: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="place",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    user_places: Mapped[list["UserPlace"]] = relationship(
        "UserPlace",
        back_populates="place",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Place(id={self.id}, name={self.name})>"
