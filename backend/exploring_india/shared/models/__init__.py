"""
SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── reviews (Review[])
       ├── user_places (UserPlace[])
       └── sessions (UserSession[])

    Place
       ├── reviews (Review[])
       └── user_places (UserPlace[])

    ContactMessage (standalone, write-only)

Deleting a User or Place cascades to its dependent rows at the database
level (ON DELETE CASCADE).

Usage:
======
    from exploring_india.shared.models import User, Place, Review, UserPlace
"""

from exploring_india.shared.models.base import Base, TimestampMixin, new_id
from exploring_india.shared.models.enums import UserPlaceStatus
from exploring_india.shared.models.user import User
from exploring_india.shared.models.place import Place
from exploring_india.shared.models.review import Review
from exploring_india.shared.models.user_place import UserPlace
from exploring_india.shared.models.contact_message import ContactMessage
from exploring_india.shared.models.user_session import UserSession

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "new_id",
    # Enums
    "UserPlaceStatus",
    # Models
    "User",
    "Place",
    "Review",
    "UserPlace",
    "ContactMessage",
    "UserSession",
]
