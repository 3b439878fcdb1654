"""
Base Model Classes

Declarative base, identifier generation and the creation-timestamp mixin
shared by every SQLAlchemy model.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← created_at, set once on INSERT

Entities in this application are immutable after creation, so there is no
updated_at column and no soft delete.

Usage:
======
    from exploring_india.shared.models.base import Base, TimestampMixin, new_id

    class Review(Base, TimestampMixin):
        __tablename__ = "reviews"
        id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    """Opaque primary key: a random UUID4 rendered as text."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either directly
    or together with TimestampMixin. Its metadata is what Alembic and
    Database.create_all() operate on.
    """


class TimestampMixin:
    """
    Mixin that records when a row was created.

    The value is assigned in Python at flush time (microsecond precision,
    which keeps newest-first ordering stable on SQLite) and falls back to
    the database clock for rows inserted outside the ORM.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )
