"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models and validate_payload
- Core: Logging, exceptions, request context
- DB: Engine/session lifecycle
- Utils: Password hashing and session tokens

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions, RequestContext
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Security helpers

Usage:
======
    from exploring_india.shared.models import User, Place
    from exploring_india.shared.repositories import UserRepository
    from exploring_india.shared.services import AuthService
    from exploring_india.shared.schemas import UserCreate, UserResponse
    from exploring_india.shared.core import logger, ExploringIndiaException
"""
