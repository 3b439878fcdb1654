"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   create_application(database)  →  app.state.database                       │
│       │                                                                     │
│       │  Dependency Injection: get_db()                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              AsyncSession (one per request)                 │          │
│   │  - Auto-commit on success                                   │          │
│   │  - Auto-rollback on exception                               │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   Services → Repositories → PostgreSQL / SQLite                             │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Usage in FastAPI:
=================
    from fastapi import Depends
    from exploring_india.shared.db import get_db
    from exploring_india.shared.repositories import PlaceRepository

    @app.get("/places/{place_id}")
    async def get_place(place_id: str, db: AsyncSession = Depends(get_db)):
        return await PlaceRepository(db).get(place_id)
"""

from exploring_india.shared.db.session import (
    Database,
    get_database,
    get_db,
)

__all__ = [
    "Database",  # Engine + session factory with explicit lifecycle
    "get_database",  # Resolve the Database bound to the running app
    "get_db",  # FastAPI dependency for getting a database session
]
