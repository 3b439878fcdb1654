"""
Database Dependency

FastAPI dependency for database sessions.

The session comes from the Database attached to ``app.state.database`` and is
committed when the handler succeeds, rolled back when it raises. FastAPI
caches the dependency per request, so the auth gate and the handler's
services share one session.

Usage:
======
    from exploring_india.api.dependencies.database import DbSession

    @router.get("/places")
    async def list_places(db: DbSession):
        return await PlaceRepository(db).get_all_places()
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
