"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), CurrentUser
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        ctx: RequestContext = Depends(get_current_user),
    ):

    # Write this:
    async def handler(db: DbSession, ctx: CurrentUser):
"""

from exploring_india.shared.db import get_db
from exploring_india.api.dependencies.database import DbSession
from exploring_india.api.dependencies.auth import (
    get_current_user,
    CurrentUser,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "CurrentUser",
]
