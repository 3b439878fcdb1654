"""
Authentication Dependencies

The session gate: resolves the session cookie into a RequestContext before
the handler (and any service) runs.

Dependency Hierarchy:
=====================
    session_cookie              ← Read the session cookie (never auto-errors)
           │
           ▼
    get_current_user()          ← Verify token, load live session row
           │
           ▼
    CurrentUser                 ← RequestContext(user_id, session_id)

Every failure raises AuthenticationError("Unauthorized") → 401.

Usage:
======
    from exploring_india.api.dependencies.auth import CurrentUser

    @router.get("/me")
    async def get_me(ctx: CurrentUser):
        return ctx.user_id
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import APIKeyCookie

from exploring_india.config.settings import settings
from exploring_india.shared.core.context import RequestContext
from exploring_india.shared.services.auth_service import AuthService
from exploring_india.api.dependencies.services import get_auth_service


# auto_error=False so a missing cookie goes through the same 401 path
session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


async def get_current_user(
    token: Annotated[Optional[str], Depends(session_cookie)],
    auth_service: AuthService = Depends(get_auth_service),
) -> RequestContext:
    """
    Resolve the caller from the session cookie.

    Args:
        token: Session cookie value, if present
        auth_service: Injected AuthService instance

    Returns:
        RequestContext for the authenticated user

    Raises:
        AuthenticationError: If the cookie is missing, invalid or the
            session is gone
    """
    return await auth_service.resolve_session(token)


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated caller (most common dependency)
CurrentUser = Annotated[RequestContext, Depends(get_current_user)]
