"""
Authentication Service

Business logic for registration, login, logout and session resolution.

Session Flow:
=============
    login ──► verify password ──► insert user_sessions row ──► sign {sid, exp}
                                                                   │
                                        Set-Cookie: session=<jwt>  ◄┘

    request ──► cookie ──► verify signature/exp ──► load live session row
                                                        │
                                       RequestContext(user_id, session_id)

Every failure while resolving a session raises the same
AuthenticationError("Unauthorized"), so callers cannot tell a forged cookie
from an expired one.

Usage:
======
    from exploring_india.shared.services.auth_service import AuthService

    service = AuthService(db)
    user = await service.register_user("alice", "secret1")
    user, token, max_age = await service.login_user("alice", "secret1")
    ctx = await service.resolve_session(token)
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from exploring_india.config.settings import settings
from exploring_india.shared.core.context import RequestContext
from exploring_india.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from exploring_india.shared.core.logging import get_logger
from exploring_india.shared.models.base import utcnow
from exploring_india.shared.models.user import User
from exploring_india.shared.repositories.user_repository import UserRepository
from exploring_india.shared.repositories.user_session_repository import UserSessionRepository
from exploring_india.shared.schemas.user import UserCreate, UserLogin
from exploring_india.shared.schemas.validation import validate_payload
from exploring_india.shared.utils.security import SecurityUtils

logger = get_logger(__name__)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with username/password
    - Credential verification and session creation (login)
    - Session teardown (logout)
    - Resolving a session cookie into a RequestContext

    Attributes:
        session: Database session
        repo: UserRepository instance
        session_repo: UserSessionRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)
        self.session_repo = UserSessionRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION
    # ═══════════════════════════════════════════════════════════════════════════

    async def register_user(self, username: str, password: str) -> User:
        """
        Register a new user.

        Args:
            username: Desired username
            password: Plain text password (will be hashed)

        Returns:
            The created User

        Raises:
            ValidationError: If username or password is empty
            DuplicateResourceError: If the username is taken
        """
        result = validate_payload(UserCreate, {"username": username, "password": password})
        if not result.ok:
            raise ValidationError(result.message, details={"errors": result.errors})

        if await self.repo.username_exists(username):
            logger.info("Registration rejected", reason="username_taken", username=username)
            raise DuplicateResourceError("Username already taken")

        password_hash = SecurityUtils.hash_password(password)

        # The unique constraint still guards a concurrent registration
        user = await self.repo.create_user(username=username, password_hash=password_hash)

        logger.info("User registered", user_id=user.id, username=user.username)
        return user

    # ═══════════════════════════════════════════════════════════════════════════
    # LOGIN / LOGOUT
    # ═══════════════════════════════════════════════════════════════════════════

    async def login_user(self, username: str, password: str) -> Tuple[User, str, int]:
        """
        Authenticate a user and open a session.

        Args:
            username: Username
            password: Plain text password

        Returns:
            Tuple of (user, session_token, max_age_seconds)

        Raises:
            ValidationError: If username or password is missing
            AuthenticationError: If the credentials are invalid
        """
        result = validate_payload(UserLogin, {"username": username, "password": password})
        if not result.ok:
            raise ValidationError("Username and password are required", details={"errors": result.errors})

        user = await self.repo.get_by_username(username)
        if user is None:
            SecurityUtils.dummy_verify()
            logger.info("Login failed", reason="unknown_user")
            raise AuthenticationError("Invalid username or password")

        if not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login failed", reason="bad_password", user_id=user.id)
            raise AuthenticationError("Invalid username or password")

        now = utcnow()
        purged = await self.session_repo.purge_expired(now)
        if purged:
            logger.debug("Purged expired sessions", count=purged)

        expires_at = now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
        session_id = SecurityUtils.generate_session_id()
        await self.session_repo.create_session(
            session_id=session_id,
            user_id=user.id,
            expires_at=expires_at,
        )

        token = SecurityUtils.create_session_token(
            session_id=session_id,
            secret_key=settings.SECRET_KEY,
            expires_at=expires_at,
            algorithm=settings.JWT_ALGORITHM,
        )

        logger.info("User logged in", user_id=user.id)
        return user, token, settings.session_max_age_seconds

    async def logout(self, ctx: RequestContext) -> bool:
        """
        Destroy the caller's session.

        Returns:
            True if the session row existed
        """
        deleted = await self.session_repo.delete_session(ctx.session_id)
        logger.info("User logged out", user_id=ctx.user_id)
        return deleted

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSION RESOLUTION
    # ═══════════════════════════════════════════════════════════════════════════

    async def resolve_session(self, token: Optional[str]) -> RequestContext:
        """
        Turn a session cookie into the caller's identity.

        Args:
            token: Raw cookie value (None when the cookie is absent)

        Returns:
            RequestContext for the session's user

        Raises:
            AuthenticationError: For a missing cookie, a bad signature, an
                expired token, or a session that no longer exists
        """
        if not token:
            raise AuthenticationError()

        try:
            session_id = SecurityUtils.decode_session_token(
                token,
                secret_key=settings.SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
            )
        except ValueError as e:
            logger.debug("Session token rejected", reason=str(e))
            raise AuthenticationError() from e

        user_session = await self.session_repo.get_active(session_id, utcnow())
        if user_session is None:
            raise AuthenticationError()

        return RequestContext(user_id=user_session.user_id, session_id=user_session.id)

    async def get_current_user(self, ctx: RequestContext) -> User:
        """
        Load the caller's user record.

        Raises:
            UserNotFoundError: If the user was removed after the session was issued
        """
        user = await self.repo.get(ctx.user_id)
        if user is None:
            raise UserNotFoundError(ctx.user_id)
        return user
