"""
Security Utilities

Password hashing and session cookie signing.

Password Hashing:
=================
Uses passlib's CryptContext with bcrypt (salted, work factor from
BCRYPT_ROUNDS). Registration refuses passwords longer than
BCRYPT_MAX_PASSWORD_BYTES and verification never accepts one, so two
passwords sharing a 72-byte prefix cannot match the same hash.

Session Cookies:
================
The cookie carries a PyJWT HS256 token whose `sid` claim is the server-side
session id and whose `exp` claim equals the session's fixed expiry. The
signature stops clients from forging session ids; the database row decides
whether the session is still live.

Usage:
======
    from exploring_india.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("secret1")
    SecurityUtils.verify_password("secret1", hashed)  # True

    token = SecurityUtils.create_session_token(
        session_id=sid,
        secret_key=settings.SECRET_KEY,
        expires_at=expires_at,
    )
    sid = SecurityUtils.decode_session_token(token, settings.SECRET_KEY)
"""

import secrets
from datetime import datetime, timezone

import jwt
from passlib.context import CryptContext

from exploring_india.config.settings import settings


# bcrypt ignores everything past the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - Session id generation
    - Signed session cookie encoding/decoding
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)

        Raises:
            ValueError: If the password is longer than BCRYPT_MAX_PASSWORD_BYTES
        """
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Returns:
            True if password matches, False otherwise
        """
        if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            pwd_context.dummy_verify()
            return False
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the same effort as verify_password when there is no user to check."""
        pwd_context.dummy_verify()

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSIONS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def generate_session_id() -> str:
        """Random, URL-safe, 256-bit session identifier."""
        return secrets.token_urlsafe(32)

    @staticmethod
    def create_session_token(
        session_id: str,
        secret_key: str,
        expires_at: datetime,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign a session id for the session cookie.

        Args:
            session_id: Server-side session id
            secret_key: Secret key for signing
            expires_at: Session expiry (becomes the `exp` claim)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT string
        """
        payload = {
            "sid": session_id,
            "exp": expires_at,
            "iat": datetime.now(timezone.utc),
        }
        return jwt.encode(payload, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_session_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> str:
        """
        Verify a session cookie and return its session id.

        Raises:
            ValueError: If the token is expired, tampered with or malformed
        """
        try:
            payload = jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Session has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid session token: {str(e)}")

        session_id = payload.get("sid")
        if not isinstance(session_id, str) or not session_id:
            raise ValueError("Invalid session token: missing session id")
        return session_id
