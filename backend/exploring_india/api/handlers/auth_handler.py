"""
Authentication Handler

Handles registration, login, logout and the current-user endpoint.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses (including the session cookie)
- Handle HTTP-specific errors

Business logic belongs in the SERVICE layer, not here.

SESSION COOKIE:
===============
Login sets an HTTP-only, SameSite=Lax cookie (Secure in production) holding
the signed session token. Logout deletes the server-side session and clears
the cookie.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from exploring_india.config.settings import settings
from exploring_india.shared.schemas.common import MessageResponse
from exploring_india.shared.schemas.user import UserCreate, UserLogin, UserResponse
from exploring_india.shared.services.auth_service import AuthService
from exploring_india.shared.core.exceptions import DuplicateResourceError
from exploring_india.api.dependencies.auth import CurrentUser
from exploring_india.api.dependencies.services import get_auth_service


router = APIRouter()


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    Does not log the user in; the client calls /login next.

    Raises:
        400: If the username is already taken or the body is invalid
    """
    try:
        user = await auth_service.register_user(
            username=user_data.username,
            password=user_data.password,
        )
    except DuplicateResourceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e

    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: UserLogin,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and set the session cookie.

    Raises:
        400: If username or password is missing
        401: If credentials are invalid
    """
    user, token, max_age = await auth_service.login_user(
        username=credentials.username,
        password=credentials.password,
    )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return UserResponse.model_validate(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    ctx: CurrentUser,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Destroy the current session and clear the cookie."""
    await auth_service.logout(ctx)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_me(
    ctx: CurrentUser,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Return the logged-in user.

    Raises:
        401: No valid session
        404: The session's user no longer exists
    """
    user = await auth_service.get_current_user(ctx)
    return UserResponse.model_validate(user)
