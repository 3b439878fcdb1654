"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /api/auth               → Register, login, logout, current user
    /api/places             → Curated destinations (public)
    /api/reviews            → Reviews (create requires a session)
    /api/user-places        → Explored / upcoming places (session)
    /api/contact            → Contact form (public)

Usage:
======
    from exploring_india.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from exploring_india.shared.schemas.common import ErrorResponse
from exploring_india.api.handlers import (
    auth_handler,
    contact_handler,
    health_handler,
    place_handler,
    review_handler,
    user_place_handler,
)


API_PREFIX = "/api"

# Documented error bodies (all share the ErrorResponse envelope)
PUBLIC_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}
SESSION_ERRORS = {
    **PUBLIC_ERRORS,
    401: {"model": ErrorResponse},
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix=f"{API_PREFIX}/auth",
        tags=["Authentication"],
        responses=SESSION_ERRORS,
    )

    app.include_router(
        place_handler.router,
        prefix=f"{API_PREFIX}/places",
        tags=["Places"],
        responses=PUBLIC_ERRORS,
    )

    app.include_router(
        review_handler.router,
        prefix=f"{API_PREFIX}/reviews",
        tags=["Reviews"],
        responses=SESSION_ERRORS,
    )

    app.include_router(
        user_place_handler.router,
        prefix=f"{API_PREFIX}/user-places",
        tags=["User Places"],
        responses=SESSION_ERRORS,
    )

    app.include_router(
        contact_handler.router,
        prefix=f"{API_PREFIX}/contact",
        tags=["Contact"],
        responses=PUBLIC_ERRORS,
    )
