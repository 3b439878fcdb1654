"""
Exploring India API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                         EXPLORING INDIA API                                 │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:   CORS → Request logging → Exception handlers                 │
│                              │                                              │
│                              ▼                                              │
│   Routers:      Health │ Auth │ Places │ Reviews │ User Places │ Contact    │
│                              │                                              │
│                              ▼                                              │
│   Dependencies: Database session │ Session gate │ Services                  │
│                              │                                              │
│                              ▼                                              │
│   app.state.database  (engine + session factory)                            │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. create_application() attaches a Database to app.state
2. Application starts → lifespan startup verifies connectivity
3. Application serves requests (one session per request)
4. Application stops → lifespan shutdown disposes the engine

Usage:
======
    # Run with uvicorn
    uvicorn exploring_india.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically (tests inject their own Database)
    from exploring_india.api.main import create_application
    app = create_application(database=Database("sqlite+aiosqlite:///./test.db"))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exploring_india.config.settings import settings
from exploring_india.shared.db import Database
from exploring_india.shared.core.logging import logger
from exploring_india.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from exploring_india.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database is reachable

    Shutdown:
    - Dispose of the connection pool
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Exploring India API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    database: Database = app.state.database
    await database.connect()

    logger.info("Exploring India API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Exploring India API")

    await database.disconnect()

    logger.info("Exploring India API shutdown complete")


def create_application(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Database to serve requests from. Built from settings
            when omitted.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Curated Indian destinations, reviews and travel lists",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.database = database if database is not None else Database.from_settings()

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # Outermost layer
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
