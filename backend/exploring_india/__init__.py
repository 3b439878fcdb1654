"""
Exploring India Backend

Travel-review API: curated destinations, user reviews and personal
explored/upcoming lists.

Package Structure:
==================
    exploring_india/
    ├── api/        ← FastAPI application
    ├── scripts/    ← Operational scripts (seeding)
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn exploring_india.api.main:app --reload

    # Seed destinations
    python -m exploring_india.scripts.seed_places
"""
