"""TaskForge API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskForgeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Custom entity routers come from the registry in services/custom_entities.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskforge.api.error_handlers import register_error_handlers
from taskforge.api.routes import (
    admin, health, notifications, projects, tasks, users,
)
from taskforge.api.routes.custom_entities import build_custom_entity_router
from taskforge.config import get_settings
from taskforge.infrastructure.database import close_db, init_db
from taskforge.infrastructure.observability import setup_logging
from taskforge.services.custom_entities import CUSTOM_ENTITIES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("TaskForge API started")
    yield
    await close_db()
    logger.info("TaskForge API shutting down")


app = FastAPI(
    title="TaskForge API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(tasks.router)
app.include_router(notifications.router)
app.include_router(admin.router)
for entity in CUSTOM_ENTITIES:
    app.include_router(build_custom_entity_router(entity))

register_error_handlers(app)
