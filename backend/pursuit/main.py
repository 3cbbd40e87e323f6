"""Pursuit API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PursuitError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, demo seed and workspace initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Workspace wired here, not in routes: routes only see it through get_workspace
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pursuit import __version__
from pursuit.api.error_handlers import register_error_handlers
from pursuit.api.routes import applications, health, workspace
from pursuit.config import Settings, get_settings
from pursuit.infrastructure.application_repository import SqlApplicationRepository
from pursuit.infrastructure import database
from pursuit.infrastructure.database import init_db
from pursuit.infrastructure.observability import setup_logging
from pursuit.infrastructure.preference_store import SqlPreferenceStore
from pursuit.infrastructure.seed_applications import seed_if_empty
from pursuit.services.delayed_apply import random_delay_seconds
from pursuit.services.filter_workspace import (
    FilterWorkspace, PreferenceKeys, init_workspace,
)

logger = logging.getLogger(__name__)


async def build_workspace(settings: Settings) -> FilterWorkspace:
    """Database, seed data and a loaded workspace from settings."""
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    repository = SqlApplicationRepository(manager)
    if settings.seed_demo_data:
        await seed_if_empty(repository)
    ws = FilterWorkspace(
        store=SqlPreferenceStore(manager),
        repository=repository,
        keys=PreferenceKeys(settings.storage_key_prefix),
        apply_delay=lambda: random_delay_seconds(
            settings.apply_delay_min_ms, settings.apply_delay_max_ms,
        ),
    )
    await ws.load()
    return init_workspace(ws)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await build_workspace(settings)
    logger.info("Pursuit API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Pursuit API shutting down")


app = FastAPI(
    title="Pursuit Filters API", version=__version__, lifespan=lifespan,
)

# CORS: origins from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(workspace.router)
app.include_router(applications.router)

register_error_handlers(app)
