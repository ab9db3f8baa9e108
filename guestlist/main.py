"""Guestlist API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GuestlistError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database opened on startup and disposed on shutdown via lifespan

Run with: uvicorn guestlist.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guestlist.api.error_handlers import register_error_handlers
from guestlist.api.routes import admin, health, invites
from guestlist.config import get_settings
from guestlist.infrastructure.database import close_db, init_db
from guestlist.infrastructure.observability import setup_logging

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
        ssl=settings.database_ssl,
    )
    logger.info("Guestlist API started")
    yield
    await close_db()
    logger.info("Guestlist API shutting down")


app = FastAPI(
    title="Guestlist API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(invites.router)
app.include_router(admin.router)

register_error_handlers(app)
