"""Bootcamp Enrollment API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BootcampError → {status, message, data} envelopes
    - CORS configured from settings (not hardcoded)
    - Database manager and mailer built once in the lifespan, stored on app.state,
      and torn down on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No module-level clients: everything stateful hangs off app.state and is
      injected through dependencies
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bootcamp.api.error_handlers import register_error_handlers
from bootcamp.api.routes import auth, cohorts, enrollments, health, tracks, users
from bootcamp.config import get_settings
from bootcamp.infrastructure.database import init_db
from bootcamp.infrastructure.mailer import Mailer
from bootcamp.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.mailer = Mailer.from_settings(settings)
    if not app.state.mailer.enabled:
        logger.warning("MAIL_HOST not set, outbound email disabled")
    logger.info("Bootcamp API started")
    yield
    logger.info("Bootcamp API shutting down")
    await app.state.db.close()


app = FastAPI(
    title="Bootcamp Enrollment API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/v1/docs",
    openapi_url="/api/v1/openapi.json",
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(tracks.router)
app.include_router(cohorts.router)
app.include_router(users.router)
app.include_router(enrollments.router)

register_error_handlers(app)
