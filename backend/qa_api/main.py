"""Q&A API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to an Envelope (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Store and ModerationClient are built in the lifespan and kept on app.state;
      both are closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema is managed by alembic, outside the request path
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from qa_api.api.cors import EnvelopeCORSMiddleware
from qa_api.api.error_handlers import register_error_handlers
from qa_api.api.routes import answers, health, questions
from qa_api.config import Settings, get_settings
from qa_api.infrastructure.database import DatabaseSessionManager
from qa_api.infrastructure.moderation_client import ModerationClient
from qa_api.infrastructure.observability import setup_logging, trace_middleware
from qa_api.infrastructure.repositories import Store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        timeout_seconds=settings.storage_timeout_seconds,
    )
    app.state.store = Store.from_manager(db)
    async with httpx.AsyncClient() as http:
        app.state.moderation = ModerationClient(
            http,
            url=settings.moderation_url,
            api_key=settings.moderation_api_key,
            censor_character=settings.moderation_censor_character,
            timeout_seconds=settings.moderation_timeout_seconds,
        )
        logger.info("Q&A API started")
        yield
    await db.dispose()
    logger.info("Q&A API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: middleware, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(title="Q&A API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        EnvelopeCORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )
    # Registered last so it wraps CORS: rejected preflights are traced too
    app.middleware("http")(trace_middleware)

    app.include_router(health.router)
    app.include_router(questions.router)
    app.include_router(answers.router)

    register_error_handlers(app)
    return app


app = create_app()
