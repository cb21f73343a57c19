"""Learn Content API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly from route tables (no auto-discovery)
    - Global error handlers map LearnApiError → {statusCode, message, error}
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; this module only wires them
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learn_api.api.error_handlers import register_error_handlers
from learn_api.api.routes import learn
from learn_api.config import get_settings
from learn_api.infrastructure import database
from learn_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Learn API started")
    yield
    if database.db_manager:
        await database.db_manager.close()
    logger.info("Learn API shutting down")


app = FastAPI(
    title="Learn Content API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(learn.router)

register_error_handlers(app)
