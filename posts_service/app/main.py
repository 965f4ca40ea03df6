"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from posts_service.app.api.routes.health import router as health_router
from posts_service.app.api.routes.posts import router as posts_router
from posts_service.app.core.cors import configure_cors
from posts_service.app.core.errors import register_exception_handlers
from posts_service.app.core.logging import setup_logging
from posts_service.app.core.messages import validate_catalog
from posts_service.app.core.settings import settings
from posts_service.app.db.engine import init_db
from posts_service.app.db.migrations import check_schema_current, run_migrations

setup_logging(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("app_start")
    logger.info("config_loaded: %s", settings.safe_dump())
    init_db()
    run_migrations()
    check_schema_current()
    validate_catalog()
    logger.info("Posts API ready")
    yield
    logger.info("Posts API shutting down")


app = FastAPI(
    title="Posts API",
    version="0.1.0",
    description="CRUD API for posts with localized error responses.",
    lifespan=lifespan,
)

configure_cors(app)
register_exception_handlers(app)

app.include_router(health_router, tags=["health"])
app.include_router(posts_router, tags=["posts"])
