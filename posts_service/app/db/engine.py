"""SQLAlchemy engine configuration."""

import logging

from sqlalchemy import create_engine, text

from posts_service.app.core.settings import settings

logger = logging.getLogger(__name__)


def get_safe_db_url() -> str:
    """Return the configured database URL with the password masked."""
    return settings.safe_database_url


_connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    connect_args=_connect_args,
)

logger.info("db_initialized: url=%s", get_safe_db_url())


class DatabaseInitError(Exception):
    """Raised when the database cannot be initialized."""


def init_db() -> None:
    """Verify the database is accessible by executing a simple query.

    Called at startup to confirm the store can be reached. Raises
    :class:`DatabaseInitError` with actionable guidance on failure.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("db_init_verified: url=%s", get_safe_db_url())
    except Exception as exc:
        msg = (
            f"Cannot open database at '{get_safe_db_url()}': {exc}. "
            f"Check file permissions, set APP_DB_PATH to a writable location, "
            f"or set DATABASE_URL to a reachable server."
        )
        logger.error("db_init_failed: %s", msg)
        raise DatabaseInitError(msg) from exc
