"""Keeps the posts schema at the Alembic head revision.

``run_migrations`` upgrades the store at startup and ``check_schema_current``
confirms the result before the API starts serving.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from posts_service.app.core.logging import (
    EVENT_DB_MIGRATION_FAILED,
    EVENT_DB_MIGRATION_STARTED,
    EVENT_DB_MIGRATION_SUCCEEDED,
    log_event,
    setup_logging,
)
from posts_service.app.db.engine import engine

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class MigrationError(Exception):
    """Raised when the posts schema cannot be brought to head."""


def _get_alembic_cfg() -> Config:
    cfg = Config(str(_PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(_PROJECT_ROOT / "alembic"))
    return cfg


def get_current_revision() -> str | None:
    """Revision stamped in the store, or None for an unmigrated database."""
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def get_head_revision() -> str:
    """Newest revision under ``alembic/versions``."""
    head = ScriptDirectory.from_config(_get_alembic_cfg()).get_current_head()
    return head  # type: ignore[return-value]


def check_schema_current() -> bool:
    """Return False, with a warning, if the store lags the head revision."""
    current, head = get_current_revision(), get_head_revision()
    if current == head:
        return True
    logger.warning(
        "db_schema_drift: current=%s head=%s (run 'make migrate')",
        current,
        head,
    )
    return False


def run_migrations() -> None:
    """Upgrade the store to head; a no-op when it is already there.

    Raises:
        MigrationError: If the upgrade fails. The message names the
            revision the store was left at.
    """
    current, head = get_current_revision(), get_head_revision()
    log_event(logger, "info", EVENT_DB_MIGRATION_STARTED, current=current, head=head)
    if current == head:
        log_event(logger, "info", EVENT_DB_MIGRATION_SUCCEEDED, note="already at head")
        return

    try:
        command.upgrade(_get_alembic_cfg(), "head")
    except Exception as exc:
        log_event(
            logger, "exception", EVENT_DB_MIGRATION_FAILED,
            current=current, target=head, error=exc,
        )
        raise MigrationError(
            f"Could not upgrade posts schema from {current} to head ({head}): {exc}. "
            f"See alembic/versions/ for the failing revision."
        ) from exc
    finally:
        # env.py's fileConfig() replaces the root handlers
        setup_logging()
    log_event(logger, "info", EVENT_DB_MIGRATION_SUCCEEDED, head=head)
