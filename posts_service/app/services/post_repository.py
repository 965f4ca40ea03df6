"""Data-access gateway for the posts table.

All methods operate on a caller-supplied SQLAlchemy ``Session`` so that
transaction boundaries remain under the caller's control.
"""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from posts_service.app.core.logging import EVENT_DB_WRITE_FAILED, log_event
from posts_service.app.models.post import Post
from posts_service.app.models.post_record import PostRecord

logger = logging.getLogger(__name__)

# Signed 64-bit range of the id column; no stored row can have an id outside it.
MIN_POST_ID = -(2**63)
MAX_POST_ID = 2**63 - 1


def is_storable_id(post_id: int) -> bool:
    """Return True if *post_id* fits the id column."""
    return MIN_POST_ID <= post_id <= MAX_POST_ID


def to_post(record: PostRecord) -> Post:
    """Convert a DB row to the API-facing :class:`Post`."""
    return Post(id=record.id, title=record.title, content=record.content)


def _flush(db: Session, operation: str, post_id: int | None) -> None:
    try:
        db.flush()
    except SQLAlchemyError as exc:
        log_event(
            logger, "error", EVENT_DB_WRITE_FAILED,
            operation=operation,
            post_id=post_id,
            error_type=type(exc).__name__,
            detail=str(exc),
        )
        raise


def save(db: Session, record: PostRecord) -> PostRecord:
    """Add or update *record* and flush so a new row gets its id."""
    db.add(record)
    _flush(db, "save", record.id)
    return record


def find_all(db: Session) -> list[PostRecord]:
    """Return every post row, ordered by id."""
    return list(db.scalars(select(PostRecord).order_by(PostRecord.id)))


def find_by_id(db: Session, post_id: int) -> PostRecord | None:
    """Return the row for *post_id*, or ``None`` if there is none.

    Ids outside the column's range are answered without a query.
    """
    if not is_storable_id(post_id):
        return None
    return db.get(PostRecord, post_id)


def delete_by_id(db: Session, post_id: int) -> bool:
    """Delete the row for *post_id* if present.

    Returns True if a row was removed; a missing id is not an error.
    """
    record = find_by_id(db, post_id)
    if record is None:
        return False
    db.delete(record)
    _flush(db, "delete_by_id", post_id)
    return True
