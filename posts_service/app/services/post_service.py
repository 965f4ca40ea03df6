"""Business operations for posts.

Each write commits its own transaction. Input is validated before any
lookup or write, so a blank title is reported even for an unknown id.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from posts_service.app.core.logging import (
    EVENT_POST_CREATED,
    EVENT_POST_DELETED,
    EVENT_POST_UPDATED,
    log_event,
)
from posts_service.app.core.messages import ErrorCode
from posts_service.app.models.post import Post
from posts_service.app.models.post_record import PostRecord
from posts_service.app.services import post_repository
from posts_service.app.services.validation import validate_post_input

logger = logging.getLogger(__name__)


class PostNotFoundError(Exception):
    """Raised when a post cannot be found by id."""

    code = ErrorCode.post_not_found

    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(f"Post not found: id={post_id}")


class PostValidationError(Exception):
    """Raised when create/update input is rejected; carries the error code."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Post validation failed: {code}")


def _validated(title: str | None, content: str | None) -> tuple[str, str | None]:
    post_input, errors = validate_post_input(title, content)
    if post_input is None:
        raise PostValidationError(errors[0])
    return post_input.title, post_input.content  # type: ignore[return-value]


def create(db: Session, title: str | None, content: str | None = None) -> Post:
    """Persist a new post and return it with its assigned id.

    Raises:
        PostValidationError: If *title* is blank or absent.
    """
    title, content = _validated(title, content)
    record = post_repository.save(db, PostRecord(title=title, content=content))
    db.commit()
    log_event(
        logger, "info", EVENT_POST_CREATED,
        post_id=record.id,
        title_len=len(title),
        content_len=len(content) if content is not None else 0,
    )
    return post_repository.to_post(record)


def find_all(db: Session) -> list[Post]:
    """Return all posts; an empty store yields an empty list."""
    return [post_repository.to_post(r) for r in post_repository.find_all(db)]


def find_by_id(db: Session, post_id: int) -> Post:
    """Fetch a single post.

    Raises:
        PostNotFoundError: If no post with *post_id* exists.
    """
    record = post_repository.find_by_id(db, post_id)
    if record is None:
        raise PostNotFoundError(post_id)
    return post_repository.to_post(record)


def update(
    db: Session,
    post_id: int,
    title: str | None,
    content: str | None = None,
) -> Post:
    """Overwrite a post's title and content.

    There is no partial merge: omitting *content* clears it.

    Raises:
        PostValidationError: If *title* is blank or absent.
        PostNotFoundError: If no post with *post_id* exists.
    """
    title, content = _validated(title, content)
    record = post_repository.find_by_id(db, post_id)
    if record is None:
        raise PostNotFoundError(post_id)

    record.title = title
    record.content = content
    post_repository.save(db, record)
    db.commit()
    log_event(
        logger, "info", EVENT_POST_UPDATED,
        post_id=post_id,
        title_len=len(title),
        content_len=len(content) if content is not None else 0,
    )
    return post_repository.to_post(record)


def delete(db: Session, post_id: int) -> None:
    """Delete a post by id. Deleting an unknown id is a silent no-op."""
    removed = post_repository.delete_by_id(db, post_id)
    db.commit()
    log_event(logger, "info", EVENT_POST_DELETED, post_id=post_id, removed=removed)
