"""CRUD endpoints for posts.

Domain errors raised by the service are translated by the handlers in
:mod:`posts_service.app.core.errors`; routes only set success statuses.
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from posts_service.app.db.session import get_db
from posts_service.app.models.post import ErrorResponse, Post, PostInput
from posts_service.app.services import post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts")

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Post not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid post input"}}


@router.post("", response_model=Post, status_code=201, responses=_INVALID)
def create_post(payload: PostInput, db: Session = Depends(get_db)) -> Post:
    """Create a new post."""
    return post_service.create(db, payload.title, payload.content)


@router.get("", response_model=list[Post])
def list_posts(db: Session = Depends(get_db)) -> list[Post]:
    """Return all posts."""
    return post_service.find_all(db)


@router.get("/{post_id}", response_model=Post, responses=_NOT_FOUND)
def get_post(post_id: int, db: Session = Depends(get_db)) -> Post:
    """Return a single post by ID."""
    return post_service.find_by_id(db, post_id)


@router.put("/{post_id}", response_model=Post, responses={**_INVALID, **_NOT_FOUND})
def update_post(post_id: int, payload: PostInput, db: Session = Depends(get_db)) -> Post:
    """Replace a post's title and content."""
    return post_service.update(db, post_id, payload.title, payload.content)


@router.delete("/{post_id}", status_code=204, response_class=Response)
def delete_post(post_id: int, db: Session = Depends(get_db)) -> Response:
    """Delete a post. Unknown ids still get 204."""
    post_service.delete(db, post_id)
    return Response(status_code=204)
