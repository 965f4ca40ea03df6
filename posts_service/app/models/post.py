"""API-facing models for posts and error bodies."""

from pydantic import BaseModel


class PostInput(BaseModel):
    """Request body for create and update.

    ``title`` is optional here so a missing title reaches
    :func:`~posts_service.app.services.validation.validate_post_input` and is
    reported with a stable error code instead of a schema error.
    """

    title: str | None = None
    content: str | None = None


class Post(BaseModel):
    """A persisted post as returned by the API."""

    id: int
    title: str
    content: str | None = None


class ErrorResponse(BaseModel):
    """Uniform error body: stable ``code`` plus a localized ``message``."""

    code: str
    message: str
