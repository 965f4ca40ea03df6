"""Input validation for post create and update.

Kept free of framework dependencies so the rules are testable on their own
and run before anything touches the store.
"""

from posts_service.app.core.messages import ErrorCode
from posts_service.app.models.post import PostInput


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def validate_post_input(
    title: str | None,
    content: str | None = None,
) -> tuple[PostInput | None, list[str]]:
    """Validate a post's title and content.

    Returns ``(post_input, errors)`` where *errors* holds error codes and is
    empty on success. ``content`` is optional and accepted as-is.
    """
    errors: list[str] = []
    if is_blank(title):
        errors.append(ErrorCode.post_title_required)
    if errors:
        return None, errors
    return PostInput(title=title, content=content), []
