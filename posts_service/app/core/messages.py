"""Locale-aware message catalog for error responses.

The catalog is a plain ``{locale: {code: message}}`` mapping built once at
import and checked at application startup via :func:`validate_catalog`.
Lookups fall back from the exact locale to its primary language subtag
(``es-MX`` → ``es``) and finally to the configured default locale.
"""

import logging
from enum import StrEnum

from posts_service.app.core.settings import settings

logger = logging.getLogger(__name__)


class ErrorCode(StrEnum):
    """Stable error keys returned in the ``code`` field of error bodies."""

    post_not_found = "error.post.notFound"
    post_title_required = "error.post.title.required"
    internal = "error.internal"


MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        ErrorCode.post_not_found: "Post not found.",
        ErrorCode.post_title_required: "Post title is required.",
        ErrorCode.internal: "An unexpected error occurred.",
    },
    "es": {
        ErrorCode.post_not_found: "Publicación no encontrada.",
        ErrorCode.post_title_required: "El título de la publicación es obligatorio.",
        ErrorCode.internal: "Ocurrió un error inesperado.",
    },
}


def supported_locales() -> list[str]:
    """Return the locales that have a translation table."""
    return sorted(MESSAGES)


def _normalize(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


def _lookup(code: str, locale: str) -> str | None:
    normalized = _normalize(locale)
    table = MESSAGES.get(normalized)
    if table is None:
        table = MESSAGES.get(normalized.split("-", 1)[0])
    if table is None:
        return None
    return table.get(code)


def resolve_message(code: str, locale: str | None = None) -> str:
    """Return the message for *code* in *locale*, with default-locale fallback.

    If neither the requested nor the default locale defines *code*, the code
    itself is returned so the caller always gets a non-empty string.
    """
    if locale:
        message = _lookup(code, locale)
        if message is not None:
            return message
    message = _lookup(code, settings.default_locale)
    if message is not None:
        return message
    logger.warning("message_missing: code=%s locale=%s", code, locale)
    return code


def negotiate_locale(accept_language: str | None) -> str:
    """Pick the best supported locale from an ``Accept-Language`` header.

    Entries are ranked by their ``q`` weight (default 1.0); the first entry
    whose tag or primary subtag has a translation table wins. Falls back to
    the default locale when nothing matches or the header is absent.
    """
    if not accept_language:
        return settings.default_locale

    ranked: list[tuple[float, int, str]] = []
    for position, entry in enumerate(accept_language.split(",")):
        tag, _, params = entry.partition(";")
        tag = _normalize(tag)
        if not tag or tag == "*":
            continue
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        if weight > 0:
            ranked.append((-weight, position, tag))

    for _, _, tag in sorted(ranked):
        if tag in MESSAGES:
            return tag
        primary = tag.split("-", 1)[0]
        if primary in MESSAGES:
            return primary
    return settings.default_locale


def validate_catalog() -> None:
    """Validate the catalog at application startup.

    Checks:
    - The default locale has a translation table
    - The default locale defines every :class:`ErrorCode`

    Raises ``RuntimeError`` with a developer-facing message on failure.
    """
    default = _normalize(settings.default_locale)
    table = MESSAGES.get(default)
    if table is None:
        raise RuntimeError(
            f"Default locale '{settings.default_locale}' has no messages; "
            f"available: {supported_locales()}"
        )

    missing = [code.value for code in ErrorCode if code not in table]
    if missing:
        raise RuntimeError(f"Default locale '{default}' is missing messages: {missing}")

    for locale, messages in MESSAGES.items():
        partial = [code.value for code in ErrorCode if code not in messages]
        if partial:
            logger.warning(
                "validate_catalog: locale=%s missing=%s (falls back to %s)",
                locale,
                partial,
                default,
            )

    logger.info(
        "validate_catalog: %d locales loaded, default=%s",
        len(MESSAGES),
        default,
    )
