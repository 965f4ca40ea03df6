"""Translation of domain errors into the JSON error envelope.

Only two conditions are mapped:

- :class:`PostNotFoundError`   → 404 ``error.post.notFound``
- :class:`PostValidationError` → 400 with the code carried by the error

Anything else is deliberately left untranslated and surfaces as the server's
plain 500 response. Do not register a catch-all ``Exception`` handler here.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from posts_service.app.core.logging import (
    EVENT_POST_NOT_FOUND,
    EVENT_POST_VALIDATION_FAILED,
    log_event,
)
from posts_service.app.core.messages import negotiate_locale, resolve_message
from posts_service.app.models.post import ErrorResponse
from posts_service.app.services.post_service import (
    PostNotFoundError,
    PostValidationError,
)

logger = logging.getLogger(__name__)


def build_error_response(code: str, locale: str | None) -> ErrorResponse:
    """Pair a stable *code* with its message in *locale*."""
    return ErrorResponse(code=str(code), message=resolve_message(code, locale))


def request_locale(request: Request) -> str:
    """Return the locale negotiated from the request's ``Accept-Language``."""
    return negotiate_locale(request.headers.get("accept-language"))


async def post_not_found_handler(request: Request, exc: PostNotFoundError) -> JSONResponse:
    log_event(
        logger, "warning", EVENT_POST_NOT_FOUND,
        operation=f"{request.method} {request.url.path}",
        post_id=exc.post_id,
    )
    body = build_error_response(exc.code, request_locale(request))
    return JSONResponse(status_code=404, content=body.model_dump())


async def post_validation_handler(request: Request, exc: PostValidationError) -> JSONResponse:
    log_event(
        logger, "warning", EVENT_POST_VALIDATION_FAILED,
        operation=f"{request.method} {request.url.path}",
        code=exc.code,
    )
    body = build_error_response(exc.code, request_locale(request))
    return JSONResponse(status_code=400, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to *app*."""
    app.add_exception_handler(PostNotFoundError, post_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(PostValidationError, post_validation_handler)  # type: ignore[arg-type]
