"""Cross-origin policy applied uniformly to every route."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from posts_service.app.core.settings import settings


def configure_cors(app: FastAPI, allowed_origin: str | None = None) -> None:
    """Allow one configured origin with any method and header, credentials on."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[allowed_origin or settings.cors_allowed_origin],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )
