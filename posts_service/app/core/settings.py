"""Application settings loaded from environment / .env file.

Config precedence (highest to lowest):
    1. Environment variables
    2. ``.env`` file in project root
    3. Defaults defined in this module

Database credentials are never exposed in ``safe_dump()`` or logs.
"""

from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Project root is three levels up from this file (posts_service/app/core/settings.py)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_DEFAULT_DB_PATH = str(_PROJECT_ROOT / "data" / "app.db")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    api_host: str = "127.0.0.1"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Database: SQLite file by default, override via APP_DB_PATH
    app_db_path: str = _DEFAULT_DB_PATH
    # Full SQLAlchemy URL (e.g. PostgreSQL); takes precedence over app_db_path
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url_override"),
    )

    # Single allowed origin for cross-origin requests
    cors_allowed_origin: str = "http://localhost:3000"

    # Locale used when the caller's Accept-Language has no translation
    default_locale: str = "en"

    @property
    def database_url(self) -> str:
        """SQLAlchemy connection URL, SQLite unless ``DATABASE_URL`` is set."""
        if self.database_url_override:
            return self.database_url_override
        return f"sqlite:///{self.app_db_path}"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def safe_database_url(self) -> str:
        """``database_url`` with any password masked."""
        return make_url(self.database_url).render_as_string(hide_password=True)

    @model_validator(mode="after")
    def _validate_db_path(self) -> "Settings":
        """Ensure the SQLite DB parent directory exists or can be created."""
        if not self.is_sqlite:
            return self
        parent = Path(self.app_db_path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = (
                f"Cannot create database directory '{parent}': {exc}. "
                f"Set APP_DB_PATH to a writable location."
            )
            raise ValueError(msg) from exc
        return self

    def safe_dump(self) -> dict[str, object]:
        """Return settings dict with the DB password masked, safe for logging."""
        return {
            "api_host": self.api_host,
            "api_port": self.api_port,
            "debug": self.debug,
            "log_level": self.log_level,
            "database_url": self.safe_database_url,
            "cors_allowed_origin": self.cors_allowed_origin,
            "default_locale": self.default_locale,
        }


settings = Settings()
