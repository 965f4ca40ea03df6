"""Shared fixtures: an isolated in-memory database per test."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from posts_service.app.db.base import Base
from posts_service.app.db.session import get_db
from posts_service.app.main import app
from posts_service.app.models.post_record import PostRecord  # noqa: F401
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture()
def db_engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db(db_engine: Engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=db_engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_engine: Engine) -> Generator[TestClient, None, None]:
    """TestClient whose requests use the in-memory database."""
    factory = sessionmaker(bind=db_engine, expire_on_commit=False)

    def _get_test_db() -> Generator[Session, None, None]:
        session = factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
