"""Shared pytest fixtures for the meetups test suites."""

from collections.abc import Callable
from collections.abc import Generator
from pathlib import Path
import os
import sys

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("MEETUPS_DATABASE_URL", "sqlite://")

from meetups.core.config import get_settings  # noqa: E402
from meetups.db.base import get_db_session  # noqa: E402
from meetups.db.models import Base  # noqa: E402
from meetups.db.repository.users import create_user  # noqa: E402


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Provide an isolated in-memory database with the ORM schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


@pytest.fixture
def db_session(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(session_factory: sessionmaker[Session]) -> Callable[..., int]:
    """Persist a user and return its id."""

    def _make_user(name: str = "Alice", email: str | None = None) -> int:
        with session_factory() as session:
            user = create_user(session, name=name, email=email or f"{name.lower()}@example.com")
            session.commit()
            return user.id

    return _make_user


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header carrying a token signed with the configured secret."""
    settings = get_settings()
    token = jwt.encode({"sub": "tester"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> Generator[TestClient, None, None]:
    """Provide an API test client bound to the in-memory database."""
    from meetups.main import app

    def _get_db_session() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = _get_db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
