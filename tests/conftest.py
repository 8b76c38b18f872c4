"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from quotebook import models  # noqa: E402
from quotebook.database import Base, configure_sqlite_engine, get_db  # noqa: E402
from quotebook.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from quotebook.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; one shared connection so every session sees the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
configure_sqlite_engine(test_engine)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the user the default client authenticates as."""
    user = models.User(email="reader@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    """Create a second user owning nothing of test_user's."""
    user = models.User(email="someone.else@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_auth_headers(other_user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client without credentials."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(anonymous_client: TestClient, test_user: models.User) -> TestClient:
    """Create a test client authenticated as test_user."""
    anonymous_client.headers.update(
        {"Authorization": f"Bearer {create_access_token(test_user.id)}"}
    )
    return anonymous_client


BOOK_INFO: dict[str, Any] = {
    "title": "The Left Hand of Darkness",
    "isbn": "0441478123 9780441478125",
    "authors": ["Ursula K. Le Guin"],
    "translators": [],
    "publisher": "Ace Books",
    "synopsis": "An envoy visits the planet Gethen.",
    "cover_url": "https://covers.example.com/lhod.jpg",
    "published_date": "1969-03-01T00:00:00.000+09:00",
}


BookInfoFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def make_book_info() -> BookInfoFactory:
    """Build catalog payloads for POST /books with some fields replaced."""

    def factory(**overrides: Any) -> dict[str, Any]:
        return {**BOOK_INFO, **overrides}

    return factory


@pytest.fixture
def library_entry(client: TestClient) -> dict[str, Any]:
    """Add BOOK_INFO to test_user's library and return the created entry."""
    response = client.post("/api/v1/books", json={"book_info": BOOK_INFO})
    assert response.status_code == 201
    return response.json()
