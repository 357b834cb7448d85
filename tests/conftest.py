"""
pytest Fixtures for BookStore API Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (SQLite in-memory, created once)
- function scope for sessions (each test runs in a transaction that is
  rolled back afterwards)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///./test_bookstore.db"
os.environ["AUTO_CREATE_TABLES"] = "false"

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore_api.database import Base, get_db
from bookstore_api.main import app
from bookstore_api.models import Author, Book, User, UserRole
from bookstore_api.services.logger import LoggerService, get_logger_service
from bookstore_api.services.security import hash_password


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would vanish between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection whose outer transaction is
    rolled back after the test, so commits made by repositories never
    leak between tests.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def log() -> LoggerService:
    """The process logger handle, as injected into repositories."""
    return get_logger_service()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The get_db dependency is overridden so every repository built for a
    request uses the test session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unsafe_client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client that returns 500 responses instead of re-raising.

    Starlette re-raises unhandled exceptions after the catch-all handler
    has produced its response; this client lets tests inspect it.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        first_name="George",
        last_name="Orwell",
        bio="English novelist and essayist, journalist and critic.",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(
        title="1984",
        year=1949,
        isbn="9780451524935",
        summary="A dystopian novel set in a totalitarian society.",
        image="1984-cover.png",
        price=Decimal("12.99"),
        author_id=sample_author.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a registered customer account."""
    user = User(
        email="customer@bookstore.com",
        hashed_password=hash_password("P@ssword1"),
        role=UserRole.CUSTOMER.value,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
