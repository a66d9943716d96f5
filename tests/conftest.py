"""
pytest Fixtures for Bookstore API Tests

This file contains shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (SQLite in-memory, created once)
- function scope for sessions (each test runs inside a transaction that is
  rolled back afterwards, so every test starts with empty tables and ids
  starting at 1)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app: bookstore_api.database
# builds its engine at import time.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore_api.database import (
    create_tables,
    drop_tables,
    enable_sqlite_foreign_keys,
    get_db,
)
from bookstore_api.main import app
from bookstore_api.models import Author, Book


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would disappear between connections.
    Foreign keys are enabled so the ON DELETE CASCADE rule is enforced.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    create_tables(engine)

    yield engine

    drop_tables(engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection with an open transaction that is
    rolled back after the test; commits made by the code under test do not
    end that outer transaction.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    The get_db dependency is overridden to hand out the test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        name="Jane Austen",
        bio="English novelist known for her social commentary.",
        birthdate=date(1775, 12, 16),
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    """Create a second author for filter and reassignment tests."""
    author = Author(
        name="George Orwell",
        birthdate=date(1903, 6, 25),
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book written by sample_author."""
    book = Book(
        title="Pride and Prejudice",
        description="A romantic novel of manners.",
        published_date=date(1813, 1, 28),
        author_id=sample_author.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def library(
    db_session: Session,
    sample_author: Author,
    second_author: Author,
) -> list[Book]:
    """Create books for both authors, interleaved by insertion order."""
    books = [
        Book(title="Sense and Sensibility", published_date=date(1811, 10, 30), author_id=sample_author.id),
        Book(title="1984", published_date=date(1949, 6, 8), author_id=second_author.id),
        Book(title="Emma", published_date=date(1815, 12, 23), author_id=sample_author.id),
        Book(title="Animal Farm", published_date=date(1945, 8, 17), author_id=second_author.id),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books
