"""
pytest Fixtures for Book Catalog Tests

Shared fixtures used across all test files.

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)

Every test runs inside an outer transaction that is rolled back afterwards,
so the services can commit freely without leaking rows into other tests.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTHOR_DELETE_POLICY"] = "cascade"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.database import Base, get_db
from catalog.main import app
from catalog.models import Author, Book, Genre
from catalog.services import (
    AuthorService,
    BookService,
    GenreService,
    SearchDispatcher,
)

# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
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

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
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

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def author_service(db_session: Session) -> AuthorService:
    return AuthorService(db_session)


@pytest.fixture
def genre_service(db_session: Session) -> GenreService:
    return GenreService(db_session)


@pytest.fixture
def book_service(db_session: Session) -> BookService:
    return BookService(db_session)


@pytest.fixture
def dispatcher(db_session: Session) -> SearchDispatcher:
    return SearchDispatcher(db_session)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
# Created straight through the ORM so the service under test is not also
# the one building its own fixtures.

@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(first_name="Leo", last_name="Tolstoy", birth_year=1828)
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_genre(db_session: Session) -> Genre:
    """Create a sample genre for testing."""
    genre = Genre(name="Drama")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def unused_genre(db_session: Session) -> Genre:
    """A genre no book refers to."""
    genre = Genre(name="Poetry")
    db_session.add(genre)
    db_session.commit()
    db_session.refresh(genre)
    return genre


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_author: Author,
    sample_genre: Genre,
) -> Book:
    """Create a sample book with an author and one genre."""
    book = Book(
        title="War and Peace",
        publish_year=1869,
        feedback="Long, but worth every page.",
        author=sample_author,
        genres={sample_genre},
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def library(db_session: Session) -> dict:
    """
    A small catalog for search tests.

    Authors: Leo Tolstoy (1828), Fyodor Dostoevsky (1821),
             Jane Austen (1775), Isaac Asimov (1920)
    Genres:  Drama, Romance, Sci-fi
    """
    tolstoy = Author(first_name="Leo", last_name="Tolstoy", birth_year=1828)
    dostoevsky = Author(first_name="Fyodor", last_name="Dostoevsky", birth_year=1821)
    austen = Author(first_name="Jane", last_name="Austen", birth_year=1775)
    asimov = Author(first_name="Isaac", last_name="Asimov", birth_year=1920)

    drama = Genre(name="Drama")
    romance = Genre(name="Romance")
    scifi = Genre(name="Sci-fi")

    books = {
        "war_and_peace": Book(
            title="War and Peace", publish_year=1869, author=tolstoy,
            genres={drama}, feedback="An epic about war.",
        ),
        "anna_karenina": Book(
            title="Anna Karenina", publish_year=1878, author=tolstoy,
            genres={drama, romance},
        ),
        "crime": Book(
            title="Crime and Punishment", publish_year=1866, author=dostoevsky,
            genres={drama}, feedback="Dark and gripping.",
        ),
        "pride": Book(
            title="Pride and Prejudice", publish_year=1813, author=austen,
            genres={romance},
        ),
        "foundation": Book(
            title="Foundation", publish_year=1951, author=asimov,
            genres={scifi}, feedback="The war for the future of 100% of humanity.",
        ),
    }

    db_session.add_all([tolstoy, dostoevsky, austen, asimov, drama, romance, scifi])
    db_session.add_all(books.values())
    db_session.commit()

    return {
        "authors": {
            "tolstoy": tolstoy,
            "dostoevsky": dostoevsky,
            "austen": austen,
            "asimov": asimov,
        },
        "genres": {"drama": drama, "romance": romance, "scifi": scifi},
        "books": books,
    }
