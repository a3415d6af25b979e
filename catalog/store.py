"""
Catalog Store

Thin query layer over the SQLAlchemy session. Each store wraps one entity
kind and exposes exactly the lookups the resolvers and the search dispatcher
need:

- create / fetch-by-id / fetch-all / delete / count
- exact case-insensitive match on one or two columns
- case-insensitive substring match
- exact and ranged numeric match
- reverse genre membership through the book_genres table

Stores never commit. The service that owns the logical operation decides
when the unit of work is finished.

Every list lookup is ordered by primary key, which is insertion order.
"""

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import ColumnElement, exists, func, or_, select
from sqlalchemy.orm import Session, selectinload

from catalog.database import Base
from catalog.models import Author, Book, Genre, book_genres

ModelT = TypeVar("ModelT", bound=Base)


def _icontains(column, text: str) -> ColumnElement[bool]:
    """
    Case-insensitive substring match; % and _ in `text` match literally.

    `text` is folded with str.lower, which is also what lower() runs on
    SQLite connections (see catalog.database).
    """
    return func.lower(column).contains(text.lower(), autoescape=True)


class EntityStore(Generic[ModelT]):
    """CRUD operations shared by every entity kind."""

    model: type[ModelT]

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, entity_id: int) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def all(self) -> Sequence[ModelT]:
        return self._list()

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model)
        return self.db.execute(stmt).scalar() or 0

    def add(self, entity: ModelT) -> ModelT:
        """Stage a new entity and flush so the database assigns its id."""
        self.db.add(entity)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()

    def _list(self, *conditions: ColumnElement[bool]) -> Sequence[ModelT]:
        stmt = select(self.model).where(*conditions).order_by(self.model.id)
        return self.db.execute(stmt).scalars().all()


class AuthorStore(EntityStore[Author]):
    model = Author

    def find_by_name(self, first_name: str, last_name: str) -> Author | None:
        """Exact match on both names, ignoring case."""
        stmt = (
            select(Author)
            .where(
                func.lower(Author.first_name) == func.lower(first_name),
                func.lower(Author.last_name) == func.lower(last_name),
            )
            .order_by(Author.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def first_name_contains(self, text: str) -> Sequence[Author]:
        return self._list(_icontains(Author.first_name, text))

    def last_name_contains(self, text: str) -> Sequence[Author]:
        return self._list(_icontains(Author.last_name, text))

    def either_name_contains(self, text: str) -> Sequence[Author]:
        return self._list(
            or_(
                _icontains(Author.first_name, text),
                _icontains(Author.last_name, text),
            )
        )

    def by_birth_year(self, year: int) -> Sequence[Author]:
        return self._list(Author.birth_year == year)

    def birth_year_between(self, start_year: int, end_year: int) -> Sequence[Author]:
        return self._list(Author.birth_year.between(start_year, end_year))


class GenreStore(EntityStore[Genre]):
    model = Genre

    def find_by_name(self, canonical_name: str) -> Genre | None:
        """
        Look a genre up by canonical name.

        Stored names are canonical, so this exact match is the
        case-insensitive lookup.
        """
        stmt = select(Genre).where(Genre.name == canonical_name)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists_by_name(self, canonical_name: str) -> bool:
        stmt = select(exists().where(Genre.name == canonical_name))
        return bool(self.db.execute(stmt).scalar())

    def name_contains(self, text: str) -> Sequence[Genre]:
        return self._list(_icontains(Genre.name, text))

    def is_referenced(self, genre_id: int) -> bool:
        """True if at least one book lists this genre."""
        stmt = select(exists().where(book_genres.c.genre_id == genre_id))
        return bool(self.db.execute(stmt).scalar())


class BookStore(EntityStore[Book]):
    model = Book

    def _list(self, *conditions: ColumnElement[bool]) -> Sequence[Book]:
        # Callers almost always render author and genres next to the book
        stmt = (
            select(Book)
            .where(*conditions)
            .options(selectinload(Book.author), selectinload(Book.genres))
            .order_by(Book.id)
        )
        return self.db.execute(stmt).scalars().all()

    def by_author(self, author_id: int) -> Sequence[Book]:
        return self._list(Book.author_id == author_id)

    def count_by_author(self, author_id: int) -> int:
        stmt = select(func.count(Book.id)).where(Book.author_id == author_id)
        return self.db.execute(stmt).scalar() or 0

    def in_genre(self, genre_id: int) -> Sequence[Book]:
        genre_book_ids = (
            select(book_genres.c.book_id)
            .where(book_genres.c.genre_id == genre_id)
        )
        return self._list(Book.id.in_(genre_book_ids))

    def title_contains(self, text: str) -> Sequence[Book]:
        return self._list(_icontains(Book.title, text))

    def feedback_contains(self, text: str) -> Sequence[Book]:
        return self._list(_icontains(Book.feedback, text))

    def author_first_name_contains(self, text: str) -> Sequence[Book]:
        author_ids = select(Author.id).where(_icontains(Author.first_name, text))
        return self._list(Book.author_id.in_(author_ids))

    def by_publish_year(self, year: int) -> Sequence[Book]:
        return self._list(Book.publish_year == year)

    def publish_year_between(self, start_year: int, end_year: int) -> Sequence[Book]:
        return self._list(Book.publish_year.between(start_year, end_year))
