"""
Book Service

Creates and updates books from the fields a catalog form carries: a title,
a publish year, the author's first and last name and a comma-delimited genre
list. The author and the genres are resolved (found or created) on the way,
so callers never deal with author or genre ids when writing a book.

Deleting a book leaves its author and genres in place.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from catalog.exceptions import NotFoundError, ValidationError
from catalog.models import Book
from catalog.services.authors import AuthorService
from catalog.services.genres import GenreService
from catalog.store import BookStore
from catalog.utils import is_blank

logger = logging.getLogger(__name__)

MIN_PUBLISH_YEAR = 1000


def _clean_title(title: str | None) -> str:
    if is_blank(title):
        raise ValidationError("Book title is required")
    return title.strip()


def _check_publish_year(publish_year: int | None) -> None:
    if publish_year is None:
        raise ValidationError("Publish year is required")
    if publish_year < MIN_PUBLISH_YEAR:
        raise ValidationError(f"Publish year must be at least {MIN_PUBLISH_YEAR}")


def _clean_feedback(feedback: str | None) -> str | None:
    return None if is_blank(feedback) else feedback.strip()


class BookService:
    """Book lifecycle on top of the author and genre resolvers."""

    def __init__(
        self,
        db: Session,
        authors: AuthorService | None = None,
        genres: GenreService | None = None,
    ) -> None:
        self.db = db
        self.store = BookStore(db)
        self.authors = authors or AuthorService(db)
        self.genres = genres or GenreService(db)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def get_all(self) -> Sequence[Book]:
        return self.store.all()

    def get(self, book_id: int) -> Book:
        book = self.store.get(book_id)
        if book is None:
            raise NotFoundError("Book", book_id)
        return book

    def count(self) -> int:
        return self.store.count()

    def books_by_author(self, author_id: int) -> Sequence[Book]:
        return self.store.by_author(author_id)

    def count_by_author(self, author_id: int) -> int:
        return self.store.count_by_author(author_id)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(
        self,
        title: str | None,
        publish_year: int | None,
        author_first_name: str | None,
        author_last_name: str | None,
        genre_input: str | None,
        feedback: str | None = None,
    ) -> Book:
        """
        Create a book, resolving its author and genres by name.

        Every input, the genre list included, is validated before anything
        is resolved, so a rejected book never leaves a freshly created
        author or genre behind.

        Raises:
            ValidationError: Title, year, author names or genre list are invalid
        """
        clean_title = _clean_title(title)
        _check_publish_year(publish_year)

        genre_names = self.genres.parse_list(genre_input)

        author = self.authors.find_or_create(author_first_name, author_last_name)
        genres = {self.genres.get_or_create(name) for name in genre_names}

        book = Book(
            title=clean_title,
            publish_year=publish_year,
            feedback=_clean_feedback(feedback),
            author=author,
            genres=genres,
        )
        self.store.add(book)
        self.db.commit()
        self.db.refresh(book)
        logger.info(f"Created book {book.id} ('{clean_title}') by author {author.id}")
        return book

    def update(
        self,
        book_id: int,
        title: str | None,
        publish_year: int | None,
        author_first_name: str | None,
        author_last_name: str | None,
        genre_input: str | None,
        feedback: str | None = None,
    ) -> Book:
        """
        Replace a book's fields, author and genre set.

        Raises:
            NotFoundError: No book has this id
            ValidationError: Title, year, author names or genre list are invalid
        """
        book = self.get(book_id)
        clean_title = _clean_title(title)
        _check_publish_year(publish_year)

        genre_names = self.genres.parse_list(genre_input)

        author = self.authors.find_or_create(author_first_name, author_last_name)
        genres = {self.genres.get_or_create(name) for name in genre_names}

        book.title = clean_title
        book.publish_year = publish_year
        book.feedback = _clean_feedback(feedback)
        book.author = author
        book.genres = genres

        self.db.commit()
        self.db.refresh(book)
        logger.info(f"Updated book {book.id}")
        return book

    def delete(self, book_id: int) -> None:
        """
        Delete a book. Its author and genres are kept.

        Raises:
            NotFoundError: No book has this id
        """
        book = self.get(book_id)
        title = book.title
        self.store.delete(book)
        self.db.commit()
        logger.info(f"Deleted book {book_id} ('{title}')")
