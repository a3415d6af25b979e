"""
Search Service

Routes a (search type, query, optional id filters) request to the right
store lookup for each entity kind.

Rules shared by every entry point:
- A blank query with no id filter returns every entity of the kind.
- String matches are case-insensitive substring matches.
- Year modes parse the query as an integer. A query that is not a number
  returns an empty result instead of raising, so a typo in a search box
  never turns into an error page.
- An unknown or missing search type falls back to the kind's default mode.

Results come back in store order (insertion order).
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

from sqlalchemy.orm import Session

from catalog.models import Author, Book, Genre
from catalog.store import AuthorStore, BookStore, GenreStore
from catalog.utils import is_blank, parse_int

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class AuthorSearchType(str, Enum):
    """Author search modes. LAST_NAME is the default."""

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    BIRTH_YEAR = "birthYear"
    FULL_NAME = "fullName"

    @classmethod
    def parse(cls, value: str | None) -> "AuthorSearchType":
        try:
            return cls(value)
        except ValueError:
            return cls.LAST_NAME


class BookSearchType(str, Enum):
    """Free-text book search modes. TITLE is the default."""

    TITLE = "title"
    YEAR = "year"
    AUTHOR = "author"
    FEEDBACK = "feedback"

    @classmethod
    def parse(cls, value: str | None) -> "BookSearchType":
        try:
            return cls(value)
        except ValueError:
            return cls.TITLE


def _by_year(lookup: Callable[[int], Sequence[EntityT]]) -> Callable[[str], Sequence[EntityT]]:
    """Wrap a numeric lookup so an unparseable query yields no results."""

    def search(query: str) -> Sequence[EntityT]:
        year = parse_int(query)
        if year is None:
            return []
        return lookup(year)

    return search


def _year_range(
    start_year: int | None,
    end_year: int | None,
    exact: Callable[[int], Sequence[EntityT]],
    between: Callable[[int, int], Sequence[EntityT]],
    everything: Callable[[], Sequence[EntityT]],
) -> list[EntityT]:
    if start_year is not None and end_year is not None:
        return list(between(start_year, end_year))
    if start_year is not None:
        return list(exact(start_year))
    return list(everything())


class SearchDispatcher:
    """
    Single search entry point per entity kind.

    Each search type maps to a store lookup through a table keyed by the
    search-type enum.

    Usage:
        dispatcher = SearchDispatcher(db)
        dispatcher.search_authors("birthYear", "1828")
        dispatcher.search_books("title", "war")
        dispatcher.search_books(None, None, genre_id=3)
        dispatcher.search_genres("dram")
    """

    def __init__(self, db: Session) -> None:
        self.authors = AuthorStore(db)
        self.books = BookStore(db)
        self.genres = GenreStore(db)

        self._author_lookups: dict[AuthorSearchType, Callable[[str], Sequence[Author]]] = {
            AuthorSearchType.FIRST_NAME: self.authors.first_name_contains,
            AuthorSearchType.LAST_NAME: self.authors.last_name_contains,
            AuthorSearchType.BIRTH_YEAR: _by_year(self.authors.by_birth_year),
            AuthorSearchType.FULL_NAME: self.authors.either_name_contains,
        }
        self._book_lookups: dict[BookSearchType, Callable[[str], Sequence[Book]]] = {
            BookSearchType.TITLE: self.books.title_contains,
            BookSearchType.YEAR: _by_year(self.books.by_publish_year),
            BookSearchType.AUTHOR: self.books.author_first_name_contains,
            BookSearchType.FEEDBACK: self.books.feedback_contains,
        }

    def search_authors(self, search_type: str | None, query: str | None) -> list[Author]:
        if is_blank(query):
            return list(self.authors.all())

        mode = AuthorSearchType.parse(search_type)
        logger.debug(f"Author search: mode={mode.value} query={query!r}")
        return list(self._author_lookups[mode](query.strip()))

    def search_books(
        self,
        search_type: str | None,
        query: str | None,
        author_id: int | None = None,
        genre_id: int | None = None,
    ) -> list[Book]:
        """
        Search books.

        Id filters take priority over free text, in this order:
        1. author_id: exactly that author's books; query, type and genre_id
           are ignored
        2. genre_id: books whose genre set contains the genre
        3. free text over title (default), year, author first name or feedback
        """
        if author_id is not None:
            logger.debug(f"Book search: author_id={author_id}")
            return list(self.books.by_author(author_id))
        if genre_id is not None:
            logger.debug(f"Book search: genre_id={genre_id}")
            return list(self.books.in_genre(genre_id))
        if is_blank(query):
            return list(self.books.all())

        mode = BookSearchType.parse(search_type)
        logger.debug(f"Book search: mode={mode.value} query={query!r}")
        return list(self._book_lookups[mode](query.strip()))

    def search_genres(self, query: str | None) -> list[Genre]:
        if is_blank(query):
            return list(self.genres.all())
        return list(self.genres.name_contains(query.strip()))

    # -------------------------------------------------------------------------
    # Year ranges
    # -------------------------------------------------------------------------
    def authors_by_birth_year_range(
        self,
        start_year: int | None,
        end_year: int | None,
    ) -> list[Author]:
        """Inclusive range when both bounds are given, exact year for start only, else all."""
        return _year_range(
            start_year,
            end_year,
            self.authors.by_birth_year,
            self.authors.birth_year_between,
            self.authors.all,
        )

    def books_by_publish_year_range(
        self,
        start_year: int | None,
        end_year: int | None,
    ) -> list[Book]:
        """Inclusive range when both bounds are given, exact year for start only, else all."""
        return _year_range(
            start_year,
            end_year,
            self.books.by_publish_year,
            self.books.publish_year_between,
            self.books.all,
        )
