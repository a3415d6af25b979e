"""
Referential Guard

Decides whether an entity may be removed given the references other
entities hold to it. Deletion flows in the genre and author services consult
the guard before touching the store.

Rules:
- Genre: deletable only while no book lists it.
- Author: governed by the configured AuthorDeletePolicy. Under CASCADE the
  author's books go with it; under RESTRICT the delete is refused while the
  author still owns books.
"""

import logging

from sqlalchemy.orm import Session

from catalog.config import AuthorDeletePolicy, get_settings
from catalog.exceptions import ReferentialError
from catalog.models import Author, Book, Genre
from catalog.store import BookStore, GenreStore

logger = logging.getLogger(__name__)


class ReferentialGuard:
    """Stateless checks run before destructive operations."""

    def __init__(
        self,
        db: Session,
        author_delete_policy: AuthorDeletePolicy | None = None,
    ) -> None:
        self.genres = GenreStore(db)
        self.books = BookStore(db)
        if author_delete_policy is None:
            author_delete_policy = get_settings().author_delete_policy
        self.author_delete_policy = author_delete_policy

    # -------------------------------------------------------------------------
    # Genres
    # -------------------------------------------------------------------------
    def can_delete_genre(self, genre_id: int) -> bool:
        return not self.genres.is_referenced(genre_id)

    def check_genre_deletable(self, genre: Genre) -> None:
        """
        Raise if any book still lists the genre.

        Raises:
            ReferentialError: The genre is in use
        """
        if not self.can_delete_genre(genre.id):
            logger.warning(f"Refusing to delete genre {genre.id}: still used by books")
            raise ReferentialError(
                f"Genre '{genre.name}' is used by books and cannot be deleted"
            )

    # -------------------------------------------------------------------------
    # Authors
    # -------------------------------------------------------------------------
    def check_author_deletable(self, author: Author) -> list[Book]:
        """
        Apply the author delete policy.

        Returns:
            The books that deleting the author will also remove (empty under
            RESTRICT, since RESTRICT only lets book-less authors through)

        Raises:
            ReferentialError: Policy is RESTRICT and the author owns books
        """
        books = list(self.books.by_author(author.id))
        if books and self.author_delete_policy is AuthorDeletePolicy.RESTRICT:
            logger.warning(
                f"Refusing to delete author {author.id}: owns {len(books)} book(s)"
            )
            raise ReferentialError(
                f"Author '{author.full_name}' owns {len(books)} book(s) "
                "and cannot be deleted"
            )
        return books
