"""
Author Service

Keeps at most one author per (first name, last name) pair, compared
case-insensitively after trimming.

find_or_create is the path book creation takes: it silently reuses a
matching author. create is the explicit path and refuses duplicates. Neither
runs inside a transaction spanning the lookup and the insert, so two
concurrent callers can still both create the same new author.

update overwrites names without re-checking uniqueness; renaming one author
onto another's name is possible.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from catalog.exceptions import ConflictError, NotFoundError, ValidationError
from catalog.models import Author
from catalog.services.guard import ReferentialGuard
from catalog.store import AuthorStore
from catalog.utils import is_blank

logger = logging.getLogger(__name__)

MIN_BIRTH_YEAR = 1000


def _clean_names(first_name: str | None, last_name: str | None) -> tuple[str, str]:
    if is_blank(first_name) or is_blank(last_name):
        raise ValidationError("Author first name and last name are required")
    return first_name.strip(), last_name.strip()


def _check_birth_year(birth_year: int | None) -> None:
    if birth_year is not None and birth_year < MIN_BIRTH_YEAR:
        raise ValidationError(f"Birth year must be at least {MIN_BIRTH_YEAR}")


class AuthorService:
    """Author resolution, explicit creation, updates and policy-driven deletion."""

    def __init__(self, db: Session, guard: ReferentialGuard | None = None) -> None:
        self.db = db
        self.store = AuthorStore(db)
        self.guard = guard or ReferentialGuard(db)

    def get_all(self) -> Sequence[Author]:
        return self.store.all()

    def get(self, author_id: int) -> Author:
        author = self.store.get(author_id)
        if author is None:
            raise NotFoundError("Author", author_id)
        return author

    def count(self) -> int:
        return self.store.count()

    def exists(self, first_name: str | None, last_name: str | None) -> bool:
        """Whether an author with these names exists (case-insensitive)."""
        if is_blank(first_name) or is_blank(last_name):
            return False
        return self.store.find_by_name(first_name.strip(), last_name.strip()) is not None

    def find_or_create(self, first_name: str | None, last_name: str | None) -> Author:
        """
        Return the author with these names, creating it if needed.

        The lookup ignores case; a new author is stored with the trimmed
        names as given and no birth year.

        Raises:
            ValidationError: Either name is empty after trimming
        """
        first, last = _clean_names(first_name, last_name)

        author = self.store.find_by_name(first, last)
        if author is not None:
            logger.debug(f"Resolved author '{first} {last}' to existing id {author.id}")
            return author

        author = self.store.add(Author(first_name=first, last_name=last))
        self.db.commit()
        self.db.refresh(author)
        logger.info(f"Created author {author.id} ('{first} {last}')")
        return author

    def create(
        self,
        first_name: str | None,
        last_name: str | None,
        birth_year: int | None = None,
    ) -> Author:
        """
        Create an author explicitly.

        Raises:
            ValidationError: A name is blank or the birth year is too small
            ConflictError: An author with these names already exists
        """
        first, last = _clean_names(first_name, last_name)
        _check_birth_year(birth_year)

        if self.store.find_by_name(first, last) is not None:
            raise ConflictError(f'Author "{first} {last}" already exists')

        author = self.store.add(
            Author(first_name=first, last_name=last, birth_year=birth_year)
        )
        self.db.commit()
        self.db.refresh(author)
        logger.info(f"Created author {author.id} ('{first} {last}')")
        return author

    def update(
        self,
        author_id: int,
        first_name: str | None,
        last_name: str | None,
        birth_year: int | None = None,
    ) -> Author:
        """
        Overwrite an author's names and birth year.

        Raises:
            NotFoundError: No author has this id
            ValidationError: A name is blank or the birth year is too small
        """
        author = self.get(author_id)
        first, last = _clean_names(first_name, last_name)
        _check_birth_year(birth_year)

        author.first_name = first
        author.last_name = last
        author.birth_year = birth_year

        self.db.commit()
        self.db.refresh(author)
        logger.info(f"Updated author {author.id}")
        return author

    def delete(self, author_id: int) -> None:
        """
        Delete an author according to the configured delete policy.

        Raises:
            NotFoundError: No author has this id
            ReferentialError: Policy is RESTRICT and the author owns books
        """
        author = self.get(author_id)
        doomed = self.guard.check_author_deletable(author)

        # ORM cascade on Author.books removes the books and their genre links
        self.store.delete(author)
        self.db.commit()
        logger.info(f"Deleted author {author_id} together with {len(doomed)} book(s)")
