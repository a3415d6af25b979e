"""
Genre Service

Resolves genre names to stored genres and keeps at most one genre per
canonical name.

Canonical form: trimmed, lower-cased, first character upper-cased.
"sci-fi", " Sci-Fi " and "SCI-FI" all resolve to the single genre "Sci-fi".

Creation is read-then-write with no enclosing transaction. The unique
constraint on genres.name catches the race where two callers insert the
same new name. get_or_create answers a lost race with the winner's row;
save and update report it as a ConflictError.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.exceptions import ConflictError, NotFoundError, ValidationError
from catalog.models import Genre
from catalog.models.genre import NAME_MAX_LENGTH
from catalog.services.guard import ReferentialGuard
from catalog.store import GenreStore
from catalog.utils import canonical_genre_name, is_blank, split_genre_input

logger = logging.getLogger(__name__)


def _canonical_name(name: str | None) -> str:
    """Canonical form of a user-supplied genre name, validated for storage."""
    if is_blank(name):
        raise ValidationError("Genre name cannot be empty")
    canonical = canonical_genre_name(name)
    if len(canonical) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Genre name '{canonical[:20]}...' is longer than {NAME_MAX_LENGTH} characters"
        )
    return canonical


class GenreService:
    """Genre resolution, direct creation, renaming and guarded deletion."""

    def __init__(self, db: Session, guard: ReferentialGuard | None = None) -> None:
        self.db = db
        self.store = GenreStore(db)
        self.guard = guard or ReferentialGuard(db)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def get_all(self) -> Sequence[Genre]:
        return self.store.all()

    def get(self, genre_id: int) -> Genre:
        genre = self.store.get(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre

    def count(self) -> int:
        return self.store.count()

    def find_by_name(self, name: str | None) -> Genre | None:
        if is_blank(name):
            return None
        return self.store.find_by_name(canonical_genre_name(name))

    def exists(self, name: str | None) -> bool:
        if is_blank(name):
            return False
        return self.store.exists_by_name(canonical_genre_name(name))

    def is_used(self, genre_id: int) -> bool:
        """True iff at least one book references the genre."""
        return self.store.is_referenced(genre_id)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------
    def get_or_create(self, name: str | None) -> Genre:
        """
        Return the genre with this canonical name, creating it if needed.

        Args:
            name: Raw genre name in any case, with or without padding

        Returns:
            The existing or newly stored genre (stored under its canonical name)

        Raises:
            ValidationError: The name is empty, whitespace or too long
        """
        canonical = _canonical_name(name)
        genre = self.store.find_by_name(canonical)
        if genre is not None:
            logger.debug(f"Resolved genre '{name}' to existing id {genre.id}")
            return genre

        try:
            return self._insert(canonical)
        except IntegrityError:
            # Another caller stored the same name between our read and write
            self.db.rollback()
            genre = self.store.find_by_name(canonical)
            if genre is None:
                raise
            logger.info(f"Lost insert race for genre '{canonical}', using id {genre.id}")
            return genre

    def parse_list(self, text: str | None) -> list[str]:
        """
        Validate a comma-delimited genre list without touching the database.

        Returns:
            The canonical names, duplicates removed, in input order

        Raises:
            ValidationError: The input is blank, has no usable names, or a
                name is too long
        """
        if is_blank(text):
            raise ValidationError("No genres specified")

        names = split_genre_input(text)
        if not names:
            raise ValidationError(f"Could not extract any genre from '{text}'")

        return list(dict.fromkeys(_canonical_name(name) for name in names))

    def resolve_list(self, text: str | None) -> set[Genre]:
        """
        Resolve a comma-delimited genre list into a set of stored genres.

        Empty segments are skipped and repeated names collapse, so
        "Sci-Fi, drama,, Drama" yields two genres: "Sci-fi" and "Drama".

        Raises:
            ValidationError: The input is blank or contains no usable names
        """
        return {self.get_or_create(name) for name in self.parse_list(text)}

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def save(self, name: str | None) -> Genre:
        """
        Create a genre explicitly.

        Unlike get_or_create, an existing genre with the same canonical name
        is an error rather than a match.

        Raises:
            ValidationError: The name is empty, whitespace or too long
            ConflictError: A genre with this canonical name already exists
        """
        canonical = _canonical_name(name)
        if self.store.exists_by_name(canonical):
            raise ConflictError(f"Genre '{canonical}' already exists")

        try:
            return self._insert(canonical)
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(f"Genre '{canonical}' already exists") from exc

    def update(self, genre_id: int, name: str | None) -> Genre:
        """
        Rename a genre.

        Raises:
            ValidationError: The new name is empty, whitespace or too long
            NotFoundError: No genre has this id
            ConflictError: Another genre already has the new canonical name
        """
        canonical = _canonical_name(name)
        genre = self.get(genre_id)
        if canonical != genre.name and self.store.exists_by_name(canonical):
            raise ConflictError(f"Genre '{canonical}' already exists")

        genre.name = canonical
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError(f"Genre '{canonical}' already exists") from exc
        self.db.refresh(genre)
        logger.info(f"Renamed genre {genre.id} to '{canonical}'")
        return genre

    def delete(self, genre_id: int) -> None:
        """
        Delete a genre that no book uses.

        Raises:
            NotFoundError: No genre has this id
            ReferentialError: At least one book lists the genre
        """
        genre = self.get(genre_id)
        self.guard.check_genre_deletable(genre)
        name = genre.name
        self.store.delete(genre)
        self.db.commit()
        logger.info(f"Deleted genre {genre_id} ('{name}')")

    def _insert(self, canonical: str) -> Genre:
        """Store a new genre; IntegrityError propagates to the caller."""
        genre = self.store.add(Genre(name=canonical))
        self.db.commit()
        self.db.refresh(genre)
        logger.info(f"Created genre {genre.id} ('{canonical}')")
        return genre
