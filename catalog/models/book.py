"""
Book Model

The central model of the catalog.

This file also contains the book_genres association table. It doubles as the
reverse index from a genre to the books that use it: "is this genre used?"
and "which books are in this genre?" are lookups on genre_id here instead of
scans over every book.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.database import Base

if TYPE_CHECKING:
    from catalog.models.author import Author
    from catalog.models.genre import Genre


# =============================================================================
# Association Table
# =============================================================================
# Removing a book drops its memberships. Removing a genre that still has
# memberships is refused by the database as well as by ReferentialGuard.

book_genres = Table(
    "book_genres",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        Integer,
        ForeignKey("genres.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    ),
    comment="Association table linking books to their genres",
)


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - publish_year: Year of publication (required, >= 1000)
    - feedback: Free-text reader feedback

    Relationships:
    - author: Many-to-One, exactly one author per book
    - genres: Many-to-Many, an unordered set of genres

    Example:
        book = Book(
            title="War and Peace",
            publish_year=1869,
            author=tolstoy,
            genres={historical, drama},
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    publish_year: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Year of publication"
    )

    feedback: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Free-text reader feedback"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    # collection_class=set: membership only, no ordering, no duplicates
    genres: Mapped[set["Genre"]] = relationship(
        "Genre",
        secondary=book_genres,
        back_populates="books",
        collection_class=set,
    )

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id}, title='{self.title}', "
            f"publish_year={self.publish_year})"
        )
