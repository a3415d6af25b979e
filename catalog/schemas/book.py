"""
Book Pydantic Schemas

Books are written with names, not ids: the body carries the author's first
and last name and a comma-delimited genre list, and BookService resolves
them to stored entities. Responses nest the resolved author and genres.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.schemas.author import AuthorResponse
from catalog.schemas.genre import GenreResponse


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["War and Peace", "Pride and Prejudice"],
    )

    publish_year: int = Field(
        ...,
        ge=1000,
        description="Year of publication",
        examples=[1869, 1813],
    )

    feedback: str | None = Field(
        default=None,
        max_length=10000,
        description="Free-text reader feedback",
        examples=["Long, but worth every page."],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "War and Peace",
        "publish_year": 1869,
        "author_first_name": "Leo",
        "author_last_name": "Tolstoy",
        "genre_input": "Historical, drama"
    }
    """

    author_first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="First name of the author (found or created)",
    )

    author_last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Last name of the author (found or created)",
    )

    genre_input: str = Field(
        ...,
        min_length=1,
        description="Comma-separated genre names (each found or created)",
        examples=["Historical, drama"],
    )


class BookUpdate(BookCreate):
    """
    Schema for updating a book.

    Same shape as BookCreate: the author and the whole genre set are
    re-resolved on every update.
    """
    pass


class BookResponse(BookBase):
    """Schema for book responses, with the author and genres nested."""

    id: int = Field(..., description="Unique identifier")
    author: AuthorResponse = Field(..., description="The book's author")
    genres: list[GenreResponse] = Field(
        default_factory=list,
        description="Genres of the book, sorted by name",
    )
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(from_attributes=True)

    @field_validator("genres", mode="before")
    @classmethod
    def sort_genres(cls, v):
        """The ORM hands over a set; give clients a stable order."""
        if isinstance(v, (set, frozenset)):
            return sorted(v, key=lambda genre: genre.name)
        return v
