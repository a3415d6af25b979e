"""
Pydantic Schemas Package

Request/response models for the catalog API, kept apart from the
SQLAlchemy models so the API shape can differ from the table shape.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields required when creating a record
- XxxUpdate: Fields accepted when updating
- XxxResponse: Fields returned in API responses
"""

from catalog.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
)
from catalog.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from catalog.schemas.genre import (
    GenreBase,
    GenreCreate,
    GenreResponse,
    GenreUpdate,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    # Genre schemas
    "GenreBase",
    "GenreCreate",
    "GenreUpdate",
    "GenreResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
]
