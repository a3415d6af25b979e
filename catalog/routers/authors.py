"""
Authors Router

CRUD and search endpoints for authors.

Catalog errors raised by the services (NotFoundError, ConflictError, ...)
are turned into HTTP responses by the exception handlers in catalog.main,
so routes here only translate between schemas and service calls.
"""

from typing import List

from fastapi import APIRouter, Query, status

from catalog.dependencies import Authors, Books, Search
from catalog.schemas import (
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
    BookResponse,
)

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=List[AuthorResponse],
    summary="List all authors",
)
def list_authors(authors: Authors) -> List[AuthorResponse]:
    """List all authors in insertion order."""
    return [AuthorResponse.model_validate(a) for a in authors.get_all()]


@router.get(
    "/search",
    response_model=List[AuthorResponse],
    summary="Search authors",
    description=(
        "Search by firstName, lastName (default), birthYear or fullName. "
        "A blank query lists every author; a non-numeric birthYear query "
        "matches nothing."
    ),
)
def search_authors(
    search: Search,
    search_type: str | None = Query(
        default=None,
        description="firstName, lastName, birthYear or fullName",
        examples=["lastName", "birthYear"],
    ),
    query: str | None = Query(
        default=None,
        max_length=200,
        description="Search text",
        examples=["tolst", "1828"],
    ),
) -> List[AuthorResponse]:
    """Search authors by one of the supported modes."""
    results = search.search_authors(search_type, query)
    return [AuthorResponse.model_validate(a) for a in results]


@router.get(
    "/by-birth-year",
    response_model=List[AuthorResponse],
    summary="Authors by birth year range",
)
def authors_by_birth_year(
    search: Search,
    start_year: int | None = Query(default=None, description="First year (inclusive)"),
    end_year: int | None = Query(default=None, description="Last year (inclusive)"),
) -> List[AuthorResponse]:
    """Both bounds: inclusive range. Start only: that exact year. Neither: all."""
    results = search.authors_by_birth_year_range(start_year, end_year)
    return [AuthorResponse.model_validate(a) for a in results]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
def get_author(author_id: int, authors: Authors) -> AuthorResponse:
    """Get a single author by ID."""
    return AuthorResponse.model_validate(authors.get(author_id))


@router.get(
    "/{author_id}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
)
def get_author_books(
    author_id: int,
    authors: Authors,
    books: Books,
) -> List[BookResponse]:
    """Get all books owned by a specific author."""
    authors.get(author_id)
    return [BookResponse.model_validate(b) for b in books.books_by_author(author_id)]


@router.post(
    "/",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create an author. Fails with 409 if one with the same names exists (ignoring case).",
)
def create_author(author_data: AuthorCreate, authors: Authors) -> AuthorResponse:
    """Create a new author."""
    author = authors.create(
        author_data.first_name,
        author_data.last_name,
        author_data.birth_year,
    )
    return AuthorResponse.model_validate(author)


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Update an author",
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    authors: Authors,
) -> AuthorResponse:
    """Overwrite an author's names and birth year."""
    author = authors.update(
        author_id,
        author_data.first_name,
        author_data.last_name,
        author_data.birth_year,
    )
    return AuthorResponse.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description=(
        "Delete an author. Under the cascade policy the author's books are "
        "deleted too; under the restrict policy an author with books gets a 409."
    ),
)
def delete_author(author_id: int, authors: Authors) -> None:
    """Delete an author."""
    authors.delete(author_id)
