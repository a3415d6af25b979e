"""
Books Router

CRUD and search endpoints for books.

Create and update take the author's names and a comma-separated genre list
instead of ids; the book service finds or creates the author and every
genre before saving the book.
"""

from typing import List

from fastapi import APIRouter, Query, status

from catalog.dependencies import Books, Search
from catalog.schemas import BookCreate, BookResponse, BookUpdate

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.get(
    "/",
    response_model=List[BookResponse],
    summary="List all books",
)
def list_books(books: Books) -> List[BookResponse]:
    """List all books in insertion order."""
    return [BookResponse.model_validate(b) for b in books.get_all()]


@router.get(
    "/search",
    response_model=List[BookResponse],
    summary="Search books",
    description="""
Search books.

**Priority:**
1. `author_id`: that author's books (everything else ignored)
2. `genre_id`: books in that genre
3. `query` with `search_type`: title (default), year, author or feedback

A blank query with no ids lists every book. A non-numeric `year` query
matches nothing.
""",
)
def search_books(
    search: Search,
    search_type: str | None = Query(
        default=None,
        description="title, year, author or feedback",
        examples=["title", "year"],
    ),
    query: str | None = Query(
        default=None,
        max_length=200,
        description="Search text",
        examples=["war", "1869"],
    ),
    author_id: int | None = Query(default=None, description="Only this author's books"),
    genre_id: int | None = Query(default=None, description="Only books in this genre"),
) -> List[BookResponse]:
    """Search books with id filters first, then free text."""
    results = search.search_books(search_type, query, author_id, genre_id)
    return [BookResponse.model_validate(b) for b in results]


@router.get(
    "/by-year",
    response_model=List[BookResponse],
    summary="Books by publish year range",
)
def books_by_year(
    search: Search,
    start_year: int | None = Query(default=None, description="First year (inclusive)"),
    end_year: int | None = Query(default=None, description="Last year (inclusive)"),
) -> List[BookResponse]:
    """Both bounds: inclusive range. Start only: that exact year. Neither: all."""
    results = search.books_by_publish_year_range(start_year, end_year)
    return [BookResponse.model_validate(b) for b in results]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: int, books: Books) -> BookResponse:
    """Get a single book with its author and genres."""
    return BookResponse.model_validate(books.get(book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
)
def create_book(book_data: BookCreate, books: Books) -> BookResponse:
    """Create a book, resolving its author and genres by name."""
    book = books.create(
        title=book_data.title,
        publish_year=book_data.publish_year,
        author_first_name=book_data.author_first_name,
        author_last_name=book_data.author_last_name,
        genre_input=book_data.genre_input,
        feedback=book_data.feedback,
    )
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
)
def update_book(book_id: int, book_data: BookUpdate, books: Books) -> BookResponse:
    """Replace a book's fields, author and genres."""
    book = books.update(
        book_id,
        title=book_data.title,
        publish_year=book_data.publish_year,
        author_first_name=book_data.author_first_name,
        author_last_name=book_data.author_last_name,
        genre_input=book_data.genre_input,
        feedback=book_data.feedback,
    )
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    description="Delete a book. Its author and genres are kept.",
)
def delete_book(book_id: int, books: Books) -> None:
    """Delete a book."""
    books.delete(book_id)
