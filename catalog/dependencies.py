"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Every service is built per request on top of the request's database
session, so one request is one unit of work.

Instead of writing:
    def list_books(db: Session = Depends(get_db)):
        service = BookService(db)

routes write:
    def list_books(books: Books):
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.database import get_db
from catalog.services import (
    AuthorService,
    BookService,
    GenreService,
    SearchDispatcher,
)

DbSession = Annotated[Session, Depends(get_db)]


def get_author_service(db: DbSession) -> AuthorService:
    return AuthorService(db)


def get_genre_service(db: DbSession) -> GenreService:
    return GenreService(db)


def get_book_service(db: DbSession) -> BookService:
    return BookService(db)


def get_search_dispatcher(db: DbSession) -> SearchDispatcher:
    return SearchDispatcher(db)


Authors = Annotated[AuthorService, Depends(get_author_service)]
Genres = Annotated[GenreService, Depends(get_genre_service)]
Books = Annotated[BookService, Depends(get_book_service)]
Search = Annotated[SearchDispatcher, Depends(get_search_dispatcher)]
