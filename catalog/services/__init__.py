"""
Services Package

Business logic of the catalog, separate from HTTP handling (routers) and
from raw queries (catalog.store):

- authors.py: author find-or-create, explicit creation, update, deletion
- genres.py: genre name normalization and resolution, guarded deletion
- books.py: book lifecycle, resolving authors and genres by name
- guard.py: referential rules checked before destructive operations
- search.py: search dispatch per entity kind
"""

from catalog.services.authors import AuthorService
from catalog.services.books import BookService
from catalog.services.genres import GenreService
from catalog.services.guard import ReferentialGuard
from catalog.services.search import AuthorSearchType, BookSearchType, SearchDispatcher

__all__ = [
    "AuthorSearchType",
    "AuthorService",
    "BookSearchType",
    "BookService",
    "GenreService",
    "ReferentialGuard",
    "SearchDispatcher",
]
