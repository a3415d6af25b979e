"""
SQLAlchemy Models Package

Model Relationships:
- Author -> Book: One-to-Many (an author owns many books,
                  a book has exactly one author)
- Genre <-> Book: Many-to-Many (a book belongs to a set of genres,
                  a genre is shared by many books)

Importing this package registers every model on Base.metadata.
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog.models.author import Author
from catalog.models.genre import Genre
from catalog.models.book import Book, book_genres

__all__ = [
    "Author",
    "Genre",
    "Book",
    "book_genres",
]
