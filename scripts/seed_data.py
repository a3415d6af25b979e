#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample data for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Drop and recreate all tables first
    python scripts/seed_data.py --clear

Everything goes through the services, so seeding uses the same resolution
rules as the API: authors and genres are found or created by name, and
running the script twice does not duplicate them.
"""

import argparse

from catalog.database import SessionLocal, create_tables, drop_tables
from catalog.services import AuthorService, BookService, GenreService

AUTHORS = [
    # (first name, last name, birth year)
    ("Leo", "Tolstoy", 1828),
    ("Fyodor", "Dostoevsky", 1821),
    ("Jane", "Austen", 1775),
    ("Isaac", "Asimov", 1920),
]

BOOKS = [
    {
        "title": "War and Peace",
        "publish_year": 1869,
        "author": ("Leo", "Tolstoy"),
        "genres": "Historical, Drama",
        "feedback": "Long, but worth every page.",
    },
    {
        "title": "Anna Karenina",
        "publish_year": 1878,
        "author": ("Leo", "Tolstoy"),
        "genres": "drama, romance",
    },
    {
        "title": "Crime and Punishment",
        "publish_year": 1866,
        "author": ("Fyodor", "Dostoevsky"),
        "genres": "Psychological, DRAMA",
    },
    {
        "title": "Pride and Prejudice",
        "publish_year": 1813,
        "author": ("Jane", "Austen"),
        "genres": "Romance, Satire",
        "feedback": "Sharp and funny.",
    },
    {
        "title": "Foundation",
        "publish_year": 1951,
        "author": ("Isaac", "Asimov"),
        "genres": "Sci-Fi",
    },
    {
        "title": "I, Robot",
        "publish_year": 1950,
        "author": ("isaac", "asimov"),
        "genres": "sci-fi, Short stories",
    },
]


def seed_database(clear_existing: bool = False) -> None:
    """
    Seed the catalog.

    Args:
        clear_existing: Drop and recreate all tables before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    if clear_existing:
        print("Dropping existing tables...")
        drop_tables()
    create_tables()

    db = SessionLocal()
    try:
        authors = AuthorService(db)
        genres = GenreService(db)
        books = BookService(db, authors=authors, genres=genres)

        for first_name, last_name, birth_year in AUTHORS:
            if not authors.exists(first_name, last_name):
                authors.create(first_name, last_name, birth_year)

        for data in BOOKS:
            first_name, last_name = data["author"]
            books.create(
                title=data["title"],
                publish_year=data["publish_year"],
                author_first_name=first_name,
                author_last_name=last_name,
                genre_input=data["genres"],
                feedback=data.get("feedback"),
            )

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {authors.count()}")
        print(f"  - Genres: {genres.count()}")
        print(f"  - Books: {books.count()}")
    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the book catalog with sample data.")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="drop and recreate all tables before seeding",
    )
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)
