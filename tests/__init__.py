"""
Test Suite for the Book Catalog

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_text_utils.py: Genre name normalization and lenient integer parsing
- test_author_service.py / test_genre_service.py / test_book_service.py:
  resolvers and book lifecycle against the database
- test_referential_guard.py: delete rules for genres and authors
- test_search.py: search dispatch for every entity kind
- test_authors.py / test_genres.py / test_books.py: /api/v1 endpoints

Running Tests:
    pytest
    pytest tests/test_search.py
    pytest -v
"""
