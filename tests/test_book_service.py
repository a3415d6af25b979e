"""
Tests for BookService

Books are written with author names and a genre list; the service resolves
both before storing the book.
"""

import pytest

from catalog.exceptions import NotFoundError, ReferentialError, ValidationError


class TestCreateBook:
    def test_creates_author_and_genres(self, book_service):
        book = book_service.create(
            title="  War and Peace ",
            publish_year=1869,
            author_first_name="Leo",
            author_last_name="Tolstoy",
            genre_input="Historical, drama",
            feedback="Worth it.",
        )

        assert book.id is not None
        assert book.title == "War and Peace"
        assert book.author.full_name == "Leo Tolstoy"
        assert {g.name for g in book.genres} == {"Historical", "Drama"}
        assert book.feedback == "Worth it."

    def test_reuses_existing_author_and_genre(
        self, book_service, sample_author, sample_genre
    ):
        """A second book by the same author in the same genre adds neither."""
        book = book_service.create(
            title="Anna Karenina",
            publish_year=1878,
            author_first_name="LEO",
            author_last_name="tolstoy",
            genre_input="DRAMA",
        )

        assert book.author.id == sample_author.id
        assert book.genres == {sample_genre}
        assert book_service.authors.count() == 1
        assert book_service.genres.count() == 1

    def test_blank_feedback_stored_as_none(self, book_service):
        book = book_service.create("Foundation", 1951, "Isaac", "Asimov", "Sci-Fi", "   ")

        assert book.feedback is None

    def test_blank_title_creates_nothing(self, book_service):
        """Book fields are checked before any author or genre is created."""
        with pytest.raises(ValidationError, match="title is required"):
            book_service.create("  ", 1951, "Isaac", "Asimov", "Sci-Fi")

        assert book_service.authors.count() == 0
        assert book_service.genres.count() == 0

    @pytest.mark.parametrize("year", [None, 999])
    def test_invalid_publish_year(self, book_service, year):
        with pytest.raises(ValidationError):
            book_service.create("Foundation", year, "Isaac", "Asimov", "Sci-Fi")

    def test_unusable_genre_list_creates_nothing(self, book_service):
        """A genre list with no names is rejected before the author is stored."""
        with pytest.raises(ValidationError):
            book_service.create("Foundation", 1951, "Isaac", "Asimov", " , ,")

        assert book_service.count() == 0
        assert book_service.authors.count() == 0
        assert book_service.genres.count() == 0

    def test_overlong_genre_creates_nothing(self, book_service):
        """One bad segment rejects the book before any author or genre is stored."""
        genre_input = "Sci-Fi, " + "x" * 101

        with pytest.raises(ValidationError, match="longer than 100"):
            book_service.create("Foundation", 1951, "Isaac", "Asimov", genre_input)

        assert book_service.authors.count() == 0
        assert book_service.genres.count() == 0

    def test_cyrillic_author_is_reused(self, book_service):
        first = book_service.create("Война и мир", 1869, "Лев", "Толстой", "Роман")
        second = book_service.create("Анна Каренина", 1878, "ЛЕВ", "толстой", "роман")

        assert first.author.id == second.author.id
        assert first.genres == second.genres
        assert book_service.authors.count() == 1
        assert book_service.genres.count() == 1

    def test_missing_author_name(self, book_service):
        with pytest.raises(ValidationError):
            book_service.create("Foundation", 1951, "Isaac", "", "Sci-Fi")


class TestUpdateBook:
    def test_replaces_author_and_genres(self, book_service, sample_book):
        book = book_service.update(
            sample_book.id,
            title="War and Peace (revised)",
            publish_year=1869,
            author_first_name="Lev",
            author_last_name="Tolstoy",
            genre_input="Historical",
        )

        assert book.title == "War and Peace (revised)"
        assert book.author.first_name == "Lev"
        assert {g.name for g in book.genres} == {"Historical"}
        assert book.feedback is None
        # The previous author and genre are kept
        assert book_service.authors.count() == 2
        assert book_service.genres.count() == 2

    def test_rejected_update_leaves_book_and_authors_alone(
        self, book_service, sample_book
    ):
        with pytest.raises(ValidationError):
            book_service.update(
                sample_book.id, "War and Peace", 1869, "Lev", "Tolstoy", ",,"
            )

        assert book_service.authors.count() == 1
        assert book_service.get(sample_book.id).author.first_name == "Leo"

    def test_update_missing_book(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.update(99999, "Title", 2000, "A", "B", "Drama")


class TestDeleteBook:
    def test_keeps_author_and_genres(self, book_service, sample_book):
        author_id = sample_book.author_id

        book_service.delete(sample_book.id)

        assert book_service.count() == 0
        assert book_service.authors.get(author_id).last_name == "Tolstoy"
        assert book_service.genres.exists("Drama")

    def test_genre_is_unused_after_last_book_goes(
        self, book_service, sample_book, sample_genre
    ):
        book_service.delete(sample_book.id)

        assert not book_service.genres.is_used(sample_genre.id)
        book_service.genres.delete(sample_genre.id)
        assert book_service.genres.count() == 0

    def test_delete_missing_book(self, book_service):
        with pytest.raises(NotFoundError, match="Book with id 99999 not found"):
            book_service.delete(99999)


class TestBooksByAuthor:
    def test_books_by_author(self, book_service, library):
        tolstoy = library["authors"]["tolstoy"]

        titles = [b.title for b in book_service.books_by_author(tolstoy.id)]

        assert titles == ["War and Peace", "Anna Karenina"]
        assert book_service.count_by_author(tolstoy.id) == 2

    def test_author_without_books(self, book_service, sample_author):
        assert list(book_service.books_by_author(sample_author.id)) == []
        assert book_service.count_by_author(sample_author.id) == 0


class TestCatalogScenario:
    """Create, find, search and try to delete, end to end."""

    def test_full_flow(self, book_service, dispatcher):
        author = book_service.authors.create("Leo", "Tolstoy", 1828)
        book = book_service.create(
            "War and Peace", 1869, "leo", "TOLSTOY", "Historical, drama"
        )

        assert book.author.id == author.id
        assert dispatcher.search_books("title", "war") == [book]
        assert [g.name for g in dispatcher.search_genres("dram")] == ["Drama"]
        assert dispatcher.search_authors("birthYear", "1828") == [author]

        drama = book_service.genres.find_by_name("drama")
        with pytest.raises(ReferentialError):
            book_service.genres.delete(drama.id)
