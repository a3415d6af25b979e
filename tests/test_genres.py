"""
Tests for Genres API Endpoints

Tests for /api/v1/genres endpoints.
"""

from fastapi import status


class TestListGenres:
    """Tests for GET /api/v1/genres/ endpoint."""

    def test_list_genres_empty(self, client):
        response = client.get("/api/v1/genres/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_genres_with_data(self, client, sample_genre):
        response = client.get("/api/v1/genres/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Drama"


class TestGetGenre:
    """Tests for GET /api/v1/genres/{genre_id} endpoint."""

    def test_get_genre_success(self, client, sample_genre):
        response = client.get(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Drama"

    def test_get_genre_not_found(self, client):
        response = client.get("/api/v1/genres/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCreateGenre:
    """Tests for POST /api/v1/genres/ endpoint."""

    def test_create_genre_is_canonicalized(self, client):
        """The stored name is trimmed, lower-cased and capitalized."""
        response = client.post("/api/v1/genres/", json={"name": "  science FICTION "})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["name"] == "Science fiction"

    def test_create_genre_duplicate_name(self, client, sample_genre):
        """A case variant of an existing genre is a duplicate."""
        response = client.post("/api/v1/genres/", json={"name": "DRAMA"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Genre 'Drama' already exists"

    def test_create_genre_blank_name(self, client):
        response = client.post("/api/v1/genres/", json={"name": "   "})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestUpdateGenre:
    """Tests for PUT /api/v1/genres/{genre_id} endpoint."""

    def test_rename_genre(self, client, sample_genre):
        response = client.put(
            f"/api/v1/genres/{sample_genre.id}",
            json={"name": "tragedy"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Tragedy"

    def test_rename_onto_existing_genre(self, client, sample_genre, unused_genre):
        response = client.put(
            f"/api/v1/genres/{unused_genre.id}",
            json={"name": "drama"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT


class TestDeleteGenre:
    """Tests for DELETE /api/v1/genres/{genre_id} endpoint."""

    def test_delete_unused_genre(self, client, unused_genre):
        response = client.delete(f"/api/v1/genres/{unused_genre.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/genres/{unused_genre.id}").status_code == 404

    def test_delete_used_genre(self, client, sample_book, sample_genre):
        """A genre listed by a book cannot be deleted."""
        response = client.delete(f"/api/v1/genres/{sample_genre.id}")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == (
            "Genre 'Drama' is used by books and cannot be deleted"
        )
        assert client.get(f"/api/v1/genres/{sample_genre.id}").status_code == 200

    def test_delete_genre_not_found(self, client):
        response = client.delete("/api/v1/genres/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSearchGenres:
    def test_search_substring(self, client, library):
        response = client.get("/api/v1/genres/search", params={"query": "ROM"})

        assert response.status_code == status.HTTP_200_OK
        assert [g["name"] for g in response.json()] == ["Romance"]

    def test_search_blank_lists_all(self, client, library):
        response = client.get("/api/v1/genres/search", params={"query": " "})

        assert len(response.json()) == 3
