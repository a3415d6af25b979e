"""
Genres Router

CRUD and search endpoints for genres.
Follows the same patterns as the authors router.
"""

from typing import List

from fastapi import APIRouter, Query, status

from catalog.dependencies import Genres, Search
from catalog.schemas import GenreCreate, GenreResponse, GenreUpdate

router = APIRouter(
    prefix="/genres",
    tags=["Genres"],
    responses={
        404: {"description": "Genre not found"},
    },
)


@router.get(
    "/",
    response_model=List[GenreResponse],
    summary="List all genres",
)
def list_genres(genres: Genres) -> List[GenreResponse]:
    """List all genres."""
    return [GenreResponse.model_validate(g) for g in genres.get_all()]


@router.get(
    "/search",
    response_model=List[GenreResponse],
    summary="Search genres",
    description="Case-insensitive substring match on the name; a blank query lists everything.",
)
def search_genres(
    search: Search,
    query: str | None = Query(
        default=None,
        max_length=100,
        description="Part of a genre name",
        examples=["dram", "fic"],
    ),
) -> List[GenreResponse]:
    """Search genres by name."""
    return [GenreResponse.model_validate(g) for g in search.search_genres(query)]


@router.get(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Get a genre by ID",
)
def get_genre(genre_id: int, genres: Genres) -> GenreResponse:
    """Get a single genre by ID."""
    return GenreResponse.model_validate(genres.get(genre_id))


@router.post(
    "/",
    response_model=GenreResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new genre",
)
def create_genre(genre_data: GenreCreate, genres: Genres) -> GenreResponse:
    """
    Create a new genre.

    The name is stored in canonical form. If a genre with the same
    canonical name exists, a 409 Conflict error is returned.
    """
    return GenreResponse.model_validate(genres.save(genre_data.name))


@router.put(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Rename a genre",
)
def update_genre(
    genre_id: int,
    genre_data: GenreUpdate,
    genres: Genres,
) -> GenreResponse:
    """Rename a genre; 409 if another genre already has the new name."""
    return GenreResponse.model_validate(genres.update(genre_id, genre_data.name))


@router.delete(
    "/{genre_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a genre",
    description="Delete a genre. A genre still used by any book cannot be deleted (409).",
)
def delete_genre(genre_id: int, genres: Genres) -> None:
    """Delete an unused genre."""
    genres.delete(genre_id)
