"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config: configure models (replaces the old Config class)
- Field(): constraints and metadata
- field_validator: validate and transform field values
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    Names are trimmed here as well as in AuthorService, so the API rejects a
    blank name with a 422 before any lookup runs.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's first name",
        examples=["Leo", "Jane"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's last name",
        examples=["Tolstoy", "Austen"],
    )

    birth_year: int | None = Field(
        default=None,
        ge=1000,
        description="Year of birth",
        examples=[1828, 1775],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Reject whitespace-only names and strip the rest."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Usage in route:
        @router.post("/authors/")
        def create_author(author: AuthorCreate):
            ...
    """
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for updating an existing author.

    Updates overwrite all three fields, so the update body has the same
    shape as the create body. Omitting birth_year clears it.
    """
    pass


class AuthorResponse(AuthorBase):
    """Schema for author responses (what the API returns)."""

    id: int = Field(..., description="Unique identifier", examples=[1, 42])
    created_at: datetime = Field(..., description="When the author was created")
    updated_at: datetime = Field(..., description="When the author was last updated")

    model_config = ConfigDict(
        # Allow creating schema from SQLAlchemy model attributes
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Leo",
                "last_name": "Tolstoy",
                "birth_year": 1828,
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
