"""
Catalog Exceptions

Every error the catalog core raises on purpose derives from CatalogError, so
callers can catch the whole family or a single kind:

- ValidationError: required input is missing or malformed
- NotFoundError: the targeted id does not exist
- ConflictError: a uniqueness rule would be violated
- ReferentialError: a usage rule would be violated (delete while referenced)

The presentation layer maps these to HTTP status codes in catalog.main.
"""


class CatalogError(Exception):
    """Base class for catalog-core exceptions."""


class ValidationError(CatalogError):
    """Raised when input validation fails."""


class NotFoundError(CatalogError):
    """Raised when a requested entity is not found."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ConflictError(CatalogError):
    """Raised when an entity with the same identity already exists."""


class ReferentialError(ConflictError):
    """Raised when an entity cannot be removed while others reference it."""
