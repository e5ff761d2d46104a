"""Protocol definitions for catalog repository operations."""

from typing import Protocol
from uuid import UUID

from pydantic import BaseModel

from app.features.catalog.dtos import EntityDto, IspDto, ReviewDto


class RepositoryError(Exception):
    """Raised when the underlying store fails to serve a request."""


class EntityRepository(Protocol):
    """Protocol for a catalog collection repository.

    Implementations include SqlAlchemyEntityRepository for PostgreSQL.
    """

    async def list_all(self) -> list[EntityDto]:
        """Return every entity in the collection, oldest first."""
        ...

    async def create(self, payload: BaseModel) -> UUID:
        """Store a new entity with an empty review list and return its id."""
        ...

    async def find_by_id(self, entity_id: UUID) -> EntityDto | None:
        """Find an entity by its ID."""
        ...

    async def replace_reviews(self, entity_id: UUID, reviews: list[ReviewDto]) -> bool:
        """Overwrite the review list of an entity in a single update.

        Returns:
            True if the entity exists and was updated, False otherwise.
        """
        ...


class IspRepository(EntityRepository, Protocol):
    """Repository for the ISP collection."""

    async def find_by_coverage_area(self, location: str) -> list[IspDto]:
        """Return ISPs whose coverage area mentions the location (case-insensitive)."""
        ...
