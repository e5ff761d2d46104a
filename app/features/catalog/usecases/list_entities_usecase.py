"""Use case for listing a catalog collection."""

import logging

from app.core.errors import PersistenceError
from app.features.catalog.dtos import EntityDto
from app.features.catalog.kinds import EntityKind
from app.features.catalog.repositories.protocols import EntityRepository, RepositoryError

logger = logging.getLogger(__name__)


class ListEntitiesUseCaseImpl:
    """Implementation of the list entities use case."""

    def __init__(self, repository: EntityRepository, kind: EntityKind):
        self.repository = repository
        self.kind = kind

    async def execute(self) -> list[EntityDto]:
        """Return the whole collection without pagination or filtering.

        Raises:
            PersistenceError: If the store cannot be read
        """
        try:
            return await self.repository.list_all()
        except RepositoryError as e:
            logger.exception("Listing %s failed: %s", self.kind.collection, e)
            raise PersistenceError(f"Failed to fetch {self.kind.collection}") from e
