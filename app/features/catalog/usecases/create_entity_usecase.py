"""Use case for creating a catalog entity."""

import logging
from typing import Any

import pydantic

from app.core.errors import PersistenceError, ValidationError
from app.features.catalog.dtos import CreateEntityResponse
from app.features.catalog.kinds import EntityKind
from app.features.catalog.repositories.protocols import EntityRepository, RepositoryError

logger = logging.getLogger(__name__)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class CreateEntityUseCaseImpl:
    """Implementation of the create entity use case."""

    def __init__(self, repository: EntityRepository, kind: EntityKind):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository of the target collection
            kind: Metadata of the target collection
        """
        self.repository = repository
        self.kind = kind

    async def execute(self, fields: dict[str, Any]) -> CreateEntityResponse:
        """Validate and store a new entity.

        Args:
            fields: Raw request body. Unknown keys are ignored.

        Returns:
            Response with a confirmation message and the new entity id

        Raises:
            ValidationError: If mandatory fields are missing or have the wrong type
            PersistenceError: If the store rejects the insert
        """
        missing = [name for name in self.kind.required_fields if _is_blank(fields.get(name))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            payload = self.kind.create_request.model_validate(fields)
        except pydantic.ValidationError as e:
            invalid = sorted(
                {".".join(str(part) for part in error["loc"]) for error in e.errors()}
            )
            raise ValidationError(f"Invalid fields: {', '.join(invalid)}") from e

        try:
            entity_id = await self.repository.create(payload)
        except RepositoryError as e:
            logger.exception("Creating %s failed: %s", self.kind.label, e)
            raise PersistenceError(f"Failed to add {self.kind.label}") from e

        logger.info("Created %s %s", self.kind.label, entity_id)
        return CreateEntityResponse(
            message=f"{self.kind.label} added successfully", id=entity_id
        )
