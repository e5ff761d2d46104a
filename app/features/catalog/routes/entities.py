"""Catalog collection route handlers.

ISPs and accessories expose the same three endpoints, so the router is built
per collection from its ``EntityKind`` and repository dependency.
"""

from typing import Any, Awaitable, Callable, Protocol

from fastapi import APIRouter, Body, Depends, Path

from app.features.catalog.dtos import (
    CreateEntityResponse,
    CreateReviewRequest,
    CreateReviewResponse,
    EntityDto,
)
from app.features.catalog.dependencies import get_sentiment_classifier
from app.features.catalog.kinds import EntityKind
from app.features.catalog.repositories import EntityRepository
from app.features.catalog.services.protocols import SentimentClassifier
from app.features.catalog.usecases import (
    CreateEntityUseCaseImpl,
    ListEntitiesUseCaseImpl,
    SubmitReviewUseCaseImpl,
)


class ListEntitiesUseCase(Protocol):
    """Protocol for the list entities use case."""

    async def execute(self) -> list[EntityDto]:
        """List every entity of the collection."""
        ...


class CreateEntityUseCase(Protocol):
    """Protocol for the create entity use case."""

    async def execute(self, fields: dict[str, Any]) -> CreateEntityResponse:
        """Create an entity from raw request fields."""
        ...


class SubmitReviewUseCase(Protocol):
    """Protocol for the submit review use case."""

    async def execute(
        self, entity_id: str, request: CreateReviewRequest
    ) -> CreateReviewResponse:
        """Append a review to an entity."""
        ...


def create_entity_router(
    kind: EntityKind,
    get_repository: Callable[[], Awaitable[EntityRepository]],
) -> APIRouter:
    """Build the list / create / review routes of one catalog collection."""

    async def get_list_use_case(
        repository: EntityRepository = Depends(get_repository),
    ) -> ListEntitiesUseCase:
        """Dependency injection for the list entities use case."""
        return ListEntitiesUseCaseImpl(repository=repository, kind=kind)

    async def get_create_use_case(
        repository: EntityRepository = Depends(get_repository),
    ) -> CreateEntityUseCase:
        """Dependency injection for the create entity use case."""
        return CreateEntityUseCaseImpl(repository=repository, kind=kind)

    async def get_review_use_case(
        repository: EntityRepository = Depends(get_repository),
        sentiment_classifier: SentimentClassifier = Depends(get_sentiment_classifier),
    ) -> SubmitReviewUseCase:
        """Dependency injection for the submit review use case."""
        return SubmitReviewUseCaseImpl(
            repository=repository,
            sentiment_classifier=sentiment_classifier,
            kind=kind,
        )

    router = APIRouter(prefix=f"/{kind.collection}", tags=[kind.collection])

    @router.get("", response_model=list[kind.dto])
    async def list_entities(
        use_case: ListEntitiesUseCase = Depends(get_list_use_case),
    ) -> list[EntityDto]:
        """List every entity of the collection, reviews included."""
        return await use_case.execute()

    @router.post("", response_model=CreateEntityResponse)
    async def create_entity(
        fields: dict[str, Any] = Body(...),
        use_case: CreateEntityUseCase = Depends(get_create_use_case),
    ) -> CreateEntityResponse:
        """Add an entity to the collection.

        Returns 400 with the missing field names if mandatory fields are absent.
        """
        return await use_case.execute(fields)

    @router.post("/{entity_id}/review", response_model=CreateReviewResponse)
    async def submit_review(
        request: CreateReviewRequest,
        entity_id: str = Path(..., description="The entity's unique identifier"),
        use_case: SubmitReviewUseCase = Depends(get_review_use_case),
    ) -> CreateReviewResponse:
        """Add a review to an entity, labelled by AI sentiment analysis.

        Raises:
            400: If user or feedback is missing
            404: If the entity does not exist
        """
        return await use_case.execute(entity_id=entity_id, request=request)

    return router
