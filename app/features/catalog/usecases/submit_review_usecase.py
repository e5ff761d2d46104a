"""Use case for submitting a review with sentiment analysis."""

import logging
from uuid import UUID

from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.features.catalog.dtos import (
    CreateReviewRequest,
    CreateReviewResponse,
    ReviewDto,
)
from app.features.catalog.kinds import EntityKind
from app.features.catalog.repositories.protocols import EntityRepository, RepositoryError
from app.features.catalog.services.huggingface_sentiment_classifier import (
    classify_or_neutral,
)
from app.features.catalog.services.protocols import SentimentClassifier

logger = logging.getLogger(__name__)


class SubmitReviewUseCaseImpl:
    """Implementation of the submit review use case.

    The flow is validate -> look up -> classify -> append -> persist. The
    sentiment provider is fail-open (its failures yield ``neutral``); the
    store is fail-closed.
    """

    def __init__(
        self,
        repository: EntityRepository,
        sentiment_classifier: SentimentClassifier,
        kind: EntityKind,
    ):
        """Initialize the use case with dependencies.

        Args:
            repository: Repository of the reviewed collection
            sentiment_classifier: Service labelling the feedback text
            kind: Metadata of the reviewed collection
        """
        self.repository = repository
        self.sentiment_classifier = sentiment_classifier
        self.kind = kind

    async def execute(
        self, entity_id: str, request: CreateReviewRequest
    ) -> CreateReviewResponse:
        """Append a review to an entity.

        Args:
            entity_id: The entity's unique identifier, as received in the path
            request: The review author and feedback

        Returns:
            Response with a confirmation message and the assigned sentiment

        Raises:
            ValidationError: If user or feedback is missing or blank
            NotFoundError: If no entity exists for entity_id
            PersistenceError: If the store cannot be read or updated
        """
        if not (request.user and request.user.strip()) or not (
            request.feedback and request.feedback.strip()
        ):
            raise ValidationError("User and feedback are required")

        not_found = NotFoundError(f"{self.kind.label} not found")
        try:
            entity_uuid = UUID(entity_id)
        except ValueError:
            raise not_found from None

        try:
            entity = await self.repository.find_by_id(entity_uuid)
        except RepositoryError as e:
            logger.exception("Reading %s %s failed: %s", self.kind.label, entity_id, e)
            raise PersistenceError("Failed to add review") from e
        if entity is None:
            raise not_found

        sentiment = await classify_or_neutral(self.sentiment_classifier, request.feedback)

        entity.reviews.append(
            ReviewDto(user=request.user, feedback=request.feedback, sentiment=sentiment)
        )
        try:
            updated = await self.repository.replace_reviews(entity.id, entity.reviews)
        except RepositoryError as e:
            logger.exception("Saving review for %s %s failed: %s", self.kind.label, entity_id, e)
            raise PersistenceError("Failed to add review") from e
        if not updated:
            # Deleted between the read and the write
            raise not_found

        return CreateReviewResponse(message="Review added successfully", sentiment=sentiment)
