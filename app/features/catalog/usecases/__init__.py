"""Catalog use cases."""

from .create_entity_usecase import CreateEntityUseCaseImpl
from .list_entities_usecase import ListEntitiesUseCaseImpl
from .submit_review_usecase import SubmitReviewUseCaseImpl

__all__ = [
    "CreateEntityUseCaseImpl",
    "ListEntitiesUseCaseImpl",
    "SubmitReviewUseCaseImpl",
]
