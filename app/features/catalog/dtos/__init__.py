"""Catalog DTOs module."""

from .catalog_dto import (
    AccessoryDto,
    CreateAccessoryRequest,
    CreateEntityResponse,
    CreateIspRequest,
    CreateReviewRequest,
    CreateReviewResponse,
    EntityDto,
    IspDto,
    ReviewDto,
    Sentiment,
)

__all__ = [
    "AccessoryDto",
    "CreateAccessoryRequest",
    "CreateEntityResponse",
    "CreateIspRequest",
    "CreateReviewRequest",
    "CreateReviewResponse",
    "EntityDto",
    "IspDto",
    "ReviewDto",
    "Sentiment",
]
