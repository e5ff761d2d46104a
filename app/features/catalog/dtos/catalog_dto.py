"""Catalog data transfer objects."""

import enum
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Finite and non-negative; "NaN", "Infinity" and negatives are rejected
Measure = Annotated[float, Field(allow_inf_nan=False, ge=0)]


class Sentiment(str, enum.Enum):
    """Sentiment labels assigned to reviews."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ReviewDto(CamelModel):
    """A user review annotated with its sentiment."""

    user: str
    feedback: str
    sentiment: Sentiment


class EntityDto(CamelModel):
    """Fields shared by every catalog entity."""

    id: UUID
    name: str
    rating: float | None = None
    reviews: list[ReviewDto] = []


class IspDto(EntityDto):
    """Internet service provider as returned by the API."""

    speed: float
    reliability: float | None = None
    cost: float
    coverage_area: str


class AccessoryDto(EntityDto):
    """Networking accessory as returned by the API."""

    type: str


class CreateIspRequest(CamelModel):
    """Validated payload for creating an ISP."""

    name: str
    speed: Measure
    cost: Measure
    coverage_area: str
    reliability: Measure | None = None
    rating: Measure | None = None


class CreateAccessoryRequest(CamelModel):
    """Validated payload for creating an accessory."""

    name: str
    type: str
    rating: Measure | None = None


class CreateEntityResponse(BaseModel):
    """Response model for a created catalog entity."""

    message: str
    id: UUID


class CreateReviewRequest(BaseModel):
    """Request model for submitting a review.

    Both fields are optional here so that missing values are reported by the
    use case as a validation error rather than by the request parser.
    """

    user: str | None = None
    feedback: str | None = None


class CreateReviewResponse(BaseModel):
    """Response model for a submitted review."""

    message: str
    sentiment: Sentiment
