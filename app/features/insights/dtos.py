"""Insights data transfer objects."""

from typing import Any

from pydantic import BaseModel

from app.features.catalog.dtos import Sentiment
from app.features.catalog.dtos.catalog_dto import CamelModel


class RecommendIspRequest(BaseModel):
    """Request model for an ISP recommendation.

    Values are left untyped so that non-numeric input is reported by the
    use case with a dedicated message.
    """

    speed: Any = None
    cost: Any = None


class RecommendationResponse(BaseModel):
    """Response model for an ISP recommendation."""

    recommendation: str


class CoverageResponse(BaseModel):
    """Response model for a coverage lookup."""

    coverage: str


class SpeedTestResponse(CamelModel):
    """Response model for speed test guidance."""

    ai_speed_test: str


class AnalyzeSentimentRequest(BaseModel):
    """Request model for ad-hoc sentiment analysis."""

    text: str | None = None


class SentimentResponse(BaseModel):
    """Response model for ad-hoc sentiment analysis."""

    sentiment: Sentiment
