"""ISP insights route handlers: recommendations, coverage, speed test, sentiment."""

from typing import Protocol

from fastapi import APIRouter, Depends, Path

from app.features.catalog.dependencies import (
    get_isp_repository,
    get_sentiment_classifier,
)
from app.features.catalog.repositories import IspRepository
from app.features.catalog.services.protocols import SentimentClassifier
from app.features.insights.dependencies import get_text_completer
from app.features.insights.dtos import (
    AnalyzeSentimentRequest,
    CoverageResponse,
    RecommendationResponse,
    RecommendIspRequest,
    SentimentResponse,
    SpeedTestResponse,
)
from app.features.insights.services.protocols import TextCompleter
from app.features.insights.usecases import (
    AnalyzeSentimentUseCaseImpl,
    GetCoverageUseCaseImpl,
    GetSpeedTestUseCaseImpl,
    RecommendIspUseCaseImpl,
)


class RecommendIspUseCase(Protocol):
    """Protocol for the ISP recommendation use case."""

    async def execute(self, request: RecommendIspRequest) -> RecommendationResponse:
        """Recommend an ISP for a speed and budget."""
        ...


class GetCoverageUseCase(Protocol):
    """Protocol for the coverage lookup use case."""

    async def execute(self, location: str) -> CoverageResponse:
        """Summarize ISP coverage at a location."""
        ...


class GetSpeedTestUseCase(Protocol):
    """Protocol for the speed test guidance use case."""

    async def execute(self) -> SpeedTestResponse:
        """Produce speed test guidance."""
        ...


class AnalyzeSentimentUseCase(Protocol):
    """Protocol for the ad-hoc sentiment analysis use case."""

    async def execute(self, request: AnalyzeSentimentRequest) -> SentimentResponse:
        """Classify the sentiment of a text."""
        ...


async def get_recommend_isp_use_case(
    text_completer: TextCompleter = Depends(get_text_completer),
) -> RecommendIspUseCase:
    """Dependency injection for the ISP recommendation use case."""
    return RecommendIspUseCaseImpl(text_completer=text_completer)


async def get_coverage_use_case(
    repository: IspRepository = Depends(get_isp_repository),
    text_completer: TextCompleter = Depends(get_text_completer),
) -> GetCoverageUseCase:
    """Dependency injection for the coverage lookup use case."""
    return GetCoverageUseCaseImpl(repository=repository, text_completer=text_completer)


async def get_speed_test_use_case(
    text_completer: TextCompleter = Depends(get_text_completer),
) -> GetSpeedTestUseCase:
    """Dependency injection for the speed test guidance use case."""
    return GetSpeedTestUseCaseImpl(text_completer=text_completer)


async def get_analyze_sentiment_use_case(
    sentiment_classifier: SentimentClassifier = Depends(get_sentiment_classifier),
) -> AnalyzeSentimentUseCase:
    """Dependency injection for the sentiment analysis use case."""
    return AnalyzeSentimentUseCaseImpl(sentiment_classifier=sentiment_classifier)


router = APIRouter(prefix="/isps", tags=["isps"])


@router.post("/recommend", response_model=RecommendationResponse)
async def recommend_isp(
    request: RecommendIspRequest,
    use_case: RecommendIspUseCase = Depends(get_recommend_isp_use_case),
) -> RecommendationResponse:
    """Recommend an ISP with at least the given speed (Mbps) below the given cost.

    Raises:
        400: If speed or cost is missing or not numeric
        500: If the language model call fails
    """
    return await use_case.execute(request)


@router.get("/coverage/{location}", response_model=CoverageResponse)
async def get_coverage(
    location: str = Path(..., description="City or region to look up"),
    use_case: GetCoverageUseCase = Depends(get_coverage_use_case),
) -> CoverageResponse:
    """Summarize which known ISPs serve a location."""
    return await use_case.execute(location)


@router.get("/speed-test", response_model=SpeedTestResponse)
async def get_speed_test(
    use_case: GetSpeedTestUseCase = Depends(get_speed_test_use_case),
) -> SpeedTestResponse:
    """Return AI-generated speed test guidance."""
    return await use_case.execute()


@router.post("/analyze-sentiment", response_model=SentimentResponse)
async def analyze_sentiment(
    request: AnalyzeSentimentRequest,
    use_case: AnalyzeSentimentUseCase = Depends(get_analyze_sentiment_use_case),
) -> SentimentResponse:
    """Classify the sentiment of a text. Falls back to neutral if the provider fails."""
    return await use_case.execute(request)
