"""Use case for ad-hoc sentiment analysis."""

from app.core.errors import ValidationError
from app.features.catalog.services.huggingface_sentiment_classifier import (
    classify_or_neutral,
)
from app.features.catalog.services.protocols import SentimentClassifier
from app.features.insights.dtos import AnalyzeSentimentRequest, SentimentResponse


class AnalyzeSentimentUseCaseImpl:
    """Classifies arbitrary text with the same neutral fallback as reviews."""

    def __init__(self, sentiment_classifier: SentimentClassifier):
        self.sentiment_classifier = sentiment_classifier

    async def execute(self, request: AnalyzeSentimentRequest) -> SentimentResponse:
        if not (request.text and request.text.strip()):
            raise ValidationError("Text is required")

        sentiment = await classify_or_neutral(self.sentiment_classifier, request.text)
        return SentimentResponse(sentiment=sentiment)
