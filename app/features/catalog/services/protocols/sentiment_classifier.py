"""Protocol for sentiment classification services."""

from typing import Protocol

from app.features.catalog.dtos import Sentiment


class SentimentProviderError(Exception):
    """Raised when the sentiment provider cannot produce a label."""


class SentimentClassifier(Protocol):
    """Protocol for services that label free text with a sentiment.

    Implementations raise SentimentProviderError for every provider-side
    failure so callers can apply their own fallback policy.
    """

    async def classify(self, text: str) -> Sentiment:
        """Classify the sentiment of a piece of text.

        Args:
            text: The text to classify

        Returns:
            The sentiment label

        Raises:
            SentimentProviderError: If the provider is unreachable or answers
                with something that is not a known label
        """
        ...
