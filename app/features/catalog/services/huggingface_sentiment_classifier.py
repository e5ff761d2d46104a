"""Sentiment classification through the Hugging Face inference API.

The default model (cardiffnlp/twitter-roberta-base-sentiment) answers with
``LABEL_0`` / ``LABEL_1`` / ``LABEL_2`` for negative / neutral / positive.
Models that answer with the label names themselves are accepted as well.
"""

import logging
from typing import Any

import httpx

from app.core.settings import Settings, get_settings
from app.features.catalog.dtos import Sentiment
from app.features.catalog.services.protocols import (
    SentimentClassifier,
    SentimentProviderError,
)

logger = logging.getLogger(__name__)

LABEL_MAP: dict[str, Sentiment] = {
    "label_0": Sentiment.NEGATIVE,
    "label_1": Sentiment.NEUTRAL,
    "label_2": Sentiment.POSITIVE,
    "negative": Sentiment.NEGATIVE,
    "neutral": Sentiment.NEUTRAL,
    "positive": Sentiment.POSITIVE,
}


class HuggingFaceSentimentClassifier:
    """Classifies text with a hosted Hugging Face text-classification model."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the classifier.

        Args:
            settings: Optional settings instance. Defaults to the cached settings.
            client: Optional HTTP client, mainly for tests. One is created otherwise.
        """
        self._settings = settings or get_settings()
        self._client = client or httpx.AsyncClient()

        if not self._settings.huggingface_api_key:
            logger.warning(
                "HUGGINGFACE_API_KEY not set. Reviews will be labelled neutral."
            )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def classify(self, text: str) -> Sentiment:
        if not self._settings.huggingface_api_key:
            raise SentimentProviderError("HUGGINGFACE_API_KEY environment variable not set.")

        try:
            response = await self._client.post(
                self._settings.sentiment_model_url,
                json={"inputs": text},
                headers={"Authorization": f"Bearer {self._settings.huggingface_api_key}"},
            )
            _ = response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise SentimentProviderError(f"Sentiment request failed: {e}") from e
        except ValueError as e:
            raise SentimentProviderError("Sentiment response is not valid JSON") from e

        return self._parse_label(data)

    def _parse_label(self, data: Any) -> Sentiment:
        """Pick the highest-scoring label from a text-classification response.

        The API returns either ``[[{label, score}, ...]]`` or ``[{label, score}, ...]``.
        """
        try:
            candidates = data[0] if isinstance(data[0], list) else data
            best = max(candidates, key=lambda candidate: candidate.get("score", 0.0))
            label = str(best["label"]).lower()
        except (KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            raise SentimentProviderError(f"Unexpected sentiment response: {data!r}") from e

        sentiment = LABEL_MAP.get(label)
        if sentiment is None:
            raise SentimentProviderError(f"Unknown sentiment label: {label}")
        return sentiment


async def classify_or_neutral(classifier: SentimentClassifier, text: str) -> Sentiment:
    """Classify text, falling back to neutral when the provider fails.

    Review submission must not be blocked by the sentiment provider, so every
    provider failure is logged and replaced by ``Sentiment.NEUTRAL``.
    """
    try:
        return await classifier.classify(text)
    except SentimentProviderError as e:
        logger.warning("Sentiment analysis failed, defaulting to neutral: %s", e)
        return Sentiment.NEUTRAL
