"""Service protocols for the catalog feature."""

from app.features.catalog.services.protocols.sentiment_classifier import (
    SentimentClassifier,
    SentimentProviderError,
)

__all__ = ["SentimentClassifier", "SentimentProviderError"]
