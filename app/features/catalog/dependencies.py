"""FastAPI dependencies shared by the catalog and insights routes."""

from app.db.postgres.session import get_db_session
from app.features.catalog.dtos import AccessoryDto
from app.features.catalog.models import Accessory
from app.features.catalog.repositories import (
    EntityRepository,
    IspRepository,
    SqlAlchemyEntityRepository,
    SqlAlchemyIspRepository,
)
from app.features.catalog.services.huggingface_sentiment_classifier import (
    HuggingFaceSentimentClassifier,
)
from app.features.catalog.services.protocols import SentimentClassifier

# Created lazily so the HTTP client is bound to the running event loop
_sentiment_classifier: HuggingFaceSentimentClassifier | None = None


async def get_isp_repository() -> IspRepository:
    """Dependency injection for the ISP repository."""
    return SqlAlchemyIspRepository(get_db_session=get_db_session)


async def get_accessory_repository() -> EntityRepository:
    """Dependency injection for the accessory repository."""
    return SqlAlchemyEntityRepository(
        model=Accessory, dto=AccessoryDto, get_db_session=get_db_session
    )


async def get_sentiment_classifier() -> SentimentClassifier:
    """Get or create the sentiment classifier singleton."""
    global _sentiment_classifier
    if _sentiment_classifier is None:
        _sentiment_classifier = HuggingFaceSentimentClassifier()
    return _sentiment_classifier


async def close_sentiment_classifier() -> None:
    """Close the sentiment classifier's HTTP client."""
    global _sentiment_classifier
    if _sentiment_classifier is not None:
        await _sentiment_classifier.aclose()
        _sentiment_classifier = None
