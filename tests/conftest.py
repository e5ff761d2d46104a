"""Pytest configuration and shared fixtures for all tests.

This module provides function-scoped fixtures for:
- In-memory repositories and provider fakes
- A FastAPI app wired to those fakes, and an HTTP client for it
- SQLAlchemy engine and session management for integration tests
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from app.core.settings import Settings, get_settings
from app.features.catalog.dependencies import (
    get_accessory_repository,
    get_isp_repository,
    get_sentiment_classifier,
)
from app.features.catalog.dtos import AccessoryDto, IspDto
from app.features.insights.dependencies import get_text_completer
from app.main import create_app
from tests.utils.database import create_all_tables, create_test_database, drop_all_tables
from tests.utils.fakes import (
    FakeSentimentClassifier,
    FakeTextCompleter,
    InMemoryEntityRepository,
)


@pytest.fixture
def isp_repository() -> InMemoryEntityRepository:
    """In-memory ISP repository."""
    return InMemoryEntityRepository(IspDto)


@pytest.fixture
def accessory_repository() -> InMemoryEntityRepository:
    """In-memory accessory repository."""
    return InMemoryEntityRepository(AccessoryDto)


@pytest.fixture
def sentiment_classifier() -> FakeSentimentClassifier:
    """Sentiment classifier that labels everything positive."""
    return FakeSentimentClassifier()


@pytest.fixture
def text_completer() -> FakeTextCompleter:
    """Text completer with a canned answer."""
    return FakeTextCompleter()


@pytest.fixture
def app(
    isp_repository: InMemoryEntityRepository,
    accessory_repository: InMemoryEntityRepository,
    sentiment_classifier: FakeSentimentClassifier,
    text_completer: FakeTextCompleter,
) -> FastAPI:
    """Application with the store and providers replaced by fakes."""
    app = create_app()

    async def override_isp_repository():
        return isp_repository

    async def override_accessory_repository():
        return accessory_repository

    async def override_sentiment_classifier():
        return sentiment_classifier

    async def override_text_completer():
        return text_completer

    app.dependency_overrides[get_isp_repository] = override_isp_repository
    app.dependency_overrides[get_accessory_repository] = override_accessory_repository
    app.dependency_overrides[get_sentiment_classifier] = override_sentiment_classifier
    app.dependency_overrides[get_text_completer] = override_text_completer
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to the app in-process (lifespan is not run)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled."""
    settings = get_settings()
    settings.testing = True
    return settings


@pytest_asyncio.fixture(scope="function")
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Provide a SQLAlchemy async engine on a fresh test schema.

    Only used by tests marked ``integration``; requires a running PostgreSQL.
    """
    await create_test_database(test_settings)
    engine = create_async_engine(test_settings.database_url, echo=False)
    await create_all_tables(engine)

    yield engine

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine):
    """Session factory with the same shape as ``get_db_session``."""
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def get_test_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with AsyncSession(async_engine, expire_on_commit=False) as session:
            yield session

    return get_test_db_session
