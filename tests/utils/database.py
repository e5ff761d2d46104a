"""Database utilities for integration tests.

This module provides helper functions for creating the test database and
its tables.
"""

import asyncpg
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.settings import Settings
from app.db.postgres.session import Base

# Import all models to ensure they are registered with Base.metadata
# This allows Base.metadata.create_all() and Base.metadata.drop_all() to work properly
from app.features.catalog import models  # noqa: F401


async def create_test_database(settings: Settings) -> None:
    """Create test database if it doesn't exist.

    Args:
        settings: Application settings with test database configuration
    """
    # Connect to default 'postgres' database to create test database
    conn = await asyncpg.connect(
        user=settings.postgres_user,
        password=settings.postgres_password,
        host=settings.postgres_host,
        port=settings.postgres_port,
        database="postgres",
    )

    try:
        exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1",
            settings.test_postgres_db,
        )

        if not exists:
            await conn.execute(f'CREATE DATABASE "{settings.test_postgres_db}"')
    finally:
        await conn.close()


async def create_all_tables(engine: AsyncEngine) -> None:
    """Create all tables from SQLAlchemy metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop all tables from SQLAlchemy metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
