"""
Integration test configuration with testcontainers.

Provides a session-scoped PostgreSQL 16 container and, per test, a
session factory on a freshly migrated and truncated schema.

The repositories under test open and commit their own transactions, so
isolation comes from TRUNCATE rather than from rolling back one wrapping
session.

Usage:
    pytestmark = pytest.mark.integration

    async def test_example(session_factory) -> None:
        repo = PostgresSignatureRepository(session_factory)
        ...

Note: Docker must be running for these fixtures to work.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from src.bootstrap.database import to_async_database_url
from tests.integration.sql_helpers import apply_migrations


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Session-scoped PostgreSQL 16 container, reused by every test."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def postgres_async_url(postgres_container: PostgresContainer) -> str:
    """asyncpg URL for the container.

    testcontainers returns a psycopg2 URL by default.
    """
    sync_url = postgres_container.get_connection_url()
    return to_async_database_url(
        sync_url.replace("postgresql+psycopg2://", "postgresql://")
    )


@pytest.fixture
async def session_factory(
    postgres_async_url: str,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Per-test session factory on a migrated, empty schema."""
    engine = create_async_engine(postgres_async_url, echo=False)

    async with engine.begin() as conn:
        await apply_migrations(conn)
        await conn.execute(text("TRUNCATE signatures, petitions CASCADE"))

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()
