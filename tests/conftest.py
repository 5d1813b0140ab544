from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from offer_board.app import app
from offer_board.domain.ports.repositories.offer_repository import OfferRepository
from offer_board.infrastructure.config.dependencies import get_offer_repository
from offer_board.infrastructure.persistence.database import create_tables, get_session
from offer_board.infrastructure.persistence.models import table_registry


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(scope="session")
def postgres_url():
    """Start one PostgreSQL container for the whole run, skip when Docker is missing"""
    PostgresContainer = pytest.importorskip("testcontainers.postgres").PostgresContainer

    postgres = PostgresContainer("postgres:16", driver="psycopg")
    try:
        postgres.start()
    except Exception as e:
        pytest.skip(f"PostgreSQL container unavailable: {e}")

    yield postgres.get_connection_url()

    postgres.stop()


@pytest_asyncio.fixture
async def postgres_engine(postgres_url):
    """Create test database engine with a fresh schema"""
    engine = create_async_engine(postgres_url)

    await create_tables(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(postgres_engine):
    """Create test database session"""
    async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture
async def api_client(test_session):
    """HTTP client whose requests share the test database session"""

    async def override_get_session():
        yield test_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_offer_repository():
    """Mock offer repository for use case testing"""
    return AsyncMock(spec=OfferRepository)


@pytest_asyncio.fixture
async def mocked_api_client(mock_offer_repository):
    """HTTP client backed by the mocked repository, no database needed"""
    app.dependency_overrides[get_offer_repository] = lambda: mock_offer_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_session():
    """AsyncSession stand-in: async methods are AsyncMocks, ``add`` stays sync"""
    return AsyncMock(spec=AsyncSession)
