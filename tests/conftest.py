"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.bq_broker.application.store import BrokerViewStore
from src.bq_broker.infrastructure.memory_cache import InMemoryCacheProvider
from src.main import create_app


@pytest.fixture
def store() -> BrokerViewStore:
    """Fresh in-memory store per test."""
    return BrokerViewStore(InMemoryCacheProvider())


@pytest.fixture
async def client(store: BrokerViewStore) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints against the in-memory store."""
    transport = ASGITransport(app=create_app(store))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
