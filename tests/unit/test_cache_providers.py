"""Tests for provider selection and the in-memory provider."""

import pytest

from config.settings import Settings
from src.bq_broker.infrastructure.memory_cache import InMemoryCacheProvider
from src.bq_broker.infrastructure.providers import create_cache_provider
from src.bq_broker.infrastructure.redis_cache import RedisCacheProvider
from src.bq_common.errors import InitializationError


class TestCreateCacheProvider:
    def test_memory(self) -> None:
        provider = create_cache_provider(Settings(CACHE_PROVIDER="memory"))
        assert isinstance(provider, InMemoryCacheProvider)

    def test_redis(self) -> None:
        provider = create_cache_provider(
            Settings(CACHE_PROVIDER="REDIS", REDIS_URL="redis://localhost:6379/1")
        )
        assert isinstance(provider, RedisCacheProvider)

    def test_unknown_raises(self) -> None:
        with pytest.raises(InitializationError, match="memcached"):
            create_cache_provider(Settings(CACHE_PROVIDER="memcached"))


class TestInMemoryCacheProvider:
    async def test_region_lifecycle(self) -> None:
        provider = InMemoryCacheProvider()
        assert await provider.get_cache("broker") is None
        created = await provider.create_cache("broker")
        assert await provider.get_cache("broker") is created

    async def test_create_is_idempotent(self) -> None:
        provider = InMemoryCacheProvider()
        first = await provider.create_cache("broker")
        await first.put("alice", "x")
        second = await provider.create_cache("broker")
        assert await second.get("alice") == "x"

    async def test_values(self) -> None:
        region = await InMemoryCacheProvider().create_cache("broker")
        await region.put("alice", "a")
        await region.put("bob", "b")
        await region.put("alice", "a2")
        assert sorted([v async for v in region.values()]) == ["a2", "b"]
