"""Redis-backed cache provider.

Layout:
  cache:regions          SET of region names created through this provider
  cache:region:{name}    HASH key -> JSON payload, one per region

Redis gives per-command atomicity, which is all the store relies on: HSET is
a wholesale replace of one field, HGET reads one field.
"""

from collections.abc import AsyncIterator

import redis.asyncio as aioredis

_REGISTRY_KEY = "cache:regions"
_REGION_KEY = "cache:region:{name}"


class RedisCacheRegion:
    def __init__(self, redis: aioredis.Redis, name: str) -> None:
        self.name = name
        self._redis = redis
        self._key = _REGION_KEY.format(name=name)

    async def get(self, key: str) -> str | None:
        return await self._redis.hget(self._key, key)

    async def put(self, key: str, value: str) -> None:
        await self._redis.hset(self._key, key, value)

    async def values(self) -> AsyncIterator[str]:
        # HSCAN: no snapshot guarantee, entries written mid-scan may or may not appear
        async for _field, value in self._redis.hscan_iter(self._key):
            yield value


class RedisCacheProvider:
    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def ping(self) -> None:
        await self._redis.ping()

    async def get_cache(self, name: str) -> RedisCacheRegion | None:
        if not await self._redis.sismember(_REGISTRY_KEY, name):
            return None
        return RedisCacheRegion(self._redis, name)

    async def create_cache(self, name: str) -> RedisCacheRegion:
        # SADD is idempotent, so two processes creating the same region is harmless
        await self._redis.sadd(_REGISTRY_KEY, name)
        return RedisCacheRegion(self._redis, name)

    async def close(self) -> None:
        await self._redis.aclose()
