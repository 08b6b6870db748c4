"""Redis client factory for the Redis-backed cache provider.

No module-level pool: each provider owns the client it creates and closes it.
"""

import redis.asyncio as aioredis


def create_redis(url: str, socket_timeout: float | None = None) -> aioredis.Redis:
    """Create a Redis client with its own connection pool (lazy connect)."""
    return aioredis.from_url(
        url,
        decode_responses=True,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
    )
