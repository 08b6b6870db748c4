"""Cache provider selection from settings."""

from config.settings import Settings
from src.bq_broker.domain.cache import CacheProvider
from src.bq_broker.infrastructure.memory_cache import InMemoryCacheProvider
from src.bq_broker.infrastructure.redis_cache import RedisCacheProvider
from src.bq_common.errors import InitializationError
from src.bq_common.redis_client import create_redis


def create_cache_provider(settings: Settings) -> CacheProvider:
    kind = settings.CACHE_PROVIDER.lower()
    if kind == "redis":
        return RedisCacheProvider(
            create_redis(settings.REDIS_URL, settings.REDIS_SOCKET_TIMEOUT)
        )
    if kind == "memory":
        return InMemoryCacheProvider()
    raise InitializationError(f"Unknown CACHE_PROVIDER: {settings.CACHE_PROVIDER!r}")
