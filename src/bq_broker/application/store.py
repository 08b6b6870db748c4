"""BrokerViewStore — owner -> Broker view over a pluggable cache provider.

Constructed explicitly and injected into callers; there is no module-level
cache handle. The region is acquired lazily on first use, once.

Concurrency of get/put is whatever the provider guarantees; the only lock
here guards initialization so concurrent first callers do not race on
create_cache.

Error policy: nothing is recovered. Each fault is logged (type and message at
WARNING, traceback at DEBUG) and re-raised. Provider faults surface as
StoreError, acquisition faults as InitializationError, absence as
BrokerNotFoundError.
"""

import asyncio
import logging
from dataclasses import replace

from pydantic import ValidationError

from src.bq_broker.application.schemas import BrokerSchema
from src.bq_broker.domain.cache import CacheProvider, CacheRegion
from src.bq_broker.domain.models import Broker
from src.bq_common.errors import (
    AppError,
    BrokerNotFoundError,
    InitializationError,
    StoreError,
)

logger = logging.getLogger(__name__)

DEFAULT_CACHE_NAME = "broker"


def _log_exception(exc: BaseException, operation: str) -> None:
    logger.warning("%s: %s", type(exc).__name__, exc)
    logger.debug("Throwing %s in %s", type(exc).__name__, operation, exc_info=exc)


class BrokerViewStore:
    def __init__(self, provider: CacheProvider, cache_name: str = DEFAULT_CACHE_NAME) -> None:
        self._provider = provider
        self._cache_name = cache_name
        self._cache: CacheRegion | None = None
        self._init_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._cache is not None

    async def initialize(self) -> CacheRegion:
        """Get or create the named region and return it. No-op once done."""
        if self._cache is not None:
            return self._cache
        async with self._init_lock:
            if self._cache is not None:
                return self._cache
            logger.debug("Entering initialize for cache %s", self._cache_name)
            try:
                await self._provider.ping()
                cache = await self._provider.get_cache(self._cache_name)
                if cache is None:
                    logger.info("No cache found named %s, creating it", self._cache_name)
                    cache = await self._provider.create_cache(self._cache_name)
            except AppError as exc:
                _log_exception(exc, "initialize")
                raise
            except Exception as exc:
                _log_exception(exc, "initialize")
                raise InitializationError(f"{type(exc).__name__}: {exc}") from exc
            self._cache = cache
            logger.debug("Exiting initialize")
            return cache

    async def list_all(self) -> list[Broker]:
        """Every resident record, in provider iteration order."""
        cache = await self.initialize()
        brokers: list[Broker] = []
        try:
            async for raw in cache.values():
                broker = self._decode(raw)
                logger.debug("Adding %s to list", broker.owner)
                brokers.append(broker)
        except AppError as exc:
            _log_exception(exc, "list_all")
            raise
        except Exception as exc:
            _log_exception(exc, "list_all")
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Returning %d brokers", len(brokers))
        return brokers

    async def get(self, owner: str) -> Broker:
        """Return the record for owner; raise BrokerNotFoundError if there is none."""
        cache = await self.initialize()
        logger.debug("Getting %s from cache", owner)
        try:
            raw = await cache.get(owner)
            if raw is None:
                raise BrokerNotFoundError(owner)
            broker = self._decode(raw)
        except AppError as exc:
            _log_exception(exc, "get")
            raise
        except Exception as exc:
            _log_exception(exc, "get")
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Cache retrieval successful for %s", owner)
        return broker

    async def put(self, owner: str, broker: Broker) -> Broker:
        """Insert or wholly replace the record for owner (last write wins)."""
        cache = await self.initialize()
        if broker.owner != owner:
            broker = replace(broker, owner=owner)
        logger.debug("Putting %s in cache", owner)
        try:
            await cache.put(owner, BrokerSchema.from_domain(broker).model_dump_json(by_alias=True))
        except Exception as exc:
            _log_exception(exc, "put")
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc
        logger.debug("Cache update successful for %s", owner)
        return broker

    async def close(self) -> None:
        await self._provider.close()
        self._cache = None

    @staticmethod
    def _decode(raw: str) -> Broker:
        try:
            return BrokerSchema.model_validate_json(raw).to_domain()
        except ValidationError as exc:
            raise StoreError(f"Undecodable broker payload: {exc.error_count()} errors") from exc
