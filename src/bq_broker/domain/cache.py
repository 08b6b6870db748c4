"""Cache provider Protocols — the store depends only on these.

A provider hands out named cache regions; a region is a flat str -> str map.
Infrastructure supplies Redis and in-memory implementations, and unit tests
inject AsyncMock doubles that conform to the same shape.
"""

from collections.abc import AsyncIterator
from typing import Protocol


class CacheRegion(Protocol):
    name: str

    async def get(self, key: str) -> str | None: ...

    async def put(self, key: str, value: str) -> None: ...

    def values(self) -> AsyncIterator[str]: ...


class CacheProvider(Protocol):
    async def ping(self) -> None:
        """Raise if the backing service is unreachable."""
        ...

    async def get_cache(self, name: str) -> CacheRegion | None:
        """Return the named region, or None if it was never created."""
        ...

    async def create_cache(self, name: str) -> CacheRegion: ...

    async def close(self) -> None: ...
