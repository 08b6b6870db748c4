"""In-process cache provider for local development and tests.

Single event loop only; each await point sees a consistent dict.
"""

from collections.abc import AsyncIterator


class InMemoryCacheRegion:
    def __init__(self, name: str) -> None:
        self.name = name
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def values(self) -> AsyncIterator[str]:
        for value in list(self._data.values()):
            yield value


class InMemoryCacheProvider:
    def __init__(self) -> None:
        self._regions: dict[str, InMemoryCacheRegion] = {}

    async def ping(self) -> None:
        return None

    async def get_cache(self, name: str) -> InMemoryCacheRegion | None:
        return self._regions.get(name)

    async def create_cache(self, name: str) -> InMemoryCacheRegion:
        return self._regions.setdefault(name, InMemoryCacheRegion(name))

    async def close(self) -> None:
        return None
