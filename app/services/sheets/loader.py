"""Sheet loader - cached tab list and normalized tabs."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from loguru import logger

from app.models.sheets import NormalizedTable, RawGrid, TabList
from app.repositories.common import CacheStore, derive_key
from helpers.tabular import normalize


def _consume_exception(task: asyncio.Task) -> None:
    """Mark a failed fetch as retrieved, even when every waiter has gone."""
    if not task.cancelled() and task.exception() is not None:
        logger.debug("In-flight fetch failed: {!r}", task.exception())


class SheetFetcher(Protocol):
    """Upstream capability the loader needs (already authorized)."""

    async def fetch_tab_titles(self, sheet_id: str) -> list[str | None]: ...

    async def fetch_grid(self, sheet_id: str, tab_name: str) -> RawGrid: ...


class SheetLoader:
    """Read-through cache over one spreadsheet.

    Upstream errors propagate unchanged and leave the cache as it was, so the
    next call fetches again. Concurrent misses on one key share a single
    upstream fetch.
    """

    def __init__(self, cache: CacheStore, fetcher: SheetFetcher, sheet_id: str, ttl_ms: int):
        self._cache = cache
        self._fetcher = fetcher
        self._sheet_id = sheet_id
        self._ttl = ttl_ms / 1000
        self._inflight: dict[str, asyncio.Task] = {}
        logger.debug("SheetLoader initialized: sheet={}, ttl={}s", sheet_id, self._ttl)

    @property
    def sheet_id(self) -> str:
        return self._sheet_id

    async def _cached_or_fetch(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Try cache first, else join or start the in-flight fetch for ``key``."""
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: {}", key[:12])
            return cached

        task = self._inflight.get(key)
        if task is None:
            logger.debug("Cache miss: {}", key[:12])
            task = asyncio.ensure_future(self._populate(key, fetch))
            task.add_done_callback(_consume_exception)
            self._inflight[key] = task
        else:
            logger.debug("Joining in-flight fetch: {}", key[:12])

        # One caller going away must not cancel the fetch for the others
        return await asyncio.shield(task)

    async def _populate(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        try:
            value = await fetch()
            self._cache.set(key, value, self._ttl)
            return value
        finally:
            self._inflight.pop(key, None)

    async def list_tabs(self) -> TabList:
        """Tab names in upstream order."""

        async def fetch() -> TabList:
            titles = await self._fetcher.fetch_tab_titles(self._sheet_id)
            return [t for t in titles if t]

        return await self._cached_or_fetch(derive_key(["tabs", self._sheet_id]), fetch)

    async def load_tab(self, tab_name: str) -> NormalizedTable:
        """Normalized contents of one tab. Membership is the caller's job."""

        async def fetch() -> NormalizedTable:
            grid = await self._fetcher.fetch_grid(self._sheet_id, tab_name)
            return normalize(tab_name, grid)

        return await self._cached_or_fetch(derive_key(["data", self._sheet_id, tab_name]), fetch)

    async def load_all(self) -> dict[str, NormalizedTable]:
        """Every tab, in tab order. One upstream call per uncached tab."""
        tabs = await self.list_tabs()
        result = {}
        for tab in tabs:
            result[tab] = await self.load_tab(tab)
        logger.info("Loaded {} tabs", len(result))
        return result
