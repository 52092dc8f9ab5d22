"""Dependency Injection container - initialized at app startup, closed at shutdown."""

import time
from collections.abc import Callable

from loguru import logger

from app.repositories.common import CacheStore
from app.services.sheets import SheetFetcher, SheetLoader
from settings import API_BASE_URL, API_RETRIES, API_TIMEOUT, CACHE_TTL_MS, GOOGLE_CREDENTIALS_BASE64, SHEET_ID
from sheets_client import GoogleTokenProvider, SpreadsheetsClient


class Container:
    """Application DI container - owns the cache, the upstream client and the loader."""

    def __init__(
        self,
        sheet_id: str | None = SHEET_ID,
        ttl_ms: int = CACHE_TTL_MS,
        fetcher: SheetFetcher | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sheet_id = sheet_id
        self._ttl_ms = ttl_ms
        self._fetcher = fetcher
        self._clock = clock
        self._client: SpreadsheetsClient | None = None
        self._initialized = False

        self.cache: CacheStore | None = None
        self.sheets: SheetLoader | None = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self.cache = CacheStore(clock=self._clock)

        # Upstream client, unless a fetcher was injected
        fetcher = self._fetcher
        if fetcher is None:
            self._client = SpreadsheetsClient(
                token_provider=GoogleTokenProvider(GOOGLE_CREDENTIALS_BASE64),
                base_url=API_BASE_URL,
                timeout=API_TIMEOUT,
                retries=API_RETRIES,
            )
            await self._client.open()
            fetcher = self._client

        if self.sheet_id:
            self.sheets = SheetLoader(
                cache=self.cache,
                fetcher=fetcher,
                sheet_id=self.sheet_id,
                ttl_ms=self._ttl_ms,
            )
        else:
            logger.warning("SHEET_ID is not configured. Sheets endpoints will answer 400.")

        self._initialized = True
        logger.info("Container initialized (ttl={}ms)", self._ttl_ms)

    async def close(self) -> None:
        """Release the upstream client and drop cached data."""
        if not self._initialized:
            return

        if self._client:
            await self._client.close()
            self._client = None
        if self.cache is not None:
            self.cache.clear()

        self.sheets = None
        self._initialized = False
        logger.info("Container closed")


# Global container instance
container = Container()
