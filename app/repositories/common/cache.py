"""Cache store - in-process TTL cache."""

import threading
import time
from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry


class CacheStore:
    """Key -> (expiry, value) map with lazy expiry.

    Entries are never swept in the background: a stale entry is dropped by the
    first ``get`` that sees it. ``get`` is a read followed by a conditional
    delete, so every access goes through one lock.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        logger.debug("CacheStore initialized")

    def get(self, key: str) -> Any | None:
        """Cached value, or None when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if entry.expired(self._clock()):
                del self._entries[key]
                self._misses += 1
                logger.debug("Cache expired: {}", key)
                return None
            self._hits += 1
            return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Store ``value`` for ``ttl`` seconds, replacing any previous entry."""
        with self._lock:
            self._entries[key] = CacheEntry(expires_at=self._clock() + ttl, value=value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def purge_expired(self) -> int:
        """Drop every stale entry, return how many were dropped."""
        with self._lock:
            now = self._clock()
            stale = [k for k, e in self._entries.items() if e.expired(now)]
            for key in stale:
                del self._entries[key]
        if stale:
            logger.debug("Purged {} expired entries", len(stale))
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Cache cleared")

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {"entries": len(self._entries), "hits": self._hits, "misses": self._misses}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
