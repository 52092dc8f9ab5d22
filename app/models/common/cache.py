"""Cache entry - value plus absolute expiry."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Cached value, stale once the clock passes ``expires_at``."""

    expires_at: float
    value: Any

    def expired(self, now: float) -> bool:
        return now > self.expires_at
