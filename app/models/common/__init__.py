"""Common models - cache entries."""

from app.models.common.cache import CacheEntry

__all__ = [
    "CacheEntry",
]
