"""Common repositories - cache storage and keys."""

from app.repositories.common.cache import CacheStore
from app.repositories.common.keys import derive_key

__all__ = [
    "CacheStore",
    "derive_key",
]
