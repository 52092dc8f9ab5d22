"""Repositories package - in-process storage."""

from app.repositories.common import CacheStore, derive_key

__all__ = [
    # Common
    "CacheStore",
    "derive_key",
]
