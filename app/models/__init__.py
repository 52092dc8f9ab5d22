"""Models package - entities for all domains."""

from app.models.common import CacheEntry
from app.models.sheets import NormalizedTable, RawGrid, TabList

__all__ = [
    # Common
    "CacheEntry",
    # Sheets
    "NormalizedTable",
    "RawGrid",
    "TabList",
]
