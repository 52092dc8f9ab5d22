"""Sheets domain models."""

from app.models.sheets.table import NormalizedTable, RawGrid, TabList

__all__ = [
    "NormalizedTable",
    "RawGrid",
    "TabList",
]
