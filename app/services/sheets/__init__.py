"""Sheets services."""

from app.services.sheets.loader import SheetFetcher, SheetLoader

__all__ = [
    "SheetFetcher",
    "SheetLoader",
]
