"""Services package - service class exports."""

from app.services.sheets import SheetFetcher, SheetLoader

__all__ = [
    "SheetFetcher",
    "SheetLoader",
]
