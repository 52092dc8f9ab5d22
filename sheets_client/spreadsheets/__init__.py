"""Spreadsheets API client - tab metadata and cell values."""

from sheets_client.spreadsheets.client import SpreadsheetsClient, a1_sheet_range
from sheets_client.spreadsheets.schemas import (
    SheetPropertiesSchema,
    SheetSchema,
    SpreadsheetSchema,
    ValueRangeSchema,
)

__all__ = [
    "SpreadsheetsClient",
    "a1_sheet_range",
    "SpreadsheetSchema",
    "SheetSchema",
    "SheetPropertiesSchema",
    "ValueRangeSchema",
]
