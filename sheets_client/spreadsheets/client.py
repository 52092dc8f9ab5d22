"""Spreadsheets API client - tab metadata and cell values."""

from urllib.parse import quote

from loguru import logger
from pydantic import ValidationError

from sheets_client.base import BaseClient
from sheets_client.errors import UpstreamUnavailable
from sheets_client.spreadsheets.schemas import SpreadsheetSchema, ValueRangeSchema


def a1_sheet_range(tab_name: str) -> str:
    """Whole-sheet A1 range: the quoted tab name, inner quotes doubled."""
    return "'" + tab_name.replace("'", "''") + "'"


def _cell(value) -> str:
    return "" if value is None else str(value)


class SpreadsheetsClient(BaseClient):
    """Client for the Sheets v4 spreadsheets endpoints."""

    async def fetch_tab_titles(self, sheet_id: str) -> list[str | None]:
        """GET /spreadsheets/{id} - tab titles in upstream order."""
        data = await self._get(
            f"spreadsheets/{quote(sheet_id, safe='')}",
            params={"includeGridData": "false", "fields": "sheets.properties.title"},
        )
        try:
            meta = SpreadsheetSchema.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed spreadsheet metadata: {}", e)
            raise UpstreamUnavailable("Malformed spreadsheet metadata") from e

        titles = [s.properties.title for s in meta.sheets]
        logger.info("Fetched {} tab titles for {}", len(titles), sheet_id)
        return titles

    async def fetch_grid(self, sheet_id: str, tab_name: str) -> list[list[str]]:
        """GET /spreadsheets/{id}/values/{range} - every cell of one tab."""
        rng = quote(a1_sheet_range(tab_name), safe="")
        data = await self._get(f"spreadsheets/{quote(sheet_id, safe='')}/values/{rng}")
        try:
            value_range = ValueRangeSchema.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed value range for '{}': {}", tab_name, e)
            raise UpstreamUnavailable(f"Malformed value range for '{tab_name}'") from e

        grid = [[_cell(c) for c in row] for row in value_range.values]
        logger.info("Fetched '{}': {} rows", tab_name, len(grid))
        return grid
