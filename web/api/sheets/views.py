"""Sheets API views - thin layer over the loader."""

from app.container import Container
from app.models.sheets import NormalizedTable
from web.api.errors import require_loader, validate_tab

from .schemas import TableResponse, TabsResponse


def _table_response(table: NormalizedTable) -> TableResponse:
    return TableResponse(tab=table.tab_name, headers=table.headers, rows=table.rows)


async def get_tabs(container: Container) -> TabsResponse:
    """Get tab names."""
    loader = require_loader(container)
    tabs = await loader.list_tabs()
    return TabsResponse(sheet_id=loader.sheet_id, tabs=tabs)


async def get_tab(container: Container, tab_name: str) -> TableResponse:
    """Get one tab as records. Unknown tabs fail before any grid fetch."""
    loader = require_loader(container)
    validate_tab(tab_name, await loader.list_tabs())
    return _table_response(await loader.load_tab(tab_name))


async def get_all_tabs(container: Container) -> dict[str, TableResponse]:
    """Get every tab as records, keyed by tab name."""
    loader = require_loader(container)
    tables = await loader.load_all()
    return {name: _table_response(t) for name, t in tables.items()}
