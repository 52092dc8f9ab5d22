"""Tests for the DI container lifecycle."""

import pytest

from app.container import Container
from app.services.sheets import SheetLoader
from sheets_client import SpreadsheetsClient


class TestContainer:
    @pytest.mark.asyncio
    async def test_init_builds_loader(self, fetcher, clock):
        container = Container(sheet_id="S1", ttl_ms=1000, fetcher=fetcher, clock=clock)
        await container.init()

        assert container.initialized
        assert isinstance(container.sheets, SheetLoader)
        assert container.sheets.sheet_id == "S1"
        await container.close()

    @pytest.mark.asyncio
    async def test_init_is_idempotent(self, fetcher):
        container = Container(sheet_id="S1", fetcher=fetcher)
        await container.init()
        cache = container.cache
        await container.init()
        assert container.cache is cache
        await container.close()

    @pytest.mark.asyncio
    async def test_no_sheet_id(self, fetcher):
        container = Container(sheet_id=None, fetcher=fetcher)
        await container.init()
        assert container.sheets is None
        await container.close()

    @pytest.mark.asyncio
    async def test_close_drops_cache(self, fetcher):
        container = Container(sheet_id="S1", fetcher=fetcher)
        await container.init()
        await container.sheets.list_tabs()
        cache = container.cache
        assert len(cache) == 1

        await container.close()
        assert len(cache) == 0
        assert container.sheets is None
        assert not container.initialized

    @pytest.mark.asyncio
    async def test_default_fetcher_is_sheets_client(self):
        container = Container(sheet_id="S1")
        await container.init()
        assert isinstance(container._client, SpreadsheetsClient)
        await container.close()
        assert container._client is None
