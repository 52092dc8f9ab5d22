"""Tests for the Sheets API client."""

import httpx
import pytest

from sheets_client import CredentialsError, SpreadsheetsClient, UpstreamUnavailable
from sheets_client.spreadsheets import a1_sheet_range

BASE_URL = "https://sheets.test/v4"


class StaticToken:
    def __init__(self, value: str = "tok", error: Exception | None = None):
        self.value = value
        self.error = error

    async def token(self) -> str:
        if self.error:
            raise self.error
        return self.value


def make_client(handler, retries: int = 1, token_provider=None) -> SpreadsheetsClient:
    return SpreadsheetsClient(
        token_provider=token_provider,
        base_url=BASE_URL,
        retries=retries,
        transport=httpx.MockTransport(handler),
    )


class TestRange:
    def test_quoted(self):
        assert a1_sheet_range("My Tab") == "'My Tab'"

    def test_inner_quote_doubled(self):
        assert a1_sheet_range("Bob's") == "'Bob''s'"


class TestTabTitles:
    @pytest.mark.asyncio
    async def test_titles_in_order(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(
                200,
                json={"sheets": [{"properties": {"title": "B"}}, {"properties": {"title": "A"}}, {"properties": {}}]},
            )

        async with make_client(handler, token_provider=StaticToken("abc")) as client:
            titles = await client.fetch_tab_titles("S1")

        assert titles == ["B", "A", None]
        assert seen["path"] == "/v4/spreadsheets/S1"
        assert seen["params"] == {"includeGridData": "false", "fields": "sheets.properties.title"}
        assert seen["auth"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_no_sheets(self):
        async with make_client(lambda r: httpx.Response(200, json={})) as client:
            assert await client.fetch_tab_titles("S1") == []


class TestGrid:
    @pytest.mark.asyncio
    async def test_whole_tab_range(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            return httpx.Response(200, json={"range": "'My Tab'!A1:B2", "values": [["Name"], ["Ana"]]})

        async with make_client(handler) as client:
            grid = await client.fetch_grid("S1", "My Tab")

        assert grid == [["Name"], ["Ana"]]
        assert seen["path"] == "/v4/spreadsheets/S1/values/'My Tab'"

    @pytest.mark.asyncio
    async def test_empty_tab(self):
        async with make_client(lambda r: httpx.Response(200, json={"range": "'E'!A1:Z1000"})) as client:
            assert await client.fetch_grid("S1", "E") == []

    @pytest.mark.asyncio
    async def test_cells_stringified(self):
        async with make_client(lambda r: httpx.Response(200, json={"values": [[1, None, True, "x"]]})) as client:
            assert await client.fetch_grid("S1", "T") == [["1", "", "True", "x"]]


class TestErrors:
    @pytest.mark.asyncio
    async def test_client_error_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(403, json={"error": {"message": "denied"}})

        async with make_client(handler, retries=3) as client:
            with pytest.raises(UpstreamUnavailable, match="403"):
                await client.fetch_tab_titles("S1")
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_server_error_retried(self):
        responses = [httpx.Response(503), httpx.Response(200, json={"values": [["a"]]})]

        async with make_client(lambda r: responses.pop(0), retries=2) as client:
            assert await client.fetch_grid("S1", "T") == [["a"]]
            assert client.request_count == 2

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        async with make_client(handler) as client:
            with pytest.raises(UpstreamUnavailable, match="ConnectError"):
                await client.fetch_tab_titles("S1")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        async with make_client(lambda r: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(UpstreamUnavailable, match="invalid response"):
                await client.fetch_grid("S1", "T")

    @pytest.mark.asyncio
    async def test_malformed_values(self):
        async with make_client(lambda r: httpx.Response(200, json={"values": "nope"})) as client:
            with pytest.raises(UpstreamUnavailable, match="Malformed"):
                await client.fetch_grid("S1", "T")

    @pytest.mark.asyncio
    async def test_credentials_failure(self):
        provider = StaticToken(error=CredentialsError("no key"))
        async with make_client(lambda r: httpx.Response(200, json={}), token_provider=provider) as client:
            with pytest.raises(UpstreamUnavailable, match="no key"):
                await client.fetch_tab_titles("S1")

    @pytest.mark.asyncio
    async def test_not_open(self):
        client = make_client(lambda r: httpx.Response(200, json={}))
        with pytest.raises(RuntimeError):
            await client.fetch_tab_titles("S1")
