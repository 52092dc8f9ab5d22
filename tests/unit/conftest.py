"""Shared fakes for unit tests."""

import asyncio

import pytest


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """In-memory upstream that records every call."""

    def __init__(self, tabs: list | None = None, grids: dict | None = None):
        self.tabs = tabs if tabs is not None else []
        self.grids = grids if grids is not None else {}
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.title_calls = 0
        self.grid_calls: list[str] = []

    async def fetch_tab_titles(self, sheet_id: str) -> list:
        self.title_calls += 1
        if self.error:
            raise self.error
        return list(self.tabs)

    async def fetch_grid(self, sheet_id: str, tab_name: str) -> list[list[str]]:
        self.grid_calls.append(tab_name)
        if self.gate:
            await self.gate.wait()
        if self.error:
            raise self.error
        return self.grids.get(tab_name, [])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher():
    return FakeFetcher(
        tabs=["People", "", "Raw"],
        grids={
            "People": [["Name", "Age"], ["Ana", "30"], ["Leo", ""]],
            "Raw": [["", "", ""], ["a", "b", "c"], ["d", "e"]],
        },
    )
