"""Grid normalization - raw tab cells to uniformly keyed records."""
from collections.abc import Sequence

from app.models.sheets import NormalizedTable


def column_name(index: int) -> str:
    """Synthesized name for a 0-based column: Col1, Col2, ..."""
    return f"Col{index + 1}"


def trim_headers(row: Sequence[str | None]) -> list[str]:
    """Trimmed header cells; None becomes an empty string."""
    return [(cell or "").strip() for cell in row]


def row_to_record(row: Sequence[str | None], keys: Sequence[str]) -> dict[str, str]:
    """Map cells onto keys; short rows are padded, extra cells dropped."""
    record = {}
    for i, key in enumerate(keys):
        value = row[i] if i < len(row) else None
        record[key] = "" if value is None else value
    return record


def normalize(tab_name: str, grid: Sequence[Sequence[str | None]]) -> NormalizedTable:
    """Normalize a raw grid.

    A first row with at least one non-empty cell is the header row and the
    remaining rows become records keyed by it (``ColN`` for blank headers).
    Otherwise there is no header: every row, the first included, is keyed
    ``Col1..ColN`` with N the widest row. ``headers`` still reports the blank
    first row in that case.
    """
    if not grid:
        return NormalizedTable(tab_name=tab_name)

    headers = trim_headers(grid[0])

    if any(headers):
        keys = [h or column_name(i) for i, h in enumerate(headers)]
        body = grid[1:]
    else:
        width = max(len(row) for row in grid)
        keys = [column_name(i) for i in range(width)]
        body = grid

    return NormalizedTable(
        tab_name=tab_name,
        headers=headers,
        rows=[row_to_record(row, keys) for row in body],
    )
