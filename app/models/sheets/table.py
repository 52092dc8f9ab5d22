"""Sheets domain entities - normalized tabs."""

from dataclasses import asdict, dataclass, field
from typing import Any

# Rows of string cells, exactly as upstream returns them (rows may be ragged)
RawGrid = list[list[str]]

# Tab names in upstream order
TabList = list[str]


@dataclass
class NormalizedTable:
    """A tab turned into uniformly keyed records."""

    tab_name: str
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
