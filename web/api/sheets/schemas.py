"""Sheets API response schemas."""

from pydantic import BaseModel, Field


class TabsResponse(BaseModel):
    """Tab names of the configured spreadsheet."""

    sheet_id: str = Field(alias="sheetId")
    tabs: list[str]

    class Config:
        populate_by_name = True


class TableResponse(BaseModel):
    """One normalized tab."""

    tab: str
    headers: list[str]
    rows: list[dict[str, str]]


class HealthResponse(BaseModel):
    """Liveness check."""

    ok: bool = True
    ts: int
