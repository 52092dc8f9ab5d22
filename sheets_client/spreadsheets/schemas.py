"""Spreadsheets API schemas - metadata and value ranges."""

from typing import Any

from pydantic import BaseModel, Field


class SheetPropertiesSchema(BaseModel):
    """Tab properties (only the fields we request)."""

    sheet_id: int | None = Field(alias="sheetId", default=None)
    title: str | None = None
    index: int | None = None

    class Config:
        populate_by_name = True


class SheetSchema(BaseModel):
    """One tab of a spreadsheet."""

    properties: SheetPropertiesSchema = Field(default_factory=SheetPropertiesSchema)


class SpreadsheetSchema(BaseModel):
    """Spreadsheet metadata (``includeGridData=false``)."""

    spreadsheet_id: str | None = Field(alias="spreadsheetId", default=None)
    sheets: list[SheetSchema] = []

    class Config:
        populate_by_name = True


class ValueRangeSchema(BaseModel):
    """Cell values of a range. ``values`` is omitted upstream for empty tabs."""

    range: str | None = None
    major_dimension: str | None = Field(alias="majorDimension", default=None)
    values: list[list[Any]] = []

    class Config:
        populate_by_name = True
