"""Sheets API."""

from web.api.sheets.views import get_all_tabs, get_tab, get_tabs

__all__ = [
    "get_tabs",
    "get_tab",
    "get_all_tabs",
]
