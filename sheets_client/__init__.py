"""Google Sheets API client package."""

from sheets_client.auth import GoogleTokenProvider
from sheets_client.base import BaseClient, TokenProvider
from sheets_client.errors import CredentialsError, UpstreamUnavailable
from sheets_client.spreadsheets import SpreadsheetsClient

__all__ = [
    # Base
    "BaseClient",
    "TokenProvider",
    "GoogleTokenProvider",
    # Errors
    "UpstreamUnavailable",
    "CredentialsError",
    # Clients
    "SpreadsheetsClient",
]
