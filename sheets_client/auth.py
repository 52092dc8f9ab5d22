"""Google service-account credentials for the Sheets API.

Credentials come from one of two places:

1. ``GOOGLE_CREDENTIALS_BASE64``: the service-account JSON, base64 encoded
   (handy on hosts where you cannot ship a key file).
2. Application default credentials, which honour
   ``GOOGLE_APPLICATION_CREDENTIALS`` pointing at a key file.
"""

import asyncio
import base64
import binascii
import json

import google.auth
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from loguru import logger

from sheets_client.errors import CredentialsError

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]


def decode_service_account(encoded: str) -> dict:
    """Decode base64 service-account JSON."""
    try:
        info = json.loads(base64.b64decode(encoded, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.error("Error parsing GOOGLE_CREDENTIALS_BASE64: {}", e)
        raise CredentialsError("Invalid base64 credentials") from e

    if not isinstance(info, dict):
        raise CredentialsError("Invalid base64 credentials")
    return info


class GoogleTokenProvider:
    """Hands out bearer tokens, refreshing credentials off the event loop."""

    def __init__(self, encoded_credentials: str | None = None):
        # Bad base64 is a deployment error: fail at startup, not per request
        self._info = decode_service_account(encoded_credentials) if encoded_credentials else None
        self._credentials = None
        self._lock = asyncio.Lock()

    def _load(self):
        try:
            if self._info is not None:
                return service_account.Credentials.from_service_account_info(self._info, scopes=SCOPES)
            credentials, project = google.auth.default(scopes=SCOPES)
            logger.info("Using application default credentials (project={})", project)
            return credentials
        except (GoogleAuthError, ValueError) as e:
            raise CredentialsError(f"Cannot load Google credentials: {e}") from e

    async def token(self) -> str:
        """Return a valid access token."""
        async with self._lock:
            if self._credentials is None:
                # google.auth.default() can block on the metadata server
                self._credentials = await asyncio.to_thread(self._load)

            if not self._credentials.valid:
                try:
                    await asyncio.to_thread(self._credentials.refresh, Request())
                except GoogleAuthError as e:
                    raise CredentialsError(f"Cannot refresh Google credentials: {e}") from e
                logger.debug("Access token refreshed")

            return self._credentials.token
