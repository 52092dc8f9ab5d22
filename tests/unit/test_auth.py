"""Tests for Google credential loading."""

import asyncio
import base64
import json
import time

import pytest
from google.auth.exceptions import DefaultCredentialsError, RefreshError

from sheets_client import CredentialsError, GoogleTokenProvider
from sheets_client.auth import decode_service_account


def encode(obj) -> str:
    return base64.b64encode(json.dumps(obj).encode()).decode()


class FakeCredentials:
    def __init__(self, fail: bool = False):
        self.token = None
        self.refreshed = 0
        self.fail = fail

    @property
    def valid(self) -> bool:
        return self.token is not None

    def refresh(self, request) -> None:
        if self.fail:
            raise RefreshError("revoked")
        self.refreshed += 1
        self.token = f"tok-{self.refreshed}"


class TestDecode:
    def test_valid(self):
        assert decode_service_account(encode({"type": "service_account"})) == {"type": "service_account"}

    def test_not_base64(self):
        with pytest.raises(CredentialsError):
            decode_service_account("%%% not base64 %%%")

    def test_not_json(self):
        with pytest.raises(CredentialsError):
            decode_service_account(base64.b64encode(b"hello").decode())

    def test_not_object(self):
        with pytest.raises(CredentialsError):
            decode_service_account(encode(["a"]))

    def test_provider_fails_fast(self):
        with pytest.raises(CredentialsError):
            GoogleTokenProvider("%%%")


class TestTokenProvider:
    @pytest.mark.asyncio
    async def test_refreshes_once(self, monkeypatch):
        creds = FakeCredentials()
        monkeypatch.setattr("google.auth.default", lambda scopes: (creds, "proj"))
        provider = GoogleTokenProvider()

        assert await provider.token() == "tok-1"
        assert await provider.token() == "tok-1"
        assert creds.refreshed == 1

    @pytest.mark.asyncio
    async def test_refresh_failure(self, monkeypatch):
        monkeypatch.setattr("google.auth.default", lambda scopes: (FakeCredentials(fail=True), "proj"))
        with pytest.raises(CredentialsError, match="revoked"):
            await GoogleTokenProvider().token()

    @pytest.mark.asyncio
    async def test_slow_default_credentials_do_not_block_loop(self, monkeypatch):
        def slow_default(scopes):
            time.sleep(0.3)
            raise DefaultCredentialsError("no metadata server")

        monkeypatch.setattr("google.auth.default", slow_default)
        provider = GoogleTokenProvider()
        longest_gap = 0.0

        async def ticker():
            nonlocal longest_gap
            last = time.perf_counter()
            while True:
                await asyncio.sleep(0.01)
                now = time.perf_counter()
                longest_gap = max(longest_gap, now - last)
                last = now

        ticks = asyncio.create_task(ticker())
        try:
            with pytest.raises(CredentialsError, match="no metadata server"):
                await provider.token()
        finally:
            ticks.cancel()

        assert longest_gap < 0.2
