"""Base HTTP client with retry logic."""

from typing import Any, Protocol

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from sheets_client.errors import CredentialsError, UpstreamUnavailable

# Default settings
API_BASE_URL = "https://sheets.googleapis.com/v4"
API_TIMEOUT = 30
API_RETRIES = 3


class TokenProvider(Protocol):
    """Anything that can hand out a bearer token."""

    async def token(self) -> str: ...


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with exponential backoff on transient errors."""

    def __init__(
        self,
        token_provider: TokenProvider | None = None,
        base_url: str = API_BASE_URL,
        timeout: int = API_TIMEOUT,
        retries: int = API_RETRIES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._token_provider = token_provider
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._retries = max(1, retries)
        self._transport = transport
        self._request_count = 0
        logger.info("{}: base_url={}, retries={}", self.__class__.__name__, self._base_url, self._retries)

    @property
    def request_count(self) -> int:
        return self._request_count

    async def open(self) -> None:
        """Create the underlying connection pool."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )

    async def close(self) -> None:
        """Close the connection pool."""
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.close()

    async def _headers(self) -> dict[str, str]:
        if self._token_provider is None:
            return {}
        return {"Authorization": f"Bearer {await self._token_provider.token()}"}

    async def _send(self, path: str, params: dict[str, Any] | None) -> Any:
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")

        self._request_count += 1
        resp = await self._client.get(
            f"{self._base_url}/{path}",
            params=params,
            headers=await self._headers(),
        )
        resp.raise_for_status()
        return resp.json()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET request with retry logic; every failure surfaces as UpstreamUnavailable."""
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._retries),
                wait=wait_exponential(multiplier=1, min=1, max=30),
                retry=retry_if_exception(_is_retryable_error),
                reraise=True,
            ):
                with attempt:
                    return await self._send(path, params)
        except httpx.HTTPStatusError as e:
            logger.warning("Upstream returned {} for {}", e.response.status_code, path)
            raise UpstreamUnavailable(f"Upstream returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Upstream request failed for {}: {}", path, e)
            raise UpstreamUnavailable(f"Upstream request failed: {e.__class__.__name__}") from e
        except CredentialsError as e:
            logger.error("Credentials failure: {}", e.message)
            raise UpstreamUnavailable(e.message) from e
        except ValueError as e:
            logger.warning("Upstream sent invalid JSON for {}", path)
            raise UpstreamUnavailable("Upstream sent an invalid response") from e
