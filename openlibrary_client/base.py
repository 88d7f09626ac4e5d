"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import API_BASE_URL, API_TIMEOUT


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with request limiting and exponential backoff."""

    def __init__(
        self,
        max_concurrent: int = 10,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )

    async def aclose(self) -> None:
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(f"{self._base_url}/{path.lstrip('/')}", params=params)
            resp.raise_for_status()
            return resp.json()


async def safe_request(coro, default=None):
    """Execute coroutine, return default on failure."""
    try:
        return await coro
    except Exception as e:
        logger.warning("Request failed: {}", e)
        return default if default is not None else []
