"""Zeal API client wrapper.

Centralized Zeal API client with bearer auth, error mapping and rate limiting.
The public ``request`` method never raises: every outcome is a ZealResponse.
"""

import asyncio
import json
from functools import lru_cache
from typing import Any

import httpx

from zeal_config.settings import Settings

from .exceptions import (
    ZealAPIError,
    ZealAuthError,
    ZealNotFoundError,
    ZealRateLimitError,
    ZealValidationError,
)
from .schemas import ZealRequest, ZealResponse


class ZealClientWrapper:
    """Zeal API client.

    Provides:
    - Bearer token authentication
    - Error handling and exception mapping
    - Rate limiting (requests per second)
    - Structured error messages carrying the upstream body
    """

    BASE_URL = "https://api.zeal.com"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        rate_limit_per_second: int = 10,
        timeout_seconds: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Zeal client.

        Args:
            api_key: Zeal API token
            base_url: API root, defaults to BASE_URL
            rate_limit_per_second: Max requests per second
            timeout_seconds: Request timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.rate_limit_per_second = rate_limit_per_second
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        self._last_request_time = 0.0
        self._rate_lock: asyncio.Lock | None = None
        self._rate_lock_loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ZealClientWrapper":
        return cls(
            api_key=settings.api_key,
            base_url=settings.ZEAL_API_BASE_URL,
            rate_limit_per_second=settings.ZEAL_RATE_LIMIT_PER_SECOND,
            timeout_seconds=settings.ZEAL_TIMEOUT_SECONDS,
            **kwargs,
        )

    @classmethod
    def shared(cls, settings: Settings) -> "ZealClientWrapper":
        """Client shared by every tool built from equivalent settings."""
        return _shared_client(
            settings.api_key,
            settings.ZEAL_API_BASE_URL,
            settings.ZEAL_RATE_LIMIT_PER_SECOND,
            settings.ZEAL_TIMEOUT_SECONDS,
        )

    def _get_headers(self, with_body: bool) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_rate_lock(self) -> asyncio.Lock:
        # The shared client can outlive an event loop (CLI runs, tests)
        loop = asyncio.get_running_loop()
        if self._rate_lock is None or self._rate_lock_loop is not loop:
            self._rate_lock = asyncio.Lock()
            self._rate_lock_loop = loop
        return self._rate_lock

    async def _rate_limit(self) -> None:
        """Enforce rate limiting.

        Callers take request slots one at a time, so concurrent tool calls
        are spaced at least 1/rate_limit_per_second apart.
        """
        async with self._get_rate_lock():
            loop = asyncio.get_running_loop()
            time_since_last_request = loop.time() - self._last_request_time
            min_interval = 1.0 / self.rate_limit_per_second

            if time_since_last_request < min_interval:
                await asyncio.sleep(min_interval - time_since_last_request)

            self._last_request_time = loop.time()

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Upstream error body as compact JSON, or raw text if it is not JSON."""
        try:
            return json.dumps(response.json(), separators=(",", ":"))
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

    def _handle_error(self, response: httpx.Response) -> None:
        """Map Zeal API errors to custom exceptions."""
        status = response.status_code
        message = self._error_detail(response)

        if status in (401, 403):
            raise ZealAuthError(message, status_code=status)
        elif status == 404:
            raise ZealNotFoundError(message, status_code=status)
        elif status == 429:
            raise ZealRateLimitError(message, status_code=status)
        elif status in (400, 422):
            raise ZealValidationError(message, status_code=status)
        else:
            raise ZealAPIError(message, status_code=status)

    async def _send(self, request: ZealRequest) -> httpx.Response:
        await self._rate_limit()

        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self.transport
        ) as client:
            return await client.request(
                request.method,
                self.url_for(request.path),
                headers=self._get_headers(request.body is not None),
                params=request.params or None,
                json=request.body,
            )

    async def request(self, request: ZealRequest) -> ZealResponse:
        """Perform one upstream call.

        Returns:
            ZealResponse with parsed JSON data, or an error message that
            embeds the upstream body / exception text
        """
        if not self.api_key:
            return ZealResponse(
                success=False,
                error="Zeal API key is not configured (set ZEAL_API_KEY)",
            )

        try:
            response = await self._send(request)

            if not response.is_success:
                self._handle_error(response)

            if not response.content:
                return ZealResponse(success=True, data={}, status_code=response.status_code)

            try:
                data = response.json()
            except ValueError as e:
                raise ZealAPIError(
                    f"Malformed JSON in response: {e}", status_code=response.status_code
                ) from e

            return ZealResponse(success=True, data=data, status_code=response.status_code)

        except ZealAPIError as e:
            return ZealResponse(success=False, error=str(e), status_code=e.status_code)
        except httpx.TimeoutException:
            return ZealResponse(
                success=False,
                error=f"Request timed out after {self.timeout_seconds}s",
            )
        except httpx.HTTPError as e:
            return ZealResponse(success=False, error=f"{type(e).__name__}: {e}")
        except Exception as e:
            return ZealResponse(success=False, error=f"Unexpected error: {e}")


@lru_cache(maxsize=8)
def _shared_client(
    api_key: str, base_url: str, rate_limit_per_second: int, timeout_seconds: float
) -> ZealClientWrapper:
    return ZealClientWrapper(
        api_key=api_key,
        base_url=base_url,
        rate_limit_per_second=rate_limit_per_second,
        timeout_seconds=timeout_seconds,
    )
