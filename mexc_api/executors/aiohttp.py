"""HTTP executor implementation using aiohttp.

This module provides async HTTP request handling using the aiohttp library,
as an alternative to the default httpx executor.
"""

import asyncio
import logging
from typing_extensions import override

import aiohttp
from yarl import URL

from mexc_api.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from mexc_api.executors.interface import HttpExecutor, HttpResponse
from mexc_api.helpers import API_KEY_HEADER, DEFAULT_API_URL, get_mexc_client

log = logging.getLogger(__name__)


class AiohttpHttpExecutor(HttpExecutor):
    """HTTP executor implementation using aiohttp.

    Manages one aiohttp ClientSession, created lazily on the first request
    because aiohttp sessions must be created inside a running event loop.
    """

    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize an AiohttpHttpExecutor.

        Args:
            api_url: The base URL for the MEXC API. Defaults to DEFAULT_API_URL.
            api_key: Optional API key for authenticated requests.
            timeout: Optional total request timeout in seconds.

        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @override
    async def send_simple_request(self, path: str) -> HttpResponse:
        """Send a simple unauthenticated GET request.

        Args:
            path: The API endpoint path to request (will be appended to api_url).

        Returns:
            HttpResponse containing the status code and raw response body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If the connection fails.
            TransportError: If any other transport-level error occurs.

        """
        headers = {
            "Accept": "application/json",
            "User-Agent": get_mexc_client(),
        }
        return await self._send("GET", f"{self.api_url}{path}", headers)

    @override
    async def send_authorized_request(self, method: str, path: str) -> HttpResponse:
        """Send an authenticated request to the API.

        Args:
            method: The HTTP method to use (e.g., 'GET', 'DELETE').
            path: The API endpoint path, including the signed query string.

        Returns:
            HttpResponse containing the status code and raw response body.

        Raises:
            ValidationError: If the api_key is not set.
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If the connection fails.
            TransportError: If any other transport-level error occurs.

        """
        if self.api_key is None:
            raise ValidationError("api_key is not set")

        headers = {
            API_KEY_HEADER: self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": get_mexc_client(),
        }
        return await self._send(method, f"{self.api_url}{path}", headers)

    async def _send(
        self, method: str, url: str, headers: dict[str, str]
    ) -> HttpResponse:
        # signed query strings stay out of error messages
        endpoint = url.split("?", 1)[0]
        try:
            if self._session is None:
                self._session = (
                    aiohttp.ClientSession(
                        timeout=aiohttp.ClientTimeout(total=self.timeout)
                    )
                    if self.timeout is not None
                    else aiohttp.ClientSession()
                )

            # encoded=True keeps the signed query string byte for byte
            async with self._session.request(
                method, URL(url, encoded=True), headers=headers
            ) as response:
                body = await response.read()
                status = response.status
                response_headers = dict(response.headers)
        except BaseError:
            raise
        except asyncio.TimeoutError as e:
            raise TransportTimeoutError(
                f"{method} request to {endpoint} timed out", timeout_seconds=self.timeout
            ) from e
        except aiohttp.ClientConnectionError as e:
            raise HttpConnectionError(
                f"Failed to connect to {endpoint}", url=endpoint
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {endpoint} failed: {e}") from e

        log.debug("%s %s -> %d", method, endpoint, status)
        return HttpResponse(status=status, body=body, headers=response_headers)

    @override
    async def close(self) -> None:
        """Close the executor and its underlying aiohttp session."""
        if self._session is not None:
            await self._session.close()
            self._session = None
