"""HTTP executor implementation using httpx.

This module provides async HTTP request handling using the httpx library.
It is the default transport of the MEXC SDK.
"""

import logging
from typing_extensions import override

import httpx

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


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides asynchronous HTTP request execution using a single
    ``httpx.AsyncClient``, whose connection pool is shared by every request
    issued through this executor.
    """

    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            api_url: The base URL for the MEXC API. Defaults to DEFAULT_API_URL.
            api_key: Optional API key for authenticated requests. If not provided,
                authorized requests will fail with a ValidationError.
            timeout: Optional request timeout in seconds. Defaults to the httpx
                default timeout.

        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.client = (
            httpx.AsyncClient(timeout=timeout)
            if timeout is not None
            else httpx.AsyncClient()
        )

    @override
    async def send_simple_request(self, path: str) -> HttpResponse:
        """Send a simple unauthenticated GET request.

        Args:
            path: The API endpoint path to request (will be appended to api_url).

        Returns:
            HttpResponse containing the status code and raw response body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        url = f"{self.api_url}{path}"
        headers = {
            "Accept": "application/json",
            "User-Agent": get_mexc_client(),
        }
        return await self._send("GET", url, headers)

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
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        if self.api_key is None:
            raise ValidationError("api_key is not set")

        url = f"{self.api_url}{path}"
        headers = {
            API_KEY_HEADER: self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": get_mexc_client(),
        }
        return await self._send(method, url, headers)

    async def _send(
        self, method: str, url: str, headers: dict[str, str]
    ) -> HttpResponse:
        # signed query strings stay out of error messages
        endpoint = url.split("?", 1)[0]
        try:
            response = await self.client.request(method, url, headers=headers)
        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"{method} request to {endpoint} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.ConnectError as e:
            raise HttpConnectionError(
                f"Failed to connect to {endpoint}", url=endpoint
            ) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during {method} request to {endpoint}", url=endpoint
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {endpoint} failed: {e}") from e

        log.debug("%s %s -> %d", method, response.url.path, response.status_code)
        return HttpResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    @override
    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self.client.aclose()
