"""Transport seam between the clients and an async HTTP library.

The clients build complete paths (query string included, signed where
needed) and hand them to an :class:`HttpExecutor`. The executor only moves
bytes: it adds the base URL, the ``X-MEXC-APIKEY`` header for authorized
requests and maps library failures onto
:class:`~mexc_api.errors.TransportError`.
"""

from abc import ABC, abstractmethod


class HttpResponse:
    """Status, raw body and headers of one HTTP exchange.

    The body stays undecoded; :class:`mexc_api.envelope.ApiResponse` parses it.
    """

    status: int
    body: bytes
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        self.body = body if body is not None else b""
        self.headers = headers

    def __repr__(self) -> str:
        return f"HttpResponse(status={self.status}, body={self.body[:64]!r})"


class HttpExecutor(ABC):
    """Async executor for MEXC REST calls.

    Paths must be transmitted verbatim. The exchange hashes the received
    query string byte for byte when checking a signature, so an executor must
    not re-encode or reorder it.
    """

    api_key: str | None = None

    @abstractmethod
    def __init__(
        self,
        api_url: str,
        api_key: str | None,
    ):
        """Bind the executor to a base URL.

        Args:
            api_url: Base URL without a trailing slash, e.g. "https://api.mexc.com".
            api_key: Key sent in the ``X-MEXC-APIKEY`` header, if known yet.

        """
        ...

    @abstractmethod
    async def send_authorized_request(
        self,
        method: str,
        path: str,
    ) -> HttpResponse:
        """Send a request carrying the API key header.

        Args:
            method: "GET" or "DELETE"; MEXC takes every parameter in the query.
            path: Path plus signed query string.

        Raises:
            ValidationError: If no API key has been set.
            TransportError: If no HTTP response was received.

        """
        ...

    @abstractmethod
    async def send_simple_request(
        self,
        path: str,
    ) -> HttpResponse:
        """Send an unauthenticated GET for a market data path."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying HTTP session. Safe to call more than once."""
        ...
