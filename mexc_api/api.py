"""HTTP API clients for the MEXC Spot v3 REST API.

This module provides :class:`MexcApiClient` for the public market data
endpoints and :class:`MexcApiClientWithAuthentication`, which adds the account
and trading endpoints that require a signed request.
"""

import logging
from types import TracebackType
from typing import Callable, TypeVar

from typing_extensions import override

from mexc_api.endpoint import PublicEndpoint, SignedEndpoint
from mexc_api.envelope import ApiResponse
from mexc_api.errors import MissingCredentialsError, ValidationError
from mexc_api.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from mexc_api.helpers import WireQuery, serialize_query, with_query
from mexc_api.signing import sign_query
from mexc_api.types import MAX_RECV_WINDOW_MS, Json, MexcApiEndpoint, endpoint_url
from mexc_api.v3 import (
    AccountInformationEndpoint,
    AccountTradeListEndpoint,
    AvgPriceEndpoint,
    CancelOrderEndpoint,
    DefaultSymbolsEndpoint,
    DepthEndpoint,
    ExchangeInformationEndpoint,
    KlinesEndpoint,
    OpenOrdersEndpoint,
    OrderEndpoint,
    PingEndpoint,
    QueryOrderEndpoint,
    TickerPriceEndpoint,
    TimeEndpoint,
    TradesEndpoint,
)

log = logging.getLogger(__name__)

T = TypeVar("T")


def validate_recv_window(recv_window: int | None) -> int | None:
    """Check a receive window against the exchange's bound.

    Args:
        recv_window: Receive window in milliseconds, or None to use the
            exchange default

    Returns:
        int | None: The receive window

    Raises:
        ValidationError: If the receive window is not an integer in 1..60000

    """
    if recv_window is None:
        return None
    if isinstance(recv_window, bool) or not isinstance(recv_window, int):
        raise ValidationError(
            f"recv_window must be an integer, got {type(recv_window).__name__}"
        )
    if not 0 < recv_window <= MAX_RECV_WINDOW_MS:
        raise ValidationError(
            f"recv_window must be between 1 and {MAX_RECV_WINDOW_MS} ms, got {recv_window}"
        )
    return recv_window


class MexcApiClient(
    PingEndpoint,
    TimeEndpoint,
    DefaultSymbolsEndpoint,
    ExchangeInformationEndpoint,
    DepthEndpoint,
    TradesEndpoint,
    KlinesEndpoint,
    AvgPriceEndpoint,
    TickerPriceEndpoint,
    PublicEndpoint,
):
    """MEXC API client for the public market data endpoints.

    Examples:
        .. code-block:: python

            from mexc_api import DepthParams, MexcApiClient

            async with MexcApiClient() as client:
                await client.ping()
                depth = await client.depth(DepthParams(symbol="MXUSDT", limit=5))
                print(depth.bids[0].price)
    """

    _http_executor: HttpExecutor

    def __init__(
        self,
        endpoint: MexcApiEndpoint | str = MexcApiEndpoint.BASE,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
    ):
        """Initialize the public API client.

        Args:
            endpoint: The API endpoint, or a custom base URL (sandbox, proxy or
                mock server)
            executor: Custom HTTP executor (optional, uses default if not provided)
            timeout: Request timeout in seconds for the default executor

        Raises:
            ValidationError: If the endpoint is not a valid base URL

        """
        api_url = endpoint_url(endpoint)
        self._endpoint = endpoint
        self._http_executor = (
            executor
            if executor is not None
            else DEFAULT_HTTP_EXECUTOR(api_url=api_url, timeout=timeout)  # type: ignore
        )
        self._closed = False

    @property
    def endpoint(self) -> MexcApiEndpoint | str:
        """The endpoint this client was created for."""
        return self._endpoint

    @property
    def base_url(self) -> str:
        return endpoint_url(self._endpoint)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self.base_url!r})"

    async def close(self) -> None:
        """Release the executor's HTTP session. Calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        await self._http_executor.close()

    async def __aenter__(self) -> "MexcApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    @override
    async def _send_public_request(
        self,
        path: str,
        query: WireQuery | None,
        parse: Callable[[Json], T],
    ) -> T:
        path = with_query(path, serialize_query(query))
        log.debug("GET %s", path)
        response = await self._http_executor.send_simple_request(path)
        return ApiResponse.from_http_response(
            response, parse, f"{self.base_url}{path}"
        ).into_result()


class MexcApiClientWithAuthentication(
    AccountInformationEndpoint,
    OrderEndpoint,
    QueryOrderEndpoint,
    CancelOrderEndpoint,
    OpenOrdersEndpoint,
    AccountTradeListEndpoint,
    SignedEndpoint,
    MexcApiClient,
):
    """MEXC API client for the account and trading endpoints.

    Also serves every public endpoint of :class:`MexcApiClient`. The API key is
    sent in the ``X-MEXC-APIKEY`` header; the secret only keys the request
    signatures and never leaves the process.

    Examples:
        .. code-block:: python

            from decimal import Decimal

            from mexc_api import (
                MexcApiClientWithAuthentication,
                OrderParams,
                OrderSide,
                OrderType,
            )

            async with MexcApiClientWithAuthentication(
                api_key="your-api-key", api_secret="your-api-secret", recv_window=5000
            ) as client:
                account = await client.account_information()
                print(account.balances)

                order = await client.order(
                    OrderParams(
                        symbol="KASUSDT",
                        side=OrderSide.BUY,
                        order_type=OrderType.LIMIT,
                        quantity=Decimal("1"),
                        price=Decimal("0.00001"),
                    )
                )
                print(order.order_id)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        endpoint: MexcApiEndpoint | str = MexcApiEndpoint.BASE,
        recv_window: int | None = None,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
    ):
        """Initialize the authenticated API client.

        Args:
            api_key: Your API key
            api_secret: Your API secret, used to sign requests
            endpoint: The API endpoint, or a custom base URL
            recv_window: Receive window in milliseconds attached to every
                signed request (at most 60000). The exchange default applies
                when omitted.
            executor: Custom HTTP executor (optional, uses default if not provided)
            timeout: Request timeout in seconds for the default executor

        Raises:
            MissingCredentialsError: If the API key or secret is empty
            ValidationError: If the receive window is out of range

        """
        if not api_key:
            raise MissingCredentialsError("API key")
        if not api_secret:
            raise MissingCredentialsError("API secret")
        self._recv_window = validate_recv_window(recv_window)
        self.__api_secret = api_secret

        super().__init__(endpoint=endpoint, executor=executor, timeout=timeout)
        self._http_executor.api_key = api_key

    @property
    @override
    def recv_window(self) -> int | None:
        return self._recv_window

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(endpoint={self.base_url!r}, "
            f"recv_window={self._recv_window!r})"
        )

    @override
    async def _send_signed_request(
        self,
        method: str,
        path: str,
        query: WireQuery,
        parse: Callable[[Json], T],
    ) -> T:
        signed = sign_query(query, self.__api_secret)
        log.debug("%s %s (signed)", method, path)
        full_path = with_query(path, signed.to_query_string())
        response = await self._http_executor.send_authorized_request(method, full_path)
        return ApiResponse.from_http_response(
            response, parse, f"{self.base_url}{path}"
        ).into_result()
