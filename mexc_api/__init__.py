from importlib.metadata import PackageNotFoundError, version

from mexc_api.api import MexcApiClient, MexcApiClientWithAuthentication
from mexc_api.errors import (
    ApiError,
    BadGateway,
    BadHttpStatus,
    BadRequest,
    BaseError,
    DeserializationError,
    ExchangeError,
    Forbidden,
    GatewayTimeout,
    HttpConnectionError,
    InternalServerError,
    MissingCredentialsError,
    NotFound,
    RateLimited,
    SerializationError,
    ServiceUnavailable,
    TransportError,
    TransportTimeoutError,
    Unauthorized,
    ValidationError,
)
from mexc_api.helpers import print_data
from mexc_api.types import (
    KlineInterval,
    MexcApiEndpoint,
    OrderSide,
    OrderStatus,
    OrderType,
)
from mexc_api.v3 import (
    AccountBalance,
    AccountInformationOutput,
    AccountTrade,
    AccountTradeListParams,
    AvgPriceOutput,
    AvgPriceParams,
    CancelledOrder,
    CancelOrderParams,
    DepthLevel,
    DepthOutput,
    DepthParams,
    ExchangeInformationOutput,
    ExchangeInformationParams,
    Kline,
    KlinesParams,
    OpenOrdersParams,
    OrderDetails,
    OrderOutput,
    OrderParams,
    QueryOrderParams,
    ServerTimeOutput,
    SymbolInformation,
    TickerPrice,
    TickerPriceParams,
    TradeOutput,
    TradesParams,
)

try:
    __version__ = version("mexc-api")
except PackageNotFoundError:
    # running from a source checkout that was never installed
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the installed version of the SDK."""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    "print_data",
    # clients
    "MexcApiClient",
    "MexcApiClientWithAuthentication",
    # enums
    "MexcApiEndpoint",
    "OrderSide",
    "OrderType",
    "OrderStatus",
    "KlineInterval",
    # errors
    "BaseError",
    "ExchangeError",
    "ApiError",
    "BadHttpStatus",
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "RateLimited",
    "InternalServerError",
    "BadGateway",
    "ServiceUnavailable",
    "GatewayTimeout",
    "TransportError",
    "HttpConnectionError",
    "TransportTimeoutError",
    "SerializationError",
    "DeserializationError",
    "ValidationError",
    "MissingCredentialsError",
    # endpoint parameters and outputs
    "AccountInformationOutput",
    "AccountBalance",
    "OrderParams",
    "OrderOutput",
    "QueryOrderParams",
    "OrderDetails",
    "CancelOrderParams",
    "CancelledOrder",
    "OpenOrdersParams",
    "AccountTradeListParams",
    "AccountTrade",
    "ServerTimeOutput",
    "ExchangeInformationParams",
    "ExchangeInformationOutput",
    "SymbolInformation",
    "DepthParams",
    "DepthOutput",
    "DepthLevel",
    "TradesParams",
    "TradeOutput",
    "KlinesParams",
    "Kline",
    "AvgPriceParams",
    "AvgPriceOutput",
    "TickerPriceParams",
    "TickerPrice",
]
