from mexc_api.v3.account_information import (
    AccountBalance,
    AccountInformationEndpoint,
    AccountInformationOutput,
)
from mexc_api.v3.account_trade_list import (
    AccountTrade,
    AccountTradeListEndpoint,
    AccountTradeListParams,
)
from mexc_api.v3.avg_price import AvgPriceEndpoint, AvgPriceOutput, AvgPriceParams
from mexc_api.v3.cancel_order import (
    CancelledOrder,
    CancelOrderEndpoint,
    CancelOrderParams,
)
from mexc_api.v3.default_symbols import DefaultSymbolsEndpoint
from mexc_api.v3.depth import DepthEndpoint, DepthLevel, DepthOutput, DepthParams
from mexc_api.v3.exchange_information import (
    ExchangeInformationEndpoint,
    ExchangeInformationOutput,
    ExchangeInformationParams,
    SymbolInformation,
)
from mexc_api.v3.klines import Kline, KlinesEndpoint, KlinesParams
from mexc_api.v3.open_orders import OpenOrdersEndpoint, OpenOrdersParams
from mexc_api.v3.order import OrderEndpoint, OrderOutput, OrderParams
from mexc_api.v3.ping import PingEndpoint
from mexc_api.v3.query_order import OrderDetails, QueryOrderEndpoint, QueryOrderParams
from mexc_api.v3.server_time import ServerTimeOutput, TimeEndpoint
from mexc_api.v3.ticker_price import TickerPrice, TickerPriceEndpoint, TickerPriceParams
from mexc_api.v3.trades import TradeOutput, TradesEndpoint, TradesParams

__all__ = [
    # public market data
    "PingEndpoint",
    "TimeEndpoint",
    "ServerTimeOutput",
    "DefaultSymbolsEndpoint",
    "ExchangeInformationEndpoint",
    "ExchangeInformationParams",
    "ExchangeInformationOutput",
    "SymbolInformation",
    "DepthEndpoint",
    "DepthParams",
    "DepthOutput",
    "DepthLevel",
    "TradesEndpoint",
    "TradesParams",
    "TradeOutput",
    "KlinesEndpoint",
    "KlinesParams",
    "Kline",
    "AvgPriceEndpoint",
    "AvgPriceParams",
    "AvgPriceOutput",
    "TickerPriceEndpoint",
    "TickerPriceParams",
    "TickerPrice",
    # account and trading
    "AccountInformationEndpoint",
    "AccountInformationOutput",
    "AccountBalance",
    "OrderEndpoint",
    "OrderParams",
    "OrderOutput",
    "QueryOrderEndpoint",
    "QueryOrderParams",
    "OrderDetails",
    "CancelOrderEndpoint",
    "CancelOrderParams",
    "CancelledOrder",
    "OpenOrdersEndpoint",
    "OpenOrdersParams",
    "AccountTradeListEndpoint",
    "AccountTradeListParams",
    "AccountTrade",
]
