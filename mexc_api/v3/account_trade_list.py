"""Trade history of the account: ``GET /api/v3/myTrades`` (signed)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    SignedEndpoint,
    check_limit,
    checked_parser,
    expect_bool,
    expect_object,
    expect_str,
    parse_list,
)
from mexc_api.errors import ValidationError
from mexc_api.signing import SignedWireQuery
from mexc_api.types import Json, datetime_from_ms, datetime_to_ms, decimal_from_wire
from mexc_api.v3.query_order import optional_int, optional_str

ACCOUNT_TRADE_LIST_PATH = "/api/v3/myTrades"

MAX_ACCOUNT_TRADES_LIMIT = 100


@dataclass
class AccountTradeListParams:
    """Account trade history request.

    Attributes:
        symbol: Trading pair, e.g. "MXUSDT"
        order_id: Only trades of this order
        start_time: Only trades at or after this time
        end_time: Only trades at or before this time
        limit: Number of trades, 1-100 (exchange default 100)

    """

    symbol: str
    order_id: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int | None = None


@dataclass
class AccountTradeListQuery(SignedWireQuery):
    symbol: str
    order_id: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int | None = None

    @classmethod
    def from_params(
        cls, params: AccountTradeListParams, recv_window: int | None
    ) -> "AccountTradeListQuery":
        if (
            params.start_time is not None
            and params.end_time is not None
            and datetime_to_ms(params.start_time) > datetime_to_ms(params.end_time)
        ):
            raise ValidationError("start_time must not be after end_time")
        return cls(
            symbol=params.symbol,
            order_id=params.order_id,
            start_time=params.start_time,
            end_time=params.end_time,
            limit=check_limit(params.limit, MAX_ACCOUNT_TRADES_LIMIT),
            recv_window=recv_window,
        )


@dataclass
class AccountTrade:
    """A fill of one of the account's orders."""

    symbol: str
    id: str
    order_id: str
    order_list_id: int | None
    price: Decimal
    qty: Decimal
    quote_qty: Decimal
    commission: Decimal
    commission_asset: str
    time: datetime
    is_buyer: bool
    is_maker: bool
    is_best_match: bool
    client_order_id: str | None

    @classmethod
    def from_json(cls, data: Json) -> "AccountTrade":
        trade = expect_object(data)
        return cls(
            symbol=expect_str(trade["symbol"]),
            id=str(trade["id"]),
            order_id=str(trade["orderId"]),
            order_list_id=optional_int(trade.get("orderListId")),
            price=decimal_from_wire(trade["price"]),
            qty=decimal_from_wire(trade["qty"]),
            quote_qty=decimal_from_wire(trade["quoteQty"]),
            commission=decimal_from_wire(trade["commission"]),
            commission_asset=expect_str(trade["commissionAsset"]),
            time=datetime_from_ms(trade["time"]),
            is_buyer=expect_bool(trade["isBuyer"]),
            is_maker=expect_bool(trade["isMaker"]),
            is_best_match=expect_bool(trade["isBestMatch"]),
            client_order_id=optional_str(trade.get("clientOrderId")),
        )


class AccountTradeListEndpoint(SignedEndpoint):
    async def account_trade_list(
        self, params: AccountTradeListParams
    ) -> list[AccountTrade]:
        """Get the account's trades of a symbol.

        Args:
            params: The symbol plus optional order and time filters

        Returns:
            list[AccountTrade]: The matching trades

        Raises:
            ValidationError: If the time range or limit is invalid
            DeserializationError: If the API response cannot be parsed

        Endpoint:
            GET /api/v3/myTrades

        """
        query = AccountTradeListQuery.from_params(params, self.recv_window)
        return await self._send_signed_request(
            "GET",
            ACCOUNT_TRADE_LIST_PATH,
            query,
            checked_parser(parse_list(AccountTrade.from_json)),
        )
