"""Recent trades: ``GET /api/v3/trades``."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    PublicEndpoint,
    check_limit,
    checked_parser,
    expect_bool,
    expect_object,
    parse_list,
)
from mexc_api.helpers import WireQuery
from mexc_api.types import Json, datetime_from_ms, decimal_from_wire

TRADES_PATH = "/api/v3/trades"

MAX_TRADES_LIMIT = 1000


@dataclass
class TradesParams:
    symbol: str
    limit: int | None = None


@dataclass
class TradesQuery(WireQuery):
    symbol: str
    limit: int | None = None

    @classmethod
    def from_params(cls, params: TradesParams) -> "TradesQuery":
        return cls(symbol=params.symbol, limit=check_limit(params.limit, MAX_TRADES_LIMIT))


@dataclass
class TradeOutput:
    """A public trade.

    ``id`` is not always reported by the exchange and is None then.
    """

    id: str | None
    price: Decimal
    qty: Decimal
    quote_qty: Decimal
    time: datetime
    is_buyer_maker: bool
    is_best_match: bool

    @classmethod
    def from_json(cls, data: Json) -> "TradeOutput":
        trade = expect_object(data)
        trade_id = trade.get("id")
        return cls(
            id=None if trade_id is None else str(trade_id),
            price=decimal_from_wire(trade["price"]),
            qty=decimal_from_wire(trade["qty"]),
            quote_qty=decimal_from_wire(trade["quoteQty"]),
            time=datetime_from_ms(trade["time"]),
            is_buyer_maker=expect_bool(trade["isBuyerMaker"]),
            is_best_match=expect_bool(trade["isBestMatch"]),
        )


class TradesEndpoint(PublicEndpoint):
    async def trades(self, params: TradesParams) -> list[TradeOutput]:
        """Get the most recent trades of a symbol.

        Args:
            params: The symbol and number of trades (1-1000, exchange default 500)

        Returns:
            list[TradeOutput]: Recent trades

        Endpoint:
            GET /api/v3/trades

        """
        return await self._send_public_request(
            TRADES_PATH,
            TradesQuery.from_params(params),
            checked_parser(parse_list(TradeOutput.from_json)),
        )
