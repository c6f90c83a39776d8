"""Latest prices: ``GET /api/v3/ticker/price``."""

from dataclasses import dataclass
from decimal import Decimal

from mexc_api.endpoint import (
    PublicEndpoint,
    checked_parser,
    expect_object,
    expect_str,
    parse_list,
)
from mexc_api.helpers import WireQuery
from mexc_api.types import Json, decimal_from_wire

TICKER_PRICE_PATH = "/api/v3/ticker/price"


@dataclass
class TickerPriceParams:
    """Without a symbol, prices of every symbol are returned."""

    symbol: str | None = None


@dataclass
class TickerPriceQuery(WireQuery):
    symbol: str | None = None


@dataclass
class TickerPrice:
    symbol: str
    price: Decimal

    @classmethod
    def from_json(cls, data: Json) -> "TickerPrice":
        ticker = expect_object(data)
        return cls(
            symbol=expect_str(ticker["symbol"]),
            price=decimal_from_wire(ticker["price"]),
        )


def parse_ticker_prices(data: Json) -> list[TickerPrice]:
    # a single symbol is answered with a bare object
    if isinstance(data, dict):
        return [TickerPrice.from_json(data)]
    return parse_list(TickerPrice.from_json)(data)


class TickerPriceEndpoint(PublicEndpoint):
    async def ticker_price(
        self, params: TickerPriceParams | None = None
    ) -> list[TickerPrice]:
        """Get the latest price of one or all symbols.

        Args:
            params: Optional symbol filter

        Returns:
            list[TickerPrice]: One entry per symbol; a single entry when a symbol
                was requested

        Endpoint:
            GET /api/v3/ticker/price

        """
        symbol = params.symbol if params is not None else None
        return await self._send_public_request(
            TICKER_PRICE_PATH,
            TickerPriceQuery(symbol=symbol),
            checked_parser(parse_ticker_prices),
        )
