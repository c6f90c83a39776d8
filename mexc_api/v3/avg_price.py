"""Current average price: ``GET /api/v3/avgPrice``."""

from dataclasses import dataclass
from decimal import Decimal

from mexc_api.endpoint import PublicEndpoint, checked_parser, expect_int, expect_object
from mexc_api.helpers import WireQuery
from mexc_api.types import Json, decimal_from_wire

AVG_PRICE_PATH = "/api/v3/avgPrice"


@dataclass
class AvgPriceParams:
    symbol: str


@dataclass
class AvgPriceQuery(WireQuery):
    symbol: str


@dataclass
class AvgPriceOutput:
    """Average price over the last ``mins`` minutes."""

    mins: int
    price: Decimal

    @classmethod
    def from_json(cls, data: Json) -> "AvgPriceOutput":
        avg = expect_object(data)
        return cls(mins=expect_int(avg["mins"]), price=decimal_from_wire(avg["price"]))


class AvgPriceEndpoint(PublicEndpoint):
    async def avg_price(self, params: AvgPriceParams) -> AvgPriceOutput:
        """Get the current average price of a symbol.

        Endpoint:
            GET /api/v3/avgPrice

        """
        return await self._send_public_request(
            AVG_PRICE_PATH,
            AvgPriceQuery(symbol=params.symbol),
            checked_parser(AvgPriceOutput.from_json),
        )
