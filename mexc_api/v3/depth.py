"""Order book snapshot: ``GET /api/v3/depth``."""

from dataclasses import dataclass
from decimal import Decimal

from mexc_api.endpoint import (
    PublicEndpoint,
    check_limit,
    checked_parser,
    expect_array,
    expect_int,
    expect_object,
)
from mexc_api.helpers import WireQuery
from mexc_api.types import Json, decimal_from_wire

DEPTH_PATH = "/api/v3/depth"

MAX_DEPTH_LIMIT = 5000


@dataclass
class DepthParams:
    """Order book request.

    Attributes:
        symbol: Trading pair, e.g. "MXUSDT"
        limit: Number of levels per side, 1-5000 (exchange default 100)

    """

    symbol: str
    limit: int | None = None


@dataclass
class DepthQuery(WireQuery):
    symbol: str
    limit: int | None = None

    @classmethod
    def from_params(cls, params: DepthParams) -> "DepthQuery":
        return cls(symbol=params.symbol, limit=check_limit(params.limit, MAX_DEPTH_LIMIT))


@dataclass
class DepthLevel:
    price: Decimal
    quantity: Decimal

    @classmethod
    def from_json(cls, data: Json) -> "DepthLevel":
        # levels are [price, quantity] pairs
        price, quantity = expect_array(data)[:2]
        return cls(price=decimal_from_wire(price), quantity=decimal_from_wire(quantity))


@dataclass
class DepthOutput:
    last_update_id: int
    bids: list[DepthLevel]
    asks: list[DepthLevel]

    @classmethod
    def from_json(cls, data: Json) -> "DepthOutput":
        depth = expect_object(data)
        return cls(
            last_update_id=expect_int(depth["lastUpdateId"]),
            bids=[DepthLevel.from_json(level) for level in expect_array(depth["bids"])],
            asks=[DepthLevel.from_json(level) for level in expect_array(depth["asks"])],
        )


class DepthEndpoint(PublicEndpoint):
    async def depth(self, params: DepthParams) -> DepthOutput:
        """Get an order book snapshot.

        Args:
            params: The symbol and number of levels

        Returns:
            DepthOutput: Bids (best first) and asks (best first) with the update
                id of the snapshot

        Raises:
            ValidationError: If the limit is out of range
            DeserializationError: If the API response cannot be parsed

        Endpoint:
            GET /api/v3/depth

        """
        return await self._send_public_request(
            DEPTH_PATH,
            DepthQuery.from_params(params),
            checked_parser(DepthOutput.from_json),
        )
