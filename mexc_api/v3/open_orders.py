"""Open orders of a symbol: ``GET /api/v3/openOrders`` (signed)."""

from dataclasses import dataclass

from mexc_api.endpoint import SignedEndpoint, checked_parser, parse_list
from mexc_api.signing import SignedWireQuery
from mexc_api.v3.query_order import OrderDetails

OPEN_ORDERS_PATH = "/api/v3/openOrders"


@dataclass
class OpenOrdersParams:
    symbol: str


@dataclass
class OpenOrdersQuery(SignedWireQuery):
    symbol: str


class OpenOrdersEndpoint(SignedEndpoint):
    async def open_orders(self, params: OpenOrdersParams) -> list[OrderDetails]:
        """Get all open orders of a symbol.

        Args:
            params: The symbol

        Returns:
            list[OrderDetails]: The open orders, possibly empty

        Endpoint:
            GET /api/v3/openOrders

        """
        query = OpenOrdersQuery(symbol=params.symbol, recv_window=self.recv_window)
        return await self._send_signed_request(
            "GET",
            OPEN_ORDERS_PATH,
            query,
            checked_parser(parse_list(OrderDetails.from_json)),
        )
