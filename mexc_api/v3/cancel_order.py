"""Order cancellation: ``DELETE /api/v3/order`` (signed)."""

from dataclasses import dataclass
from decimal import Decimal

from mexc_api.endpoint import SignedEndpoint, checked_parser, expect_object, expect_str
from mexc_api.signing import SignedWireQuery
from mexc_api.types import (
    Json,
    OrderSide,
    OrderStatus,
    OrderType,
    decimal_from_wire,
)
from mexc_api.v3.query_order import check_order_selector, optional_str

CANCEL_ORDER_PATH = "/api/v3/order"


@dataclass
class CancelOrderParams:
    """Cancellation of one order.

    Attributes:
        symbol: Trading pair of the order
        order_id: Exchange id of the order
        orig_client_order_id: Client id the order was placed with
        new_client_order_id: Client id identifying this cancellation

    """

    symbol: str
    order_id: str | None = None
    orig_client_order_id: str | None = None
    new_client_order_id: str | None = None


@dataclass
class CancelOrderQuery(SignedWireQuery):
    symbol: str
    order_id: str | None = None
    orig_client_order_id: str | None = None
    new_client_order_id: str | None = None


@dataclass
class CancelledOrder:
    symbol: str
    orig_client_order_id: str | None
    order_id: str
    client_order_id: str | None
    price: Decimal
    orig_qty: Decimal
    executed_qty: Decimal
    cummulative_quote_qty: Decimal
    status: OrderStatus
    time_in_force: str | None
    order_type: OrderType
    side: OrderSide

    @classmethod
    def from_json(cls, data: Json) -> "CancelledOrder":
        order = expect_object(data)
        return cls(
            symbol=expect_str(order["symbol"]),
            orig_client_order_id=optional_str(order.get("origClientOrderId")),
            order_id=str(order["orderId"]),
            client_order_id=optional_str(order.get("clientOrderId")),
            price=decimal_from_wire(order["price"]),
            orig_qty=decimal_from_wire(order["origQty"]),
            executed_qty=decimal_from_wire(order["executedQty"]),
            cummulative_quote_qty=decimal_from_wire(order["cummulativeQuoteQty"]),
            status=OrderStatus(order["status"]),
            time_in_force=optional_str(order.get("timeInForce")),
            order_type=OrderType(order["type"]),
            side=OrderSide(order["side"]),
        )


class CancelOrderEndpoint(SignedEndpoint):
    async def cancel_order(self, params: CancelOrderParams) -> CancelledOrder:
        """Cancel an active order.

        Args:
            params: The symbol and the exchange or client id of the order

        Returns:
            CancelledOrder: The order as it was when cancelled

        Raises:
            ValidationError: If no order identifier is provided
            ApiError: If the exchange rejects the cancellation

        Example:
            .. code-block:: python

                cancelled = await client.cancel_order(
                    CancelOrderParams(symbol="MXUSDT", order_id="C02__443776347957968896111")
                )

        Endpoint:
            DELETE /api/v3/order

        """
        check_order_selector(params.order_id, params.orig_client_order_id)
        query = CancelOrderQuery(
            symbol=params.symbol,
            order_id=params.order_id,
            orig_client_order_id=params.orig_client_order_id,
            new_client_order_id=params.new_client_order_id,
            recv_window=self.recv_window,
        )
        return await self._send_signed_request(
            "DELETE", CANCEL_ORDER_PATH, query, checked_parser(CancelledOrder.from_json)
        )
