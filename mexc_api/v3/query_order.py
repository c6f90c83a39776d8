"""Order status: ``GET /api/v3/order`` with an order selector (signed)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    SignedEndpoint,
    checked_parser,
    expect_bool,
    expect_int,
    expect_object,
    expect_str,
)
from mexc_api.errors import ValidationError
from mexc_api.signing import SignedWireQuery
from mexc_api.types import (
    Json,
    JsonValue,
    OrderSide,
    OrderStatus,
    OrderType,
    datetime_from_ms,
    decimal_from_wire,
    optional_datetime_from_ms,
    optional_decimal_from_wire,
)

QUERY_ORDER_PATH = "/api/v3/order"


def check_order_selector(order_id: str | None, orig_client_order_id: str | None) -> None:
    """Validate that at least one order identifier is provided.

    Raises:
        ValidationError: If neither order_id nor orig_client_order_id is provided

    """
    if order_id is None and orig_client_order_id is None:
        raise ValidationError("Either order_id or orig_client_order_id must be provided")


def optional_str(value: JsonValue) -> str | None:
    return None if value is None else expect_str(value)


def optional_int(value: JsonValue) -> int | None:
    return None if value is None else expect_int(value)


@dataclass
class QueryOrderParams:
    symbol: str
    order_id: str | None = None
    orig_client_order_id: str | None = None


@dataclass
class QueryOrderQuery(SignedWireQuery):
    symbol: str
    order_id: str | None = None
    orig_client_order_id: str | None = None


@dataclass
class OrderDetails:
    """State of an order as reported by the exchange."""

    symbol: str
    order_id: str
    order_list_id: int | None
    client_order_id: str | None
    price: Decimal
    orig_qty: Decimal
    executed_qty: Decimal
    cummulative_quote_qty: Decimal
    status: OrderStatus
    time_in_force: str | None
    order_type: OrderType
    side: OrderSide
    stop_price: Decimal | None
    time: datetime
    update_time: datetime | None
    is_working: bool | None
    orig_quote_order_qty: Decimal | None

    @classmethod
    def from_json(cls, data: Json) -> "OrderDetails":
        order = expect_object(data)
        is_working = order.get("isWorking")
        return cls(
            symbol=expect_str(order["symbol"]),
            order_id=str(order["orderId"]),
            order_list_id=optional_int(order.get("orderListId")),
            client_order_id=optional_str(order.get("clientOrderId")),
            price=decimal_from_wire(order["price"]),
            orig_qty=decimal_from_wire(order["origQty"]),
            executed_qty=decimal_from_wire(order["executedQty"]),
            cummulative_quote_qty=decimal_from_wire(order["cummulativeQuoteQty"]),
            status=OrderStatus(order["status"]),
            time_in_force=optional_str(order.get("timeInForce")),
            order_type=OrderType(order["type"]),
            side=OrderSide(order["side"]),
            stop_price=optional_decimal_from_wire(order.get("stopPrice")),
            time=datetime_from_ms(order["time"]),
            update_time=optional_datetime_from_ms(order.get("updateTime")),
            is_working=None if is_working is None else expect_bool(is_working),
            orig_quote_order_qty=optional_decimal_from_wire(
                order.get("origQuoteOrderQty")
            ),
        )


class QueryOrderEndpoint(SignedEndpoint):
    async def query_order(self, params: QueryOrderParams) -> OrderDetails:
        """Get the status of an order.

        Args:
            params: The symbol and the exchange or client id of the order

        Returns:
            OrderDetails: The current state of the order

        Raises:
            ValidationError: If no order identifier is provided
            ApiError: If the exchange rejects the request, e.g. unknown order

        Endpoint:
            GET /api/v3/order

        """
        check_order_selector(params.order_id, params.orig_client_order_id)
        query = QueryOrderQuery(
            symbol=params.symbol,
            order_id=params.order_id,
            orig_client_order_id=params.orig_client_order_id,
            recv_window=self.recv_window,
        )
        return await self._send_signed_request(
            "GET", QUERY_ORDER_PATH, query, checked_parser(OrderDetails.from_json)
        )
