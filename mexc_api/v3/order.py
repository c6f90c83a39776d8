"""Order placement: ``GET /api/v3/order`` and ``GET /api/v3/order/test`` (signed)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    SignedEndpoint,
    checked_parser,
    expect_int,
    expect_object,
    expect_str,
    parse_empty,
)
from mexc_api.errors import ValidationError
from mexc_api.helpers import wire_field
from mexc_api.signing import SignedWireQuery
from mexc_api.types import (
    Json,
    MexcNumericInput,
    OrderSide,
    OrderType,
    datetime_from_ms,
    decimal_from_wire,
    numeric_to_decimal,
)

ORDER_PATH = "/api/v3/order"
ORDER_TEST_PATH = "/api/v3/order/test"


@dataclass
class OrderParams:
    """Parameters of a new order.

    Exactly one of ``quantity`` (base asset amount) and
    ``quote_order_quantity`` (quote asset amount) must be set.

    Attributes:
        symbol: Trading pair, e.g. "MXUSDT"
        side: Buy or sell
        order_type: Order type
        quantity: Amount of the base asset
        quote_order_quantity: Amount of the quote asset to spend or receive
        price: Limit price, required by the exchange for limit orders
        new_client_order_id: Caller-chosen order identifier

    """

    symbol: str
    side: OrderSide
    order_type: OrderType
    quantity: MexcNumericInput | None = None
    quote_order_quantity: MexcNumericInput | None = None
    price: MexcNumericInput | None = None
    new_client_order_id: str | None = None


@dataclass
class OrderQuery(SignedWireQuery):
    symbol: str
    side: OrderSide
    order_type: OrderType = wire_field("type")
    quantity: Decimal | None = None
    quote_order_quantity: Decimal | None = wire_field("quoteOrderQty", default=None)
    price: Decimal | None = None
    new_client_order_id: str | None = None

    @classmethod
    def from_params(
        cls, params: OrderParams, recv_window: int | None
    ) -> "OrderQuery":
        """Validate order parameters and build the wire query.

        Raises:
            ValidationError: If not exactly one of quantity and
                quote_order_quantity is set, or a numeric field is invalid

        """
        if (params.quantity is None) == (params.quote_order_quantity is None):
            raise ValidationError(
                "Exactly one of quantity and quote_order_quantity must be provided"
            )
        try:
            side = OrderSide(params.side)
            order_type = OrderType(params.order_type)
        except ValueError as e:
            raise ValidationError(f"Invalid order side or type in {params=}") from e
        return cls(
            symbol=params.symbol,
            side=side,
            order_type=order_type,
            quantity=numeric_to_decimal(params.quantity),
            quote_order_quantity=numeric_to_decimal(params.quote_order_quantity),
            price=numeric_to_decimal(params.price),
            new_client_order_id=params.new_client_order_id,
            recv_window=recv_window,
        )


@dataclass
class OrderOutput:
    """Acknowledgement of a placed order."""

    symbol: str
    order_id: str
    order_list_id: int | None
    price: Decimal
    orig_qty: Decimal
    order_type: OrderType
    side: OrderSide
    transact_time: datetime

    @classmethod
    def from_json(cls, data: Json) -> "OrderOutput":
        order = expect_object(data)
        order_list_id = order.get("orderListId")
        return cls(
            symbol=expect_str(order["symbol"]),
            order_id=str(order["orderId"]),
            order_list_id=None if order_list_id is None else expect_int(order_list_id),
            price=decimal_from_wire(order["price"]),
            orig_qty=decimal_from_wire(order["origQty"]),
            order_type=OrderType(order["type"]),
            side=OrderSide(order["side"]),
            transact_time=datetime_from_ms(order["transactTime"]),
        )


class OrderEndpoint(SignedEndpoint):
    async def order(self, params: OrderParams) -> OrderOutput:
        """Place a new order.

        Args:
            params: The order to place

        Returns:
            OrderOutput: The exchange's acknowledgement of the order

        Raises:
            ValidationError: If the parameters are invalid (nothing is sent)
            ApiError: If the exchange rejects the order, e.g. code -2010 for
                insufficient balance
            DeserializationError: If the API response cannot be parsed
            TransportError: If the request could not be sent

        Example:
            .. code-block:: python

                output = await client.order(
                    OrderParams(
                        symbol="KASUSDT",
                        side=OrderSide.BUY,
                        order_type=OrderType.LIMIT,
                        quantity=Decimal("1"),
                        price=Decimal("0.00001"),
                    )
                )
                print(output.order_id)

        Endpoint:
            GET /api/v3/order

        """
        query = OrderQuery.from_params(params, self.recv_window)
        return await self._send_signed_request(
            "GET", ORDER_PATH, query, checked_parser(OrderOutput.from_json)
        )

    async def order_test(self, params: OrderParams) -> None:
        """Validate an order with the exchange without placing it.

        Args:
            params: The order to validate

        Raises:
            ValidationError: If the parameters are invalid (nothing is sent)
            ApiError: If the exchange would reject the order

        Endpoint:
            GET /api/v3/order/test

        """
        query = OrderQuery.from_params(params, self.recv_window)
        await self._send_signed_request(
            "GET", ORDER_TEST_PATH, query, checked_parser(parse_empty)
        )
