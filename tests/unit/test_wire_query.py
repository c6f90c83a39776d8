from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from mexc_api.errors import SerializationError, ValidationError
from mexc_api.helpers import (
    WireQuery,
    camel_case,
    serialize_query,
    to_wire_value,
    wire_field,
    with_query,
)
from mexc_api.types import (
    KlineInterval,
    MexcApiEndpoint,
    OrderSide,
    OrderType,
    datetime_from_ms,
    datetime_to_ms,
    decimal_from_wire,
    endpoint_url,
    numeric_to_decimal,
)
from mexc_api.v3.order import OrderParams, OrderQuery


@dataclass
class ExampleQuery(WireQuery):
    symbol: str
    order_type: str = wire_field("type", default="LIMIT")
    start_time: datetime | None = None
    limit: int | None = None
    is_active: bool | None = None


def test_absent_optional_fields_are_omitted():
    query = ExampleQuery(symbol="MXUSDT")

    assert query.to_query() == [("symbol", "MXUSDT"), ("type", "LIMIT")]
    assert serialize_query(query) == "symbol=MXUSDT&type=LIMIT"


def test_field_names_are_camel_cased():
    query = ExampleQuery(
        symbol="MXUSDT",
        start_time=datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc),
        limit=10,
        is_active=False,
    )

    assert query.to_query() == [
        ("symbol", "MXUSDT"),
        ("type", "LIMIT"),
        ("startTime", "1718000000000"),
        ("limit", "10"),
        ("isActive", "false"),
    ]


def test_order_query_omits_absent_fields():
    query = OrderQuery.from_params(
        OrderParams(
            symbol="KASUSDT",
            side=OrderSide.BUY,
            order_type=OrderType.MARKET,
            quote_order_quantity="5",
        ),
        recv_window=None,
    )
    keys = [key for key, _ in query.to_query()]

    assert keys == ["symbol", "side", "type", "quoteOrderQty", "timestamp"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0.00001"), "0.00001"),
        (Decimal("1E-7"), "0.0000001"),
        (Decimal("1.5E+3"), "1500"),
        (True, "true"),
        (False, "false"),
        (KlineInterval.ONE_MONTH, "1M"),
        (7, "7"),
        (["A", "B"], "A,B"),
    ],
)
def test_to_wire_value(value, expected):
    assert to_wire_value(value) == expected


def test_to_wire_value_rejects_floats():
    with pytest.raises(SerializationError):
        to_wire_value(0.1)


def test_camel_case():
    assert camel_case("new_client_order_id") == "newClientOrderId"
    assert camel_case("symbol") == "symbol"


def test_with_query():
    assert with_query("/api/v3/ping", "") == "/api/v3/ping"
    assert with_query("/api/v3/depth", "symbol=MXUSDT") == "/api/v3/depth?symbol=MXUSDT"


def test_decimal_from_wire_is_exact():
    assert decimal_from_wire("0.00001") == Decimal("0.00001")
    assert str(decimal_from_wire("0.00001")) == "0.00001"
    assert decimal_from_wire(0.1) == Decimal("0.1")
    assert decimal_from_wire(20) == Decimal(20)


@pytest.mark.parametrize("value", [None, True, [], {}])
def test_decimal_from_wire_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        decimal_from_wire(value)


def test_decimal_from_wire_rejects_garbage():
    with pytest.raises(ValueError):
        decimal_from_wire("twelve")


@pytest.mark.parametrize("value", ["abc", "-1", "1e5", True, object()])
def test_numeric_to_decimal_rejects_invalid_input(value):
    with pytest.raises(ValidationError):
        numeric_to_decimal(value)  # type: ignore


def test_timestamps_round_trip_in_milliseconds():
    dt = datetime_from_ms(1718000000123)

    assert dt.tzinfo == timezone.utc
    assert datetime_to_ms(dt) == 1718000000123
    assert datetime_to_ms(datetime(2024, 6, 10, 6, 13, 20)) == 1718000000000


def test_endpoint_url():
    assert endpoint_url(MexcApiEndpoint.BASE) == "https://api.mexc.com"
    assert endpoint_url("http://localhost:8080/") == "http://localhost:8080"
    with pytest.raises(ValidationError):
        endpoint_url("")
