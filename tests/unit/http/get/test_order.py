from decimal import Decimal

import pytest

from mexc_api import (
    ApiError,
    BadRequest,
    DeserializationError,
    OrderParams,
    OrderSide,
    OrderType,
    ValidationError,
)
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import has_valid_signature, load_json_all_cases, split_signed_path


def limit_buy(**overrides) -> OrderParams:
    params = dict(
        symbol="KASUSDT",
        side=OrderSide.BUY,
        order_type=OrderType.LIMIT,
        quantity=Decimal("1"),
        price=Decimal("0.00001"),
    )
    params.update(overrides)
    return OrderParams(**params)


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.order"))
async def test_order(mock_http_client, test_data):
    payload, path = test_data
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.function_name
            == "send_authorized_request"
            and call.arg_pack[0] == "GET"
            and call.arg_pack[1].startswith("/api/v3/order?"),
        )
    )

    output = await client.order(limit_buy())

    assert output.symbol == payload["symbol"]
    assert output.order_id == payload["orderId"]
    assert output.order_list_id == payload.get("orderListId")
    assert output.price == Decimal(payload["price"])
    assert output.orig_qty == Decimal(payload["origQty"])
    assert output.order_type.value == payload["type"]
    assert output.side.value == payload["side"]
    assert output.transact_time.timestamp() * 1000 == pytest.approx(
        payload["transactTime"]
    )


@pytest.mark.asyncio
async def test_order_wire_query(mock_http_client):
    client, mock_http = mock_http_client
    payload, _ = load_json_all_cases("response.order")[0]
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    await client.order(limit_buy(new_client_order_id="my-order-1"))

    (call,) = mock_http.call_log
    endpoint, params, prefix, _ = split_signed_path(call.arg_pack[1])
    assert endpoint == "/api/v3/order"
    assert list(params) == [
        "symbol",
        "side",
        "type",
        "quantity",
        "price",
        "newClientOrderId",
        "timestamp",
        "signature",
    ]
    assert params["type"] == "LIMIT"
    assert params["price"] == "0.00001"
    assert "quoteOrderQty" not in prefix
    assert has_valid_signature(call.arg_pack[1])


@pytest.mark.asyncio
async def test_order_with_quote_quantity(mock_http_client):
    client, mock_http = mock_http_client
    payload, _ = load_json_all_cases("response.order")[1]
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    await client.order(
        OrderParams(
            symbol="MXUSDT",
            side=OrderSide.SELL,
            order_type=OrderType.MARKET,
            quote_order_quantity="25.5",
        )
    )

    (call,) = mock_http.call_log
    _, params, _, _ = split_signed_path(call.arg_pack[1])
    assert params["quoteOrderQty"] == "25.5"
    assert "quantity" not in params
    assert "price" not in params


@pytest.mark.asyncio
async def test_order_insufficient_balance(mock_http_client):
    client, mock_http = mock_http_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(
                {"code": -2010, "msg": "Insufficient balance"}, status=400
            )
        )
    )

    with pytest.raises(ApiError) as exc_info:
        await client.order(limit_buy())

    assert isinstance(exc_info.value, BadRequest)
    assert not isinstance(exc_info.value, DeserializationError)
    assert exc_info.value.code == -2010
    assert exc_info.value.message == "Insufficient balance"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_order_transact_time_out_of_range(mock_http_client):
    client, mock_http = mock_http_client
    payload, _ = load_json_all_cases("response.order")[0]
    # microseconds where milliseconds are expected
    payload = dict(payload, transactTime=1718000000123000)
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    with pytest.raises(DeserializationError):
        await client.order(limit_buy())


@pytest.mark.asyncio
async def test_order_error_with_success_status(mock_http_client):
    client, mock_http = mock_http_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response({"code": -2010, "msg": "Insufficient balance"})
        )
    )

    with pytest.raises(ApiError) as exc_info:
        await client.order(limit_buy())

    assert type(exc_info.value) is ApiError
    assert exc_info.value.code == -2010
    assert exc_info.value.message == "Insufficient balance"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        dict(quantity=None),
        dict(quote_order_quantity=Decimal("10")),
        dict(quantity="-1"),
        dict(quantity=Decimal("-1")),
        dict(quantity=-1),
        dict(quantity=Decimal("NaN")),
        dict(quantity=float("inf")),
        dict(price=Decimal("Infinity")),
        dict(price=-0.5),
        dict(price="1e-5"),
        dict(side="HOLD"),
    ],
)
async def test_order_invalid_params_send_nothing(mock_http_client, overrides):
    client, mock_http = mock_http_client

    with pytest.raises(ValidationError):
        await client.order(limit_buy(**overrides))

    assert mock_http.call_log == []


@pytest.mark.asyncio
async def test_order_test(mock_http_client):
    client, mock_http = mock_http_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response({}),
            call_validation=lambda call: call.arg_pack[0] == "GET"
            and call.arg_pack[1].startswith("/api/v3/order/test?"),
        )
    )

    assert await client.order_test(limit_buy()) is None

    (call,) = mock_http.call_log
    assert has_valid_signature(call.arg_pack[1])


@pytest.mark.asyncio
async def test_order_test_rejected(mock_http_client):
    client, mock_http = mock_http_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response({"code": 30002, "msg": "minimum transaction volume cannot be less than :5USDT"})
        )
    )

    with pytest.raises(ApiError) as exc_info:
        await client.order_test(limit_buy())

    assert exc_info.value.code == 30002
