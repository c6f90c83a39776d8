from decimal import Decimal

import pytest

from mexc_api import TradesParams
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import load_json_all_cases


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.trades"))
async def test_trades(mock_public_client, test_data):
    payload, path = test_data
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.function_name == "send_simple_request"
            and call.arg_pack == ("/api/v3/trades?symbol=MXUSDT&limit=2",),
        )
    )

    trades = await client.trades(TradesParams(symbol="MXUSDT", limit=2))

    assert len(trades) == len(payload)
    for trade, payload_trade in zip(trades, payload):
        expected_id = payload_trade["id"]
        assert trade.id == (None if expected_id is None else str(expected_id))
        assert trade.price == Decimal(payload_trade["price"])
        assert trade.qty == Decimal(payload_trade["qty"])
        assert trade.quote_qty == Decimal(payload_trade["quoteQty"])
        assert trade.is_buyer_maker == payload_trade["isBuyerMaker"]
