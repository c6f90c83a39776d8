from decimal import Decimal

import pytest

from mexc_api import AvgPriceParams, TickerPriceParams
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import load_json_all_cases


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.avg_price"))
async def test_avg_price(mock_public_client, test_data):
    payload, path = test_data
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.arg_pack
            == ("/api/v3/avgPrice?symbol=MXUSDT",),
        )
    )

    avg = await client.avg_price(AvgPriceParams(symbol="MXUSDT"))

    assert avg.mins == payload["mins"]
    assert avg.price == Decimal(payload["price"])


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.ticker_price"))
async def test_ticker_price(mock_public_client, test_data):
    payload, path = test_data
    client, mock_http = mock_public_client
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    tickers = await client.ticker_price()

    expected = payload if isinstance(payload, list) else [payload]
    assert [(t.symbol, t.price) for t in tickers] == [
        (e["symbol"], Decimal(e["price"])) for e in expected
    ]
    (call,) = mock_http.call_log
    assert call.arg_pack == ("/api/v3/ticker/price",)


@pytest.mark.asyncio
async def test_ticker_price_single_symbol(mock_public_client):
    client, mock_http = mock_public_client
    payload, _ = load_json_all_cases("response.ticker_price")[0]
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.arg_pack
            == ("/api/v3/ticker/price?symbol=MXUSDT",),
        )
    )

    (ticker,) = await client.ticker_price(TickerPriceParams(symbol="MXUSDT"))

    assert ticker.symbol == "MXUSDT"
    assert ticker.price == Decimal("3.6962")
