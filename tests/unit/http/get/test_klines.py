from datetime import datetime, timezone
from decimal import Decimal

import pytest

from mexc_api import DeserializationError, KlineInterval, KlinesParams, ValidationError
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import load_json_all_cases


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.klines"))
async def test_klines(mock_public_client, test_data):
    payload, path = test_data
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.function_name == "send_simple_request"
            and call.arg_pack
            == ("/api/v3/klines?symbol=MXUSDT&interval=1m&startTime=1718000000000",),
        )
    )

    klines = await client.klines(
        KlinesParams(
            symbol="MXUSDT",
            interval=KlineInterval.ONE_MINUTE,
            start_time=datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc),
        )
    )

    assert len(klines) == len(payload)
    for kline, row in zip(klines, payload):
        assert kline.open_time == datetime.fromtimestamp(row[0] / 1000, timezone.utc)
        assert kline.open == Decimal(row[1])
        assert kline.high == Decimal(row[2])
        assert kline.low == Decimal(row[3])
        assert kline.close == Decimal(row[4])
        assert kline.volume == Decimal(row[5])
        assert kline.quote_asset_volume == Decimal(row[7])


@pytest.mark.asyncio
async def test_klines_short_row(mock_public_client):
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(output=json_response([[1718000000000, "3.69", "3.71"]]))
    )

    with pytest.raises(DeserializationError):
        await client.klines(KlinesParams(symbol="MXUSDT", interval=KlineInterval.ONE_DAY))


@pytest.mark.asyncio
async def test_klines_interval_wire_values(mock_public_client):
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response([]),
            call_validation=lambda call: call.arg_pack
            == ("/api/v3/klines?symbol=MXUSDT&interval=1W&limit=10",),
        )
    )

    assert (
        await client.klines(
            KlinesParams(symbol="MXUSDT", interval=KlineInterval.ONE_WEEK, limit=10)
        )
        == []
    )


@pytest.mark.asyncio
async def test_klines_reversed_range(mock_public_client):
    client, mock_http = mock_public_client

    with pytest.raises(ValidationError):
        await client.klines(
            KlinesParams(
                symbol="MXUSDT",
                interval=KlineInterval.ONE_DAY,
                start_time=datetime(2024, 6, 11, tzinfo=timezone.utc),
                end_time=datetime(2024, 6, 10, tzinfo=timezone.utc),
            )
        )

    assert mock_http.call_log == []
