from decimal import Decimal

import pytest

from mexc_api import DepthParams, ValidationError
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import load_json_all_cases


@pytest.mark.asyncio
@pytest.mark.parametrize("test_data", load_json_all_cases("response.depth"))
async def test_depth(mock_public_client, test_data):
    payload, path = test_data
    client, mock_http = mock_public_client
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.function_name == "send_simple_request"
            and call.arg_pack == ("/api/v3/depth?symbol=MXUSDT&limit=5",),
        )
    )

    depth = await client.depth(DepthParams(symbol="MXUSDT", limit=5))

    assert depth.last_update_id == payload["lastUpdateId"]
    assert [(level.price, level.quantity) for level in depth.bids] == [
        (Decimal(price), Decimal(quantity)) for price, quantity in payload["bids"]
    ]
    assert [(level.price, level.quantity) for level in depth.asks] == [
        (Decimal(price), Decimal(quantity)) for price, quantity in payload["asks"]
    ]


@pytest.mark.asyncio
async def test_depth_limit_omitted(mock_public_client):
    client, mock_http = mock_public_client
    payload, _ = load_json_all_cases("response.depth")[0]
    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.arg_pack == ("/api/v3/depth?symbol=MXUSDT",),
        )
    )

    await client.depth(DepthParams(symbol="MXUSDT"))


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -5, 5001, True])
async def test_depth_invalid_limit(mock_public_client, limit):
    client, mock_http = mock_public_client

    with pytest.raises(ValidationError):
        await client.depth(DepthParams(symbol="MXUSDT", limit=limit))

    assert mock_http.call_log == []
