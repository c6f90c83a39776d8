from datetime import datetime, timezone
from decimal import Decimal

import pytest

from mexc_api import AccountInformationOutput, MexcApiClientWithAuthentication
from tests.mock_executors import MockSuccessfulOutput, json_response
from tests.unit.conftest import has_valid_signature, load_json_all_cases, split_signed_path


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "test_data", load_json_all_cases("response.account_information")
)
async def test_account_information(mock_http_client, test_data):
    payload, path = test_data
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=json_response(payload),
            call_validation=lambda call: call.function_name
            == "send_authorized_request"
            and call.arg_pack[0] == "GET"
            and call.arg_pack[1].startswith("/api/v3/account?"),
        )
    )

    account = await client.account_information()

    assert account.maker_commission == Decimal(str(payload["makerCommission"]))
    assert account.taker_commission == Decimal(str(payload["takerCommission"]))
    assert account.buyer_commission == Decimal(str(payload["buyerCommission"]))
    assert account.seller_commission == Decimal(str(payload["sellerCommission"]))
    assert account.can_trade == payload["canTrade"]
    assert account.can_withdraw == payload["canWithdraw"]
    assert account.can_deposit == payload["canDeposit"]
    assert account.account_type == payload["accountType"]
    assert account.permissions == payload["permissions"]
    if payload["updateTime"] is None:
        assert account.update_time is None
    else:
        assert account.update_time is not None
        assert account.update_time.tzinfo is not None

    assert len(account.balances) == len(payload["balances"])
    for balance, payload_balance in zip(account.balances, payload["balances"]):
        assert balance.asset == payload_balance["asset"]
        assert balance.free == Decimal(payload_balance["free"])
        assert balance.locked == Decimal(payload_balance["locked"])

    (call,) = mock_http.call_log
    assert has_valid_signature(call.arg_pack[1])


@pytest.mark.asyncio
async def test_account_information_two_balances(mock_http_client):
    client, mock_http = mock_http_client
    payload, _ = load_json_all_cases("response.account_information")[0]

    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    account = await client.account_information()

    assert [(b.asset, b.free, b.locked) for b in account.balances] == [
        ("USDT", Decimal("1534.91360853"), Decimal("12.5")),
        ("KAS", Decimal("0.00001"), Decimal("0")),
    ]
    assert str(account.balances[1].free) == "0.00001"
    assert account.update_time == datetime(
        2024, 6, 10, 6, 13, 20, 123000, tzinfo=timezone.utc
    )


@pytest.mark.asyncio
async def test_account_information_query_carries_only_signing_fields(mock_http_client):
    client, mock_http = mock_http_client
    payload, _ = load_json_all_cases("response.account_information")[0]
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    await client.account_information()

    (call,) = mock_http.call_log
    endpoint, params, _, signature = split_signed_path(call.arg_pack[1])
    assert endpoint == "/api/v3/account"
    assert list(params) == ["timestamp", "signature"]
    assert params["timestamp"].isdigit()
    assert len(signature) == 64


@pytest.mark.asyncio
async def test_account_information_sends_recv_window(mock_http_client):
    _, mock_http = mock_http_client
    client = MexcApiClientWithAuthentication(
        api_key="FOO", api_secret="BAR", recv_window=5000, executor=mock_http
    )
    payload, _ = load_json_all_cases("response.account_information")[0]
    mock_http.stage_output(MockSuccessfulOutput(output=json_response(payload)))

    await client.account_information()

    (call,) = mock_http.call_log
    _, params, _, _ = split_signed_path(call.arg_pack[1])
    assert list(params) == ["recvWindow", "timestamp", "signature"]
    assert params["recvWindow"] == "5000"
    assert has_valid_signature(call.arg_pack[1])


def test_account_information_parses_identically_twice():
    payload, _ = load_json_all_cases("response.account_information")[0]

    assert AccountInformationOutput.from_json(payload) == AccountInformationOutput.from_json(
        payload
    )
