"""
Authenticated REST API Example

This example demonstrates MEXC's signed account and trading endpoints:

Account Information:
- Get account info (commissions, permissions, balances)
- Get account trade history

Trading Operations:
- Validate an order without placing it
- Place a limit order far from the market
- Query, list and cancel open orders

Environment Variables Required:
- MEXC_API_ENDPOINT_<ENVIRONMENT>: API endpoint URL (optional)
- MEXC_API_KEY_<ENVIRONMENT>: Your API key
- MEXC_API_SECRET_<ENVIRONMENT>: Your API secret
- MEXC_RECV_WINDOW_<ENVIRONMENT>: Receive window in milliseconds (optional)
"""

import asyncio
from decimal import Decimal

from mexc_api import (
    AccountTradeListParams,
    ApiError,
    CancelOrderParams,
    MexcApiClientWithAuthentication,
    OpenOrdersParams,
    OrderParams,
    OrderSide,
    OrderType,
    QueryOrderParams,
    print_data,
)
from mexc_api.env_setup import setup_environment

SYMBOL = "KASUSDT"


async def example_auth_rest_api() -> None:
    """Demonstrate signed REST API endpoints for trading and account management."""

    print("=" * 70)
    print("MEXC Authenticated REST API Example")
    print("=" * 70)

    api_endpoint, api_key, api_secret, recv_window = setup_environment()
    print(f"[Setup] API Endpoint: {api_endpoint}\n")

    async with MexcApiClientWithAuthentication(
        api_key=api_key,
        api_secret=api_secret,
        endpoint=api_endpoint,
        recv_window=recv_window,
    ) as client:
        # ==================================================================
        # PART 1: ACCOUNT INFORMATION
        # ==================================================================
        account = await client.account_information()
        print(f"[Account] type={account.account_type} can_trade={account.can_trade}")
        for balance in account.balances:
            print(f"  {balance.asset}: free={balance.free} locked={balance.locked}")

        my_trades = await client.account_trade_list(
            AccountTradeListParams(symbol=SYMBOL, limit=5)
        )
        print(f"\n[Trades] {len(my_trades)} recent trades on {SYMBOL}")

        # ==================================================================
        # PART 2: TRADING
        # ==================================================================
        params = OrderParams(
            symbol=SYMBOL,
            side=OrderSide.BUY,
            order_type=OrderType.LIMIT,
            quantity=Decimal("1000"),
            price=Decimal("0.00001"),
        )

        await client.order_test(params)
        print("\n[Order Test] Order accepted by the exchange's validation")

        try:
            placed = await client.order(params)
        except ApiError as e:
            print(f"[Order] Rejected with code {e.code}: {e.message}")
            return
        print_data(placed)

        details = await client.query_order(
            QueryOrderParams(symbol=SYMBOL, order_id=placed.order_id)
        )
        print(f"[Query] Order {details.order_id} is {details.status.value}")

        open_orders = await client.open_orders(OpenOrdersParams(symbol=SYMBOL))
        print(f"[Open Orders] {len(open_orders)} open on {SYMBOL}")

        cancelled = await client.cancel_order(
            CancelOrderParams(symbol=SYMBOL, order_id=placed.order_id)
        )
        print(f"[Cancel] Order {cancelled.order_id} is {cancelled.status.value}")


if __name__ == "__main__":
    """
    Run the authenticated REST API example.

    Usage:
        python example_rest_api.py

    Requires valid credentials in .env or the environment.
    """
    asyncio.run(example_auth_rest_api())
