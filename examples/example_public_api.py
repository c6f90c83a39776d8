"""
Public API Example

This example demonstrates how to use MEXC's public market data endpoints.
No authentication is required for these endpoints.

Endpoints covered:
- Connectivity and server time
- Symbols tradable through the API
- Exchange information
- Order book
- Recent trades
- Candlestick data (klines)
- Average and latest prices
"""

import asyncio

from mexc_api import (
    AvgPriceParams,
    DepthParams,
    ExchangeInformationParams,
    KlineInterval,
    KlinesParams,
    MexcApiClient,
    TickerPriceParams,
    TradesParams,
    get_version,
    print_data,
)

SYMBOL = "MXUSDT"


async def example_public_api() -> None:
    """Demonstrate the public API endpoints without authentication."""

    print("=" * 70)
    print("MEXC Public API Example")
    print("=" * 70)

    print(f"\n[Info] MEXC Python SDK Version: {get_version()}\n")

    async with MexcApiClient() as client:
        # ==================================================================
        # CONNECTIVITY
        # ==================================================================
        await client.ping()
        server_time = await client.time()
        print(f"[Ping] OK, server time is {server_time.server_time.isoformat()}")

        symbols = await client.default_symbols()
        print(f"[Symbols] {len(symbols)} symbols tradable through the API")

        # ==================================================================
        # EXCHANGE INFORMATION
        # ==================================================================
        print("\n" + "=" * 70)
        print("1. EXCHANGE INFORMATION")
        print("=" * 70)

        info = await client.exchange_information(
            ExchangeInformationParams(symbol=SYMBOL)
        )
        for symbol in info.symbols:
            print(f"\n[Symbol] {symbol.symbol} ({symbol.base_asset}/{symbol.quote_asset})")
            print(f"  Order types:     {', '.join(symbol.order_types)}")
            print(f"  Base precision:  {symbol.base_asset_precision}")
            print(f"  Quote precision: {symbol.quote_precision}")

        # ==================================================================
        # ORDER BOOK
        # ==================================================================
        print("\n" + "=" * 70)
        print("2. ORDER BOOK")
        print("=" * 70)

        depth = await client.depth(DepthParams(symbol=SYMBOL, limit=5))
        print(f"\n[Order Book] {SYMBOL} (update id {depth.last_update_id})")
        if depth.asks and depth.bids:
            print(f"  Best Ask: {depth.asks[0].price} (qty: {depth.asks[0].quantity})")
            print(f"  Best Bid: {depth.bids[0].price} (qty: {depth.bids[0].quantity})")

        # ==================================================================
        # RECENT TRADES
        # ==================================================================
        print("\n" + "=" * 70)
        print("3. RECENT TRADES")
        print("=" * 70)

        trades = await client.trades(TradesParams(symbol=SYMBOL, limit=3))
        for i, trade in enumerate(trades, 1):
            print(f"  {i}. Price: {trade.price}, Qty: {trade.qty}, Time: {trade.time}")

        # ==================================================================
        # CANDLESTICK DATA (KLINES)
        # ==================================================================
        print("\n" + "=" * 70)
        print("4. CANDLESTICK DATA (KLINES)")
        print("=" * 70)

        klines = await client.klines(
            KlinesParams(symbol=SYMBOL, interval=KlineInterval.ONE_DAY, limit=3)
        )
        print_data(klines)

        # ==================================================================
        # PRICES
        # ==================================================================
        print("\n" + "=" * 70)
        print("5. PRICES")
        print("=" * 70)

        avg = await client.avg_price(AvgPriceParams(symbol=SYMBOL))
        print(f"\n[Average] {avg.price} over {avg.mins} minutes")

        tickers = await client.ticker_price(TickerPriceParams(symbol=SYMBOL))
        print(f"[Latest]  {tickers[0].price}")

    print("\n[Note] For authenticated endpoints, see example_rest_api.py\n")


if __name__ == "__main__":
    asyncio.run(example_public_api())
