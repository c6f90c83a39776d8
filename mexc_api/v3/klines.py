"""Candlesticks: ``GET /api/v3/klines``."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    PublicEndpoint,
    check_limit,
    checked_parser,
    expect_array,
    parse_list,
)
from mexc_api.errors import ValidationError
from mexc_api.helpers import WireQuery
from mexc_api.types import (
    Json,
    KlineInterval,
    datetime_from_ms,
    datetime_to_ms,
    decimal_from_wire,
)

KLINES_PATH = "/api/v3/klines"

MAX_KLINES_LIMIT = 1000

# open time, open, high, low, close, volume, close time, quote asset volume
KLINE_FIELD_COUNT = 8


@dataclass
class KlinesParams:
    """Candlestick request.

    Attributes:
        symbol: Trading pair, e.g. "MXUSDT"
        interval: Candlestick interval
        start_time: Only candles opening at or after this time
        end_time: Only candles opening at or before this time
        limit: Number of candles, 1-1000 (exchange default 500)

    """

    symbol: str
    interval: KlineInterval
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int | None = None


@dataclass
class KlinesQuery(WireQuery):
    symbol: str
    interval: KlineInterval
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int | None = None

    @classmethod
    def from_params(cls, params: KlinesParams) -> "KlinesQuery":
        if (
            params.start_time is not None
            and params.end_time is not None
            and datetime_to_ms(params.start_time) > datetime_to_ms(params.end_time)
        ):
            raise ValidationError("start_time must not be after end_time")
        try:
            interval = KlineInterval(params.interval)
        except ValueError as e:
            raise ValidationError(f"Invalid kline interval {params.interval!r}") from e
        return cls(
            symbol=params.symbol,
            interval=interval,
            start_time=params.start_time,
            end_time=params.end_time,
            limit=check_limit(params.limit, MAX_KLINES_LIMIT),
        )


@dataclass
class Kline:
    open_time: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    close_time: datetime
    quote_asset_volume: Decimal

    @classmethod
    def from_json(cls, data: Json) -> "Kline":
        row = expect_array(data)
        if len(row) < KLINE_FIELD_COUNT:
            raise ValueError(f"Expected {KLINE_FIELD_COUNT} kline fields, got {len(row)}")
        return cls(
            open_time=datetime_from_ms(row[0]),
            open=decimal_from_wire(row[1]),
            high=decimal_from_wire(row[2]),
            low=decimal_from_wire(row[3]),
            close=decimal_from_wire(row[4]),
            volume=decimal_from_wire(row[5]),
            close_time=datetime_from_ms(row[6]),
            quote_asset_volume=decimal_from_wire(row[7]),
        )


class KlinesEndpoint(PublicEndpoint):
    async def klines(self, params: KlinesParams) -> list[Kline]:
        """Get candlesticks of a symbol.

        Args:
            params: The symbol, interval and optional time range

        Returns:
            list[Kline]: Candlesticks, oldest first

        Raises:
            ValidationError: If the time range, interval or limit is invalid
            DeserializationError: If the API response cannot be parsed

        Example:
            .. code-block:: python

                klines = await client.klines(
                    KlinesParams(symbol="MXUSDT", interval=KlineInterval.ONE_MINUTE, limit=10)
                )

        Endpoint:
            GET /api/v3/klines

        """
        return await self._send_public_request(
            KLINES_PATH,
            KlinesQuery.from_params(params),
            checked_parser(parse_list(Kline.from_json)),
        )
