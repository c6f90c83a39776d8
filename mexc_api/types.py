"""Type definitions for the MEXC Python SDK.

This module contains the type aliases, enums and numeric/time conversion
utilities shared by every endpoint module. Endpoint-specific request and
response structures live next to their endpoint in ``mexc_api.v3``.
"""

import re
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeAlias, overload

from mexc_api.errors import ValidationError

# ============================================================================
# TYPE ALIASES
# ============================================================================

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray
# Unlike most exchanges, MEXC returns bare arrays for several endpoints (trades, klines, openOrders)
Json: TypeAlias = JsonValue

# Query string representation: ordered (key, value) pairs
QueryPairs: TypeAlias = list[tuple[str, str]]

# MEXC input types
MexcNumericInput: TypeAlias = Decimal | str | float | int


# ============================================================================
# NUMERIC CONVERSION UTILITIES
# ============================================================================

DECIMAL_PATTERN = re.compile(r"^\d+(\.\d+)?$")

# The exchange rejects receive windows larger than one minute
MAX_RECV_WINDOW_MS = 60_000


@overload
def numeric_to_decimal(n: MexcNumericInput) -> Decimal: ...


@overload
def numeric_to_decimal(n: None) -> None: ...


def numeric_to_decimal(n: MexcNumericInput | None) -> Decimal | None:
    """Convert various numeric input types to Decimal, or None if input is None.

    Raises:
        ValidationError: If the value is not a finite, non-negative number.

    """
    if n is None:
        return n
    if isinstance(n, bool):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if isinstance(n, str):
        if not DECIMAL_PATTERN.match(n):
            raise ValidationError(f"Invalid numeric input {n}")
        return Decimal(n)
    if isinstance(n, (int, float)):
        n = Decimal(str(n))
    if not isinstance(n, Decimal):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    # same range DECIMAL_PATTERN admits for strings
    if not n.is_finite() or n.is_signed():
        raise ValidationError(f"Invalid numeric input {n}")
    return n


def decimal_from_wire(value: JsonValue) -> Decimal:
    """Parse a monetary value received from the exchange.

    The exchange sends amounts as strings. Numbers are tolerated but go through
    ``str`` first so no binary float rounding leaks into the result.

    Raises:
        TypeError: If the value is not a string or a number.
        ValueError: If the string is not a valid decimal.

    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"Expected a decimal string, got {value!r}")
    try:
        return Decimal(value if isinstance(value, str) else str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal {value!r}") from e


def optional_decimal_from_wire(value: JsonValue) -> Decimal | None:
    """Parse an optional monetary value, mapping null to None."""
    if value is None:
        return None
    return decimal_from_wire(value)


# ============================================================================
# TIME CONVERSION UTILITIES
# ============================================================================

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def datetime_to_ms(dt: datetime) -> int:
    """Convert a datetime to milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def datetime_from_ms(value: JsonValue) -> datetime:
    """Convert milliseconds since the Unix epoch to a UTC datetime."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer millisecond timestamp, got {value!r}")
    try:
        return EPOCH + timedelta(milliseconds=value)
    except OverflowError as e:
        raise ValueError(f"Millisecond timestamp out of range: {value}") from e


def optional_datetime_from_ms(value: JsonValue) -> datetime | None:
    """Convert an optional millisecond timestamp, mapping null to None."""
    if value is None:
        return None
    return datetime_from_ms(value)


# ============================================================================
# CORE ENUMS
# ============================================================================


class MexcApiEndpoint(Enum):
    """Base URLs of the MEXC Spot API.

    Any other base URL (sandbox, proxy, local mock server) can be passed to the
    clients as a plain string.
    """

    BASE = "https://api.mexc.com"


def endpoint_url(endpoint: MexcApiEndpoint | str) -> str:
    """Normalise an endpoint enum or custom base URL string."""
    if isinstance(endpoint, MexcApiEndpoint):
        return endpoint.value
    if not isinstance(endpoint, str) or not endpoint:
        raise ValidationError(f"Invalid endpoint {endpoint!r}")
    return endpoint.rstrip("/")


class OrderSide(Enum):
    """Order side."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Order type."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    LIMIT_MAKER = "LIMIT_MAKER"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"


class OrderStatus(Enum):
    """Order status."""

    NEW = "NEW"
    FILLED = "FILLED"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    CANCELED = "CANCELED"
    PARTIALLY_CANCELED = "PARTIALLY_CANCELED"


class KlineInterval(Enum):
    """Time intervals for klines/candlestick data."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    SIXTY_MINUTES = "60m"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
