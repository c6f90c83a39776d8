"""Helper utilities for the MEXC Python SDK.

This module contains utility functions for building wire queries, serializing
them into query strings, deserializing responses and display formatting.
"""

import inspect
import logging
import re
from dataclasses import asdict, dataclass, field, fields, is_dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, TypeVar
from urllib.parse import quote, urlencode

import orjson
from prettyprinter import cpprint

from mexc_api.errors import DeserializationError, SerializationError
from mexc_api.types import Json, QueryPairs, datetime_to_ms

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_API_URL: str = "https://api.mexc.com"

API_KEY_HEADER: str = "X-MEXC-APIKEY"

# How much of an unparseable body to keep in error messages
BODY_EXCERPT_LENGTH: int = 512


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_mexc_client() -> str:
    """Get the MEXC client identification string."""
    import mexc_api

    return f"MexcPythonSDK/{mexc_api.__version__}"


# ============================================================================
# OBJECT CONSTRUCTION
# ============================================================================

T = TypeVar("T")


def create_with(func: Callable[..., T], data: Dict[str, Any]) -> T:
    """Create an object from a dictionary, filtering to only valid parameters.

    This allows constructing objects from API responses that may contain
    additional fields beyond what the constructor expects, making the SDK
    more resilient to API changes.

    Args:
        func: Constructor or factory function to call
        data: Dictionary of data to pass as kwargs

    Returns:
        Instance created by calling func with filtered data

    """
    sig = inspect.signature(func)
    valid_keys = sig.parameters.keys()
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    return func(**filtered_data)


# ============================================================================
# WIRE QUERIES
# ============================================================================

_CAMEL_BOUNDARY = re.compile(r"_([a-z0-9])")


def camel_case(name: str) -> str:
    """Convert a snake_case field name to the exchange's camelCase."""
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


def wire_field(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field whose wire name is not its camelCase name."""
    metadata = dict(kwargs.pop("metadata", {}))
    metadata["wire"] = name
    return field(metadata=metadata, **kwargs)


def to_wire_value(value: object) -> str:
    """Render a single query value the way the exchange expects it.

    Raises:
        SerializationError: If the value has no wire representation

    """
    # bool must be checked before int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return str(datetime_to_ms(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ",".join(value)
    raise SerializationError(f"Unable to serialize {value=} of type {type(value)}")


@dataclass
class WireQuery:
    """Base class for the wire-format query of an endpoint.

    Subclasses are plain dataclasses. Field names are converted to camelCase
    unless declared with :func:`wire_field`. Fields set to None are left out of
    the query entirely; the exchange never receives empty or null values.
    Keyword-only fields are emitted after all other fields.
    """

    def to_query(self) -> QueryPairs:
        """Return the ordered (key, value) pairs to transmit."""
        pairs: QueryPairs = []
        for f in sorted(fields(self), key=lambda f: bool(f.kw_only)):
            value = getattr(self, f.name)
            if value is None:
                continue
            pairs.append((f.metadata.get("wire", camel_case(f.name)), to_wire_value(value)))
        return pairs


def serialize_query(query: WireQuery | QueryPairs | None) -> str:
    """Serialize a query into its canonical query string form.

    Args:
        query: A wire query, already computed pairs, or None

    Returns:
        The percent-encoded query string, without the leading "?"

    Raises:
        SerializationError: If serialization fails

    """
    if query is None:
        return ""
    pairs = query.to_query() if isinstance(query, WireQuery) else query
    try:
        return urlencode(pairs, safe=",", quote_via=quote)
    except Exception as e:
        raise SerializationError(f"Failed to serialize {query=}") from e


def with_query(path: str, query_string: str) -> str:
    """Append a serialized query string to a path."""
    return f"{path}?{query_string}" if query_string else path


# ============================================================================
# DESERIALIZATION
# ============================================================================


def body_excerpt(body: bytes) -> str:
    """Decode the beginning of a response body for error messages."""
    text = body[:BODY_EXCERPT_LENGTH].decode("utf-8", errors="replace")
    if len(body) > BODY_EXCERPT_LENGTH:
        text += "..."
    return text


def deserialize_response(response_body: bytes, url: str) -> Json:
    """Deserialize a JSON response body.

    Args:
        response_body: Response bytes to deserialize
        url: URL that was requested (for error messages)

    Returns:
        Deserialized JSON value

    Raises:
        DeserializationError: If deserialization fails

    """
    try:
        return orjson.loads(response_body)  # type: ignore
    except Exception as e:
        raise DeserializationError(
            f"Failed to parse JSON response from {url}: {e}",
            body=body_excerpt(response_body),
        ) from e


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: Any) -> None:
    """Pretty-print response data, handling dataclasses specially.

    Dataclass instances are converted to dictionaries before printing
    for better formatting.

    Args:
        response: Data to print

    """
    if is_dataclass(response) and not isinstance(response, type):
        cpprint(asdict(response))
    elif isinstance(response, list) and all(
        is_dataclass(item) and not isinstance(item, type) for item in response
    ):
        cpprint([asdict(item) for item in response])  # type: ignore
    else:
        cpprint(response)
