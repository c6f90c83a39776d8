"""Capabilities shared by the endpoint groups.

Each module in :mod:`mexc_api.v3` contributes one endpoint group as a mixin
built on one of the two capabilities below. The clients in :mod:`mexc_api.api`
are the only concrete implementations: :class:`PublicEndpoint` is implemented
by ``MexcApiClient`` and :class:`SignedEndpoint` by
``MexcApiClientWithAuthentication``.
"""

from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from mexc_api.errors import DeserializationError, ValidationError
from mexc_api.helpers import WireQuery
from mexc_api.types import Json, JsonArray, JsonObject

T = TypeVar("T")

# Exceptions a parser raises when a body has the wrong shape
PARSE_ERRORS = (TypeError, KeyError, IndexError, ValueError, AttributeError)


def checked_parser(parse: Callable[[Json], T]) -> Callable[[Json], T]:
    """Wrap a payload parser so shape mismatches raise DeserializationError."""

    def _parse(data: Json) -> T:
        try:
            return parse(data)
        except DeserializationError:
            raise
        except PARSE_ERRORS as e:
            raise DeserializationError(f"Received invalid response {data=}") from e

    return _parse


def expect_object(data: Json) -> JsonObject:
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def expect_array(data: Json) -> JsonArray:
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
    return data


def expect_str(value: Json) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


def expect_int(value: Json) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}")
    return value


def expect_bool(value: Json) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"Expected a boolean, got {value!r}")
    return value


def check_limit(limit: int | None, maximum: int) -> int | None:
    """Validate an optional result-count limit against the endpoint's maximum.

    Raises:
        ValidationError: If the limit is not an integer between 1 and maximum

    """
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= maximum:
        raise ValidationError(
            f"limit must be an integer between 1 and {maximum}, inclusive, got {limit!r}"
        )
    return limit


def parse_list(parse_item: Callable[[Json], T]) -> Callable[[Json], list[T]]:
    """Build a parser for a JSON array of items."""

    def _parse(data: Json) -> list[T]:
        return [parse_item(item) for item in expect_array(data)]

    return _parse


def parse_empty(data: Json) -> None:
    """Parser for endpoints answering with an empty object."""
    expect_object(data)
    return None


class PublicEndpoint(ABC):
    """Capability to call unauthenticated market data endpoints."""

    @abstractmethod
    async def _send_public_request(
        self,
        path: str,
        query: WireQuery | None,
        parse: Callable[[Json], T],
    ) -> T:
        """Send a GET request and unwrap the response.

        Args:
            path: The endpoint path, e.g. "/api/v3/depth"
            query: The wire query, or None when the endpoint takes no parameters
            parse: Converts the decoded JSON body into the output type

        Returns:
            T: The parsed output

        """
        ...


class SignedEndpoint(ABC):
    """Capability to call endpoints that require a signed request."""

    @property
    @abstractmethod
    def recv_window(self) -> int | None:
        """Receive window (ms) attached to every signed query, if configured."""
        ...

    @abstractmethod
    async def _send_signed_request(
        self,
        method: str,
        path: str,
        query: WireQuery,
        parse: Callable[[Json], T],
    ) -> T:
        """Sign a query, send it and unwrap the response.

        Args:
            method: The HTTP method
            path: The endpoint path, e.g. "/api/v3/account"
            query: The wire query, already carrying its timestamp
            parse: Converts the decoded JSON body into the output type

        Returns:
            T: The parsed output

        """
        ...
