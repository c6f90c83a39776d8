"""Response envelope for MEXC API responses.

Every HTTP response is decoded exactly once into an :class:`ApiResponse`, which
holds either the endpoint's parsed payload or the error the exchange reported.
:meth:`ApiResponse.into_result` then hands back the payload or raises the
matching :class:`~mexc_api.errors.ApiError`.

Malformed bodies never reach that point: they raise
:class:`~mexc_api.errors.DeserializationError` while the envelope is built.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

import orjson

from mexc_api.errors import ApiError, BadHttpStatus, DeserializationError
from mexc_api.executors.interface import HttpResponse
from mexc_api.helpers import body_excerpt, create_with, deserialize_response
from mexc_api.types import Json

log = logging.getLogger(__name__)

T = TypeVar("T")

# Codes the exchange uses in wrapped success bodies, e.g. {"code": 0, "data": [...]}
SUCCESS_CODES = frozenset({0, 200})


@dataclass
class ErrorResponse:
    """Error body returned by the exchange: ``{"code": ..., "msg": ...}``."""

    code: int | None
    msg: str

    @classmethod
    def from_json(cls, data: Json) -> "ErrorResponse | None":
        """Return the error carried by a decoded body, or None if it has no error shape."""
        if not isinstance(data, dict):
            return None
        code = data.get("code")
        msg = data.get("msg")
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        if not isinstance(msg, str):
            return None
        return create_with(cls, data)


def error_for_status(status: int, error: ErrorResponse) -> ApiError:
    """Map an error response to the exception matching its HTTP status.

    Args:
        status: The HTTP status code of the response
        error: The error reported by the exchange

    Returns:
        ApiError: A status-specific subclass for non-2XX statuses, a plain
            ApiError for errors reported with a 2XX status

    """
    if 200 <= status < 300:
        return ApiError(error.msg, code=error.code, status_code=status)

    error_class, label = BadHttpStatus.for_status(status)

    if error.code is not None:
        # keep the exchange's message intact, callers match on it
        return error_class(status, error.msg, code=error.code)
    return error_class(status, f"{label}: {error.msg}")


class ApiResponse(Generic[T]):
    """Either a successful payload or an exchange-reported error.

    Use :meth:`from_http_response` to build one from an HTTP response and
    :meth:`into_result` to unwrap it.
    """

    __slots__ = ("status", "payload", "error")

    status: int
    payload: T | None
    error: ErrorResponse | None

    def __init__(
        self,
        *,
        status: int = 200,
        payload: T | None = None,
        error: ErrorResponse | None = None,
    ) -> None:
        self.status = status
        self.payload = payload
        self.error = error

    @property
    def is_success(self) -> bool:
        """Whether the response carries a payload rather than an error."""
        return self.error is None

    @classmethod
    def from_http_response(
        cls,
        response: HttpResponse,
        parse: Callable[[Json], T],
        url: str,
    ) -> "ApiResponse[T]":
        """Decode an HTTP response.

        Args:
            response: The raw HTTP response
            parse: Converts the decoded JSON body into the endpoint's output type.
                Must raise DeserializationError when the body has the wrong shape.
            url: The requested URL, for error messages

        Returns:
            ApiResponse: The decoded payload, or the error the exchange reported

        Raises:
            DeserializationError: If a 2XX body is not valid JSON, or is neither
                the expected payload nor an error

        """
        status = response.status

        if not 200 <= status < 300:
            try:
                data = orjson.loads(response.body)
            except orjson.JSONDecodeError:
                data = None
            error = ErrorResponse.from_json(data)
            if error is None:
                error = ErrorResponse(
                    code=None,
                    msg=body_excerpt(response.body) or "<no error message>",
                )
            return cls(status=status, error=error)

        data = deserialize_response(response.body, url)
        error = ErrorResponse.from_json(data)
        if error is not None and error.code not in SUCCESS_CODES:
            return cls(status=status, error=error)

        try:
            return cls(status=status, payload=parse(data))
        except DeserializationError as e:
            if e.body is None:
                e.body = body_excerpt(response.body)
            raise

    def into_result(self) -> T:
        """Return the payload, or raise the error the exchange reported.

        Returns:
            T: The parsed payload

        Raises:
            ApiError: The exchange rejected the request (status-specific subclass
                for non-2XX responses)

        """
        if self.error is None:
            return self.payload  # type: ignore
        log.warning(
            "Exchange returned error code=%s status=%d: %s",
            self.error.code,
            self.status,
            self.error.msg,
        )
        raise error_for_status(self.status, self.error)
