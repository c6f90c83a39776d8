"""Errors raised by the MEXC client.

Everything the client raises derives from :class:`BaseError`. The branches tell
apart who is at fault: the exchange refused the request, the request never
completed, the exchange answered something unreadable, or the caller passed
bad arguments and nothing was sent.

Exception Hierarchy
-------------------
BaseError
├── ExchangeError - MEXC answered and reported a failure
│   └── ApiError - ``{"code": ..., "msg": ...}`` body, kept verbatim
│       └── BadHttpStatus - Non-2XX HTTP status, one subclass per common status
├── TransportError - No usable HTTP response (connect, TLS, timeout, encoding)
├── DeserializationError - 2XX body that is not JSON or not the expected shape
└── ValidationError - Rejected locally before anything was sent
    └── MissingCredentialsError
"""

from typing import ClassVar


class BaseError(Exception):
    """Root of every error raised by ``mexc_api``.

    Catch this to handle any client failure in one place. It is never raised
    itself.
    """


# ============================================================================
# EXCHANGE ERRORS
# ============================================================================


class ExchangeError(BaseError):
    """MEXC received the request and refused it."""


class ApiError(ExchangeError):
    """Raised when the exchange rejects a request.

    MEXC reports errors as ``{"code": <int>, "msg": <str>}``. Both values are
    kept so callers can branch on ``code``, e.g. ``-2010`` when an order would
    exceed the available balance or ``700003`` when the timestamp falls outside
    the receive window.

    Attributes:
        code: The exchange's numeric error code, or None when the response
            carried no recognisable error body.
        message: The exchange's human-readable message.
        status_code: The HTTP status of the response, if known.

    """

    code: int | None
    message: str
    status_code: int | None

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        status_code: int | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{code}] {message}" if code is not None else message)


class BadHttpStatus(ApiError):
    """The response status was not 2XX.

    Subclasses bind one status each. Use :meth:`for_status` to pick the class
    and label for a status that was received.
    """

    status: ClassVar[int | None] = None
    label: ClassVar[str] = ""

    def __init__(self, status_code: int, message: str, code: int | None = None):
        super().__init__(message, code=code, status_code=status_code)

    @classmethod
    def for_status(cls, status: int) -> tuple[type["BadHttpStatus"], str]:
        """Return the error class and label describing an HTTP status.

        Statuses without a dedicated subclass map to BadHttpStatus for 4XX
        and 5XX alike, labelled with the numeric status.
        """
        for subclass in cls.__subclasses__():
            if subclass.status == status:
                return subclass, subclass.label
        if 400 <= status < 500:
            return BadHttpStatus, f"Client error ({status})"
        if 500 <= status < 600:
            return BadHttpStatus, f"Server error ({status})"
        return BadHttpStatus, f"Unexpected status code ({status})"


## 4xx: the request was wrong, or the key may not make it


class BadRequest(BadHttpStatus):
    """400. MEXC uses it for most order and parameter rejections."""

    status = 400
    label = "Bad request"


class Unauthorized(BadHttpStatus):
    """401. Unknown API key or invalid signature."""

    status = 401
    label = "Unauthorized"


class Forbidden(BadHttpStatus):
    """403. Key lacks the permission, or the IP is not whitelisted."""

    status = 403
    label = "Forbidden"


class NotFound(BadHttpStatus):
    status = 404
    label = "Not found"


class RateLimited(BadHttpStatus):
    """429. Request weight limit exceeded; back off before retrying."""

    status = 429
    label = "Rate limit exceeded"


## 5xx: the exchange failed, the order state may be unknown


class InternalServerError(BadHttpStatus):
    status = 500
    label = "Internal server error"


class BadGateway(BadHttpStatus):
    status = 502
    label = "Bad gateway"


class ServiceUnavailable(BadHttpStatus):
    """503. Maintenance or overload."""

    status = 503
    label = "Service unavailable"


class GatewayTimeout(BadHttpStatus):
    status = 504
    label = "Gateway timeout"


# ============================================================================
# TRANSPORT ERRORS
# ============================================================================


class TransportError(BaseError):
    """The request did not produce an HTTP response.

    Raised for DNS failures, TLS errors, refused or dropped connections,
    timeouts and queries that cannot be encoded. A failed order placement may
    still have reached the matching engine, so query the order before placing
    it again. The client itself never retries.
    """


class HttpConnectionError(TransportError):
    """The connection could not be opened or broke mid-request.

    ``url`` never includes the query string, so signatures stay out of logs.
    """

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(f"{message} (url: {url})" if url else message)


class TransportTimeoutError(TransportError):
    def __init__(self, message: str, timeout_seconds: float | None = None):
        self.message = message
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"{message} (timeout: {timeout_seconds}s)" if timeout_seconds else message
        )


class SerializationError(TransportError):
    """A query value could not be encoded into the request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# DESERIALIZATION ERRORS
# ============================================================================


class DeserializationError(BaseError):
    """A 2XX response body could not be turned into the endpoint's output.

    Either the body is not valid JSON (e.g. truncated) or its shape does not
    match the endpoint. Errors the exchange reports itself are ApiError, never
    this.

    Attributes:
        message: What went wrong while decoding.
        body: An excerpt of the raw body, when available.

    """

    def __init__(self, message: str, body: bytes | str | None = None):
        self.message = message
        self.body = body
        super().__init__(message)


# ============================================================================
# VALIDATION ERRORS
# ============================================================================


class ValidationError(BaseError):
    """Arguments were rejected locally and no request was sent.

    Typical causes are an order with both or neither of quantity and quote
    order quantity, an order lookup without an id, a receive window above
    60000 ms and a limit outside the endpoint's range.
    """


class MissingCredentialsError(ValidationError):
    """An authenticated client was built without its API key or secret."""

    def __init__(self, credential_type: str = "API key"):
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")
