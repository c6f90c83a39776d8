"""Request signing for authenticated MEXC endpoints.

Signed endpoints authenticate every request with an HMAC-SHA256 digest of the
query string, keyed with the account's API secret. The digest is transmitted
as the last query parameter, ``signature``, so the server can recompute it over
the same bytes.
"""

import hmac
from dataclasses import dataclass, field
from datetime import datetime
from hashlib import sha256
from typing import Sequence

from mexc_api.errors import MissingCredentialsError
from mexc_api.helpers import WireQuery, serialize_query
from mexc_api.types import QueryPairs, utc_now

SIGNATURE_FIELD = "signature"


@dataclass(kw_only=True)
class SignedWireQuery(WireQuery):
    """Wire query of a signed endpoint.

    ``recvWindow`` and ``timestamp`` are keyword-only, so they are serialized
    after the endpoint's own parameters. The timestamp defaults to the moment
    the query is built, which endpoints do right before sending it.
    """

    recv_window: int | None = None
    timestamp: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class SignedQuery:
    """A query together with the signature computed over its serialized form.

    Attributes:
        query: The original (key, value) pairs, in transmission order.
        signature: Lowercase hex HMAC-SHA256 of ``serialize_query(query)``.

    """

    query: QueryPairs
    signature: str

    def to_query(self) -> QueryPairs:
        """Return the original pairs with the signature appended last."""
        return [*self.query, (SIGNATURE_FIELD, self.signature)]

    def to_query_string(self) -> str:
        """Return the exact query string to transmit.

        The signed prefix is reproduced verbatim so the bytes the server hashes
        are the bytes that were signed.
        """
        prefix = serialize_query(self.query)
        signature_part = serialize_query([(SIGNATURE_FIELD, self.signature)])
        return f"{prefix}&{signature_part}" if prefix else signature_part


def compute_signature(payload: str, secret: str) -> str:
    """Compute the hex HMAC-SHA256 of a payload.

    Args:
        payload: The canonical query string
        secret: The account API secret

    Returns:
        str: The hex-encoded signature

    Raises:
        MissingCredentialsError: If no secret is provided

    """
    if not secret:
        raise MissingCredentialsError("API secret")
    return hmac.new(secret.encode(), payload.encode(), sha256).hexdigest()


def sign_query(
    query: WireQuery | Sequence[tuple[str, str]], secret: str
) -> SignedQuery:
    """Sign a query with the account secret.

    Args:
        query: The wire query (or its pairs) to sign. Must already carry its
            timestamp and, if used, its receive window.
        secret: The account API secret

    Returns:
        SignedQuery: The original pairs plus the computed signature

    Raises:
        SerializationError: If a field of the query cannot be serialized
        MissingCredentialsError: If the secret is empty

    Example:
        .. code-block:: python

            signed = sign_query([("symbol", "MXUSDT"), ("timestamp", "1666676533741")], secret)
            path = f"/api/v3/order?{signed.to_query_string()}"

    """
    pairs = query.to_query() if isinstance(query, WireQuery) else list(query)
    signature = compute_signature(serialize_query(pairs), secret)
    return SignedQuery(query=pairs, signature=signature)
