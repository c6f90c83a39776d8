import hmac
import logging
from functools import lru_cache
from hashlib import sha256
from pathlib import Path
from typing import Any, Generator
from urllib.parse import parse_qsl

import orjson
import pytest

from mexc_api.api import MexcApiClient, MexcApiClientWithAuthentication
from tests.mock_executors import MockHttpExecutor, MockOutputNotExhausted

DATA_DIR = Path(__file__).parent.joinpath("data")

TEST_API_KEY = "FOO"
TEST_API_SECRET = "BAR"

log = logging.getLogger(__name__)


@pytest.fixture
def mock_http_client() -> Generator[
    tuple[MexcApiClientWithAuthentication, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = MexcApiClientWithAuthentication(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        # replace real network requests with our mock
        executor=mock_http,
    )

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


@pytest.fixture
def mock_public_client() -> Generator[
    tuple[MexcApiClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = MexcApiClient(executor=mock_http)

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


def split_signed_path(path: str) -> tuple[str, dict[str, str], str, str]:
    """Split a transmitted signed path into its parts.

    Returns:
        The endpoint path, the decoded query parameters (signature included),
        the signed prefix of the query string and the transmitted signature.

    """
    endpoint, query_string = path.split("?", 1)
    prefix, signature_part = query_string.rsplit("&", 1)
    assert signature_part.startswith("signature=")
    return (
        endpoint,
        dict(parse_qsl(query_string)),
        prefix,
        signature_part.removeprefix("signature="),
    )


def has_valid_signature(path: str, secret: str = TEST_API_SECRET) -> bool:
    """Check the signature of a transmitted path against the bytes before it."""
    _, _, prefix, signature = split_signed_path(path)
    expected = hmac.new(secret.encode(), prefix.encode(), sha256).hexdigest()
    return hmac.compare_digest(expected, signature)


@lru_cache(maxsize=1)
def data_files() -> list[Path]:
    return list(DATA_DIR.iterdir())


@lru_cache(maxsize=None)
def json_data_files(name: str) -> list[Path]:
    return list(
        sorted(
            path
            for path in data_files()
            if path.match(f"*/{name}.*.json")
        )
    )


def load_json(name: str, case: int | None = None) -> Any:
    case_part = f"{case}." if case is not None else ""
    path = DATA_DIR / f"{name}.{case_part}json"
    with open(path, "rb") as fh:
        return orjson.loads(fh.read())


def load_json_all_cases(name: str) -> list[tuple[Any, Path]]:
    """Load all json payloads for a given base name (case0, case1, ...)."""
    results = []
    for path in json_data_files(name):
        log.debug("Loading json from %s", path.as_posix())
        with open(path, "rb") as fh:
            payload = orjson.loads(fh.read())
            results.append((payload, path))
    return results
