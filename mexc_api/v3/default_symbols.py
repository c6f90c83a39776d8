"""Symbols tradable through the API: ``GET /api/v3/defaultSymbols``."""

from mexc_api.endpoint import (
    PublicEndpoint,
    checked_parser,
    expect_array,
    expect_object,
    expect_str,
)
from mexc_api.types import Json

DEFAULT_SYMBOLS_PATH = "/api/v3/defaultSymbols"


def parse_default_symbols(data: Json) -> list[str]:
    # wrapped as {"code": 0, "data": [...], "msg": null}
    return [expect_str(symbol) for symbol in expect_array(expect_object(data)["data"])]


class DefaultSymbolsEndpoint(PublicEndpoint):
    async def default_symbols(self) -> list[str]:
        """Get the symbols that can be traded through the API.

        Returns:
            list[str]: Symbol names, e.g. ["MXUSDT", "BTCUSDT"]

        Endpoint:
            GET /api/v3/defaultSymbols

        """
        return await self._send_public_request(
            DEFAULT_SYMBOLS_PATH, None, checked_parser(parse_default_symbols)
        )
