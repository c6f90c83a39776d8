"""Trading rules and symbol information: ``GET /api/v3/exchangeInfo``."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    PublicEndpoint,
    checked_parser,
    expect_array,
    expect_bool,
    expect_int,
    expect_object,
    expect_str,
)
from mexc_api.errors import ValidationError
from mexc_api.helpers import WireQuery
from mexc_api.types import (
    Json,
    datetime_from_ms,
    optional_decimal_from_wire,
)

EXCHANGE_INFORMATION_PATH = "/api/v3/exchangeInfo"


@dataclass
class ExchangeInformationParams:
    """Restrict the response to one symbol or a set of symbols.

    With neither set, every symbol is returned.
    """

    symbol: str | None = None
    symbols: list[str] | None = None


@dataclass
class ExchangeInformationQuery(WireQuery):
    symbol: str | None = None
    symbols: list[str] | None = None

    @classmethod
    def from_params(cls, params: ExchangeInformationParams) -> "ExchangeInformationQuery":
        if params.symbol is not None and params.symbols is not None:
            raise ValidationError("Provide either symbol or symbols, not both")
        if params.symbols is not None and not params.symbols:
            raise ValidationError("symbols must not be empty")
        return cls(symbol=params.symbol, symbols=params.symbols)


@dataclass
class SymbolInformation:
    """Trading rules of one symbol."""

    symbol: str
    status: str
    base_asset: str
    base_asset_precision: int
    quote_asset: str
    quote_precision: int
    quote_asset_precision: int
    base_commission_precision: int
    quote_commission_precision: int
    order_types: list[str]
    is_spot_trading_allowed: bool
    is_margin_trading_allowed: bool
    quote_amount_precision: Decimal | None
    base_size_precision: Decimal | None
    permissions: list[str]
    max_quote_amount: Decimal | None
    maker_commission: Decimal | None
    taker_commission: Decimal | None

    @classmethod
    def from_json(cls, data: Json) -> "SymbolInformation":
        info = expect_object(data)
        return cls(
            symbol=expect_str(info["symbol"]),
            status=str(info["status"]),
            base_asset=expect_str(info["baseAsset"]),
            base_asset_precision=expect_int(info["baseAssetPrecision"]),
            quote_asset=expect_str(info["quoteAsset"]),
            quote_precision=expect_int(info["quotePrecision"]),
            quote_asset_precision=expect_int(info["quoteAssetPrecision"]),
            base_commission_precision=expect_int(info["baseCommissionPrecision"]),
            quote_commission_precision=expect_int(info["quoteCommissionPrecision"]),
            order_types=[expect_str(t) for t in expect_array(info["orderTypes"])],
            is_spot_trading_allowed=expect_bool(info["isSpotTradingAllowed"]),
            is_margin_trading_allowed=expect_bool(info["isMarginTradingAllowed"]),
            quote_amount_precision=optional_decimal_from_wire(
                info.get("quoteAmountPrecision")
            ),
            base_size_precision=optional_decimal_from_wire(info.get("baseSizePrecision")),
            permissions=[expect_str(p) for p in expect_array(info.get("permissions", []))],
            max_quote_amount=optional_decimal_from_wire(info.get("maxQuoteAmount")),
            maker_commission=optional_decimal_from_wire(info.get("makerCommission")),
            taker_commission=optional_decimal_from_wire(info.get("takerCommission")),
        )


@dataclass
class ExchangeInformationOutput:
    timezone: str
    server_time: datetime
    symbols: list[SymbolInformation]

    @classmethod
    def from_json(cls, data: Json) -> "ExchangeInformationOutput":
        info = expect_object(data)
        return cls(
            timezone=expect_str(info["timezone"]),
            server_time=datetime_from_ms(info["serverTime"]),
            symbols=[
                SymbolInformation.from_json(symbol)
                for symbol in expect_array(info["symbols"])
            ],
        )


class ExchangeInformationEndpoint(PublicEndpoint):
    async def exchange_information(
        self, params: ExchangeInformationParams | None = None
    ) -> ExchangeInformationOutput:
        """Get trading rules and symbol information.

        Args:
            params: Optional symbol filter. All symbols are returned without one.

        Returns:
            ExchangeInformationOutput: Server time zone and time plus the rules of
                each requested symbol

        Raises:
            ValidationError: If both symbol and symbols are set
            DeserializationError: If the API response cannot be parsed

        Example:
            .. code-block:: python

                info = await client.exchange_information(
                    ExchangeInformationParams(symbols=["MXUSDT", "BTCUSDT"])
                )
                for symbol in info.symbols:
                    print(symbol.symbol, symbol.base_asset_precision)

        Endpoint:
            GET /api/v3/exchangeInfo

        """
        query = ExchangeInformationQuery.from_params(
            params if params is not None else ExchangeInformationParams()
        )
        return await self._send_public_request(
            EXCHANGE_INFORMATION_PATH,
            query,
            checked_parser(ExchangeInformationOutput.from_json),
        )
