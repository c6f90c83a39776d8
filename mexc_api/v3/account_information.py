"""Account information: ``GET /api/v3/account`` (signed)."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from mexc_api.endpoint import (
    SignedEndpoint,
    checked_parser,
    expect_array,
    expect_bool,
    expect_object,
    expect_str,
)
from mexc_api.signing import SignedWireQuery
from mexc_api.types import Json, decimal_from_wire, optional_datetime_from_ms

ACCOUNT_INFORMATION_PATH = "/api/v3/account"


@dataclass
class AccountInformationQuery(SignedWireQuery):
    """Carries only the signing fields."""


@dataclass
class AccountBalance:
    asset: str
    free: Decimal
    locked: Decimal

    @classmethod
    def from_json(cls, data: Json) -> "AccountBalance":
        balance = expect_object(data)
        return cls(
            asset=expect_str(balance["asset"]),
            free=decimal_from_wire(balance["free"]),
            locked=decimal_from_wire(balance["locked"]),
        )


@dataclass
class AccountInformationOutput:
    """Commissions, permissions and balances of the account.

    Attributes:
        maker_commission: Maker fee rate
        taker_commission: Taker fee rate
        buyer_commission: Buyer fee rate
        seller_commission: Seller fee rate
        can_trade: Whether the account may trade
        can_withdraw: Whether the account may withdraw
        can_deposit: Whether the account may deposit
        update_time: Last update of the account, if reported
        account_type: Account type, e.g. "SPOT"
        balances: One entry per asset held
        permissions: Granted permissions, e.g. ["SPOT"]

    """

    maker_commission: Decimal
    taker_commission: Decimal
    buyer_commission: Decimal
    seller_commission: Decimal
    can_trade: bool
    can_withdraw: bool
    can_deposit: bool
    update_time: datetime | None
    account_type: str
    balances: list[AccountBalance]
    permissions: list[str]

    @classmethod
    def from_json(cls, data: Json) -> "AccountInformationOutput":
        account = expect_object(data)
        return cls(
            maker_commission=decimal_from_wire(account["makerCommission"]),
            taker_commission=decimal_from_wire(account["takerCommission"]),
            buyer_commission=decimal_from_wire(account["buyerCommission"]),
            seller_commission=decimal_from_wire(account["sellerCommission"]),
            can_trade=expect_bool(account["canTrade"]),
            can_withdraw=expect_bool(account["canWithdraw"]),
            can_deposit=expect_bool(account["canDeposit"]),
            update_time=optional_datetime_from_ms(account.get("updateTime")),
            account_type=expect_str(account["accountType"]),
            balances=[
                AccountBalance.from_json(balance)
                for balance in expect_array(account["balances"])
            ],
            permissions=[
                expect_str(permission)
                for permission in expect_array(account["permissions"])
            ],
        )


class AccountInformationEndpoint(SignedEndpoint):
    async def account_information(self) -> AccountInformationOutput:
        """Get the commissions, permissions and balances of the account.

        Returns:
            AccountInformationOutput: The account's current information

        Raises:
            ApiError: If the exchange rejects the request
            DeserializationError: If the API response cannot be parsed
            TransportError: If the request could not be sent

        Example:
            .. code-block:: python

                account = await client.account_information()
                for balance in account.balances:
                    print(balance.asset, balance.free, balance.locked)

        Endpoint:
            GET /api/v3/account

        """
        query = AccountInformationQuery(recv_window=self.recv_window)
        return await self._send_signed_request(
            "GET",
            ACCOUNT_INFORMATION_PATH,
            query,
            checked_parser(AccountInformationOutput.from_json),
        )
