"""Coin balance lookups (used by harnesses, not by routing)."""

from __future__ import annotations

from typing import Protocol

import structlog

from routex.chain.client import AptosViewClient
from routex.constants import COIN_BALANCE_FUNCTION
from routex.models.types import normalize_account_address, parse_u64

logger = structlog.get_logger()


class BalanceReader(Protocol):
    """Protocol for coin balance sources."""

    async def balance_of(self, type_id: str, account_address: str) -> int:
        """Balance of `type_id` held by an account, 0 if unknown."""
        ...


class AptosBalanceReader:
    """Reads balances through the `0x1::coin::balance` view function."""

    def __init__(self, client: AptosViewClient) -> None:
        self.client = client

    async def balance_of(self, type_id: str, account_address: str) -> int:
        """Balance of `type_id` held by `account_address`.

        Returns 0 when the view call fails, which is also what the chain
        reports for accounts that never registered the coin. The address is
        normalized (lowercase, 0x prefix) before the call.

        Raises:
            ValueError: If account_address is not a hex account address
        """
        account = normalize_account_address(account_address)
        try:
            result = await self.client.view(COIN_BALANCE_FUNCTION, [type_id], [account])
            if not result:
                return 0
            return parse_u64(result[0])
        except Exception as e:
            logger.warning(
                "balance_read_failed",
                type_id=type_id,
                account_address=account,
                error=str(e),
            )
            return 0


__all__ = ["BalanceReader", "AptosBalanceReader"]
