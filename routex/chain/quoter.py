"""Quote oracle implementations for swap routing."""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from routex.chain.client import AptosViewClient
from routex.constants import DEFAULT_ROUTER_MODULE, GET_AMOUNTS_OUT
from routex.errors import MalformedViewResponse, QuoteUnavailable
from routex.models.types import parse_u64

logger = structlog.get_logger()


class QuoteOracle(Protocol):
    """Protocol for venue quote sources.

    This allows swapping between the on-chain oracle and a mock for testing.
    """

    async def quote(
        self,
        venue_id: int,
        from_type_id: str,
        to_type_id: str,
        amount_in: int,
    ) -> int:
        """Get the output amount a venue quotes for an exact input.

        Args:
            venue_id: Numeric venue identifier
            from_type_id: Input asset type identifier
            to_type_id: Output asset type identifier
            amount_in: Input amount

        Returns:
            Quoted output amount

        Raises:
            Exception: Any failure; callers treat it as an unavailable quote
        """
        ...


class AptosQuoteOracle:
    """Quotes swaps through the router module's `get_amounts_out` view function."""

    def __init__(
        self,
        client: AptosViewClient,
        routex_address: str,
        router_module: str = DEFAULT_ROUTER_MODULE,
    ) -> None:
        self.client = client
        self.function = f"{routex_address}::{router_module}::{GET_AMOUNTS_OUT}"

    async def quote(
        self,
        venue_id: int,
        from_type_id: str,
        to_type_id: str,
        amount_in: int,
    ) -> int:
        """Get output amount for exact input via a view call."""
        result = await self.client.view(
            self.function,
            [from_type_id, to_type_id],
            [venue_id, str(amount_in)],
        )
        if not result:
            raise MalformedViewResponse(f"{self.function}: empty result")
        return parse_u64(result[0])


QuoteKey = tuple[int, str, str, int]


class MockQuoteOracle:
    """Mock quote oracle for testing without a fullnode.

    Configure with expected quotes, and track calls for assertions.
    """

    def __init__(
        self,
        quotes: dict[QuoteKey, int] | None = None,
        default_rate: tuple[int, int] | None = None,
        failing: set[tuple[int, str, str]] | None = None,
        delay: float = 0.0,
    ) -> None:
        """Initialize mock oracle.

        Args:
            quotes: Mapping of (venue_id, from, to, amount_in) -> amount_out
            default_rate: If set, (numerator, denominator) ratio for any unconfigured
                         quote: amount_out = amount_in * num // denom
            failing: (venue_id, from, to) edges that always raise QuoteUnavailable
            delay: Seconds each quote sleeps before answering
        """
        self.quotes = quotes or {}
        self.default_rate = default_rate
        self.failing = failing or set()
        self.delay = delay
        self.calls: list[QuoteKey] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def quote(
        self,
        venue_id: int,
        from_type_id: str,
        to_type_id: str,
        amount_in: int,
    ) -> int:
        key = (venue_id, from_type_id, to_type_id, amount_in)
        self.calls.append(key)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            # Yield so concurrently dispatched quotes overlap
            await asyncio.sleep(self.delay)

            if (venue_id, from_type_id, to_type_id) in self.failing:
                raise QuoteUnavailable(f"no liquidity for {from_type_id} -> {to_type_id}")
            if key in self.quotes:
                return self.quotes[key]
            if self.default_rate is not None:
                num, denom = self.default_rate
                return amount_in * num // denom
            raise QuoteUnavailable(f"no quote configured for {key}")
        finally:
            self.in_flight -= 1


__all__ = ["QuoteOracle", "AptosQuoteOracle", "MockQuoteOracle", "QuoteKey"]
