"""Entry-function payload building for Routex swaps.

Compiled calls are descriptors only: signing and submitting them is the
caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import structlog

from routex.constants import (
    DEFAULT_MAX_SLIPPAGE,
    DEFAULT_OFFICIAL_COIN_ADDRESS,
    DEFAULT_ROUTER_MODULE,
    DEFAULT_ROUTEX_ADDRESS,
    FAUCET_MODULE,
    OFFICIAL_FAUCET_FUNCTION,
    SLIPPAGE_BASE,
    SWAP_ENTRY_FUNCTIONS,
)
from routex.errors import UnsupportedHopCount
from routex.routing.types import Routing

logger = structlog.get_logger()


@dataclass(frozen=True)
class CallDescriptor:
    """An entry-function call ready to be built into a transaction."""

    function: str
    type_arguments: tuple[str, ...] = ()
    function_arguments: tuple[Any, ...] = field(default=())

    def to_payload(self) -> dict[str, Any]:
        """Render as a REST entry-function payload.

        Integers are rendered as decimal strings, the encoding the REST
        interface uses for u64 arguments.
        """
        return {
            "type": "entry_function_payload",
            "function": self.function,
            "type_arguments": list(self.type_arguments),
            "arguments": [_render_argument(arg) for arg in self.function_arguments],
        }


def _render_argument(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_render_argument(item) for item in value]
    return value


def min_amount_out(amount_out: int, max_slippage: int) -> int:
    """Smallest output accepted for a quoted `amount_out`.

    Args:
        amount_out: Quoted output amount
        max_slippage: Tolerance in tenths of a percent (10 = 1.0%)

    Returns:
        amount_out * (1000 - max_slippage) // 1000 (floor)

    Raises:
        ValueError: If max_slippage is outside [0, 1000]
    """
    if isinstance(max_slippage, bool) or not isinstance(max_slippage, int):
        raise ValueError(f"max_slippage must be an integer, got {max_slippage!r}")
    if not 0 <= max_slippage <= SLIPPAGE_BASE:
        raise ValueError(f"max_slippage must be between 0 and {SLIPPAGE_BASE}, got {max_slippage}")
    return amount_out * (SLIPPAGE_BASE - max_slippage) // SLIPPAGE_BASE


class TransactionCompiler:
    """Turns routings into calls of the router module's swap entry points."""

    def __init__(
        self,
        routex_address: str = DEFAULT_ROUTEX_ADDRESS,
        router_module: str = DEFAULT_ROUTER_MODULE,
        official_coin_address: str = DEFAULT_OFFICIAL_COIN_ADDRESS,
    ) -> None:
        self.routex_address = routex_address
        self.router_module = router_module
        self.official_coin_address = official_coin_address

    @property
    def max_hops(self) -> int:
        return max(SWAP_ENTRY_FUNCTIONS)

    def entry_function(self, hops: int) -> str:
        """Fully qualified swap entry point for a path of `hops` swaps.

        Raises:
            UnsupportedHopCount: If no entry point exists for that length
        """
        name = SWAP_ENTRY_FUNCTIONS.get(hops)
        if name is None:
            raise UnsupportedHopCount(hops)
        return f"{self.routex_address}::{self.router_module}::{name}"

    def compile_swap(
        self,
        routing: Routing,
        max_slippage: int = DEFAULT_MAX_SLIPPAGE,
    ) -> CallDescriptor:
        """Build the swap call executing `routing` atomically.

        Args:
            routing: Result of a routing search
            max_slippage: Tolerance in tenths of a percent (10 = 1.0%)

        Returns:
            CallDescriptor with arguments (venue ids, amount_in, min_amount_out)
            and type arguments (origin asset, then each hop's destination)

        Raises:
            UnsupportedHopCount: If the path length has no entry point
            ValueError: If max_slippage is outside [0, 1000]
        """
        function = self.entry_function(routing.hops)
        amount_out_min = min_amount_out(routing.amount_out, max_slippage)

        descriptor = CallDescriptor(
            function=function,
            type_arguments=tuple(routing.type_path),
            function_arguments=(
                routing.venue_ids,
                routing.amount_in,
                amount_out_min,
            ),
        )
        logger.info(
            "swap_compiled",
            function=function,
            hops=routing.hops,
            amount_in=routing.amount_in,
            amount_out=routing.amount_out,
            min_amount_out=amount_out_min,
        )
        return descriptor

    def compile_faucet_request(self, type_id: str) -> CallDescriptor:
        """Request test coins of `type_id` from the Routex faucet."""
        return CallDescriptor(
            function=f"{self.routex_address}::{FAUCET_MODULE}::request",
            type_arguments=(type_id,),
            function_arguments=(self.routex_address,),
        )

    def compile_official_faucet_request(self) -> CallDescriptor:
        """Mint every bridged test token from the official faucet."""
        tokens = ("USDC", "USDT", "WBTC", "WETH")
        return CallDescriptor(
            function=f"{self.official_coin_address}::{OFFICIAL_FAUCET_FUNCTION}",
            type_arguments=tuple(
                f"{self.official_coin_address}::tokens::{token}" for token in tokens
            ),
        )


__all__ = ["CallDescriptor", "TransactionCompiler", "min_amount_out"]
