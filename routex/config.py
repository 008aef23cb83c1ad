"""Runtime configuration for Routex."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from routex.constants import (
    DEFAULT_FULLNODE_URL,
    DEFAULT_MAX_SLIPPAGE,
    DEFAULT_OFFICIAL_COIN_ADDRESS,
    DEFAULT_ROUTER_MODULE,
    DEFAULT_ROUTEX_ADDRESS,
    MAX_HOPS,
    SLIPPAGE_BASE,
)
from routex.models.types import is_valid_account_address


@dataclass(frozen=True)
class RoutexConfig:
    """Centralized configuration for a Routex deployment.

    Attributes:
        fullnode_url: REST endpoint of the fullnode (with version prefix)
        routex_address: Account that publishes the router module
        official_coin_address: Account that publishes the bridged test tokens
        router_module: Router module name ("RoutexV2", or "RoutexV1" on older deployments)
        max_hops: Default hop budget for searches (1..MAX_HOPS)
        max_in_flight_quotes: Bound on concurrent quote requests per round
            (None = unbounded)
        request_timeout: Seconds before a single REST request gives up
        default_max_slippage: Slippage tolerance in tenths of a percent
    """

    fullnode_url: str = DEFAULT_FULLNODE_URL
    routex_address: str = DEFAULT_ROUTEX_ADDRESS
    official_coin_address: str = DEFAULT_OFFICIAL_COIN_ADDRESS
    router_module: str = DEFAULT_ROUTER_MODULE
    max_hops: int = MAX_HOPS
    max_in_flight_quotes: int | None = None
    request_timeout: float = 30.0
    default_max_slippage: int = DEFAULT_MAX_SLIPPAGE

    def __post_init__(self) -> None:
        if not is_valid_account_address(self.routex_address):
            raise ValueError(f"Invalid routex_address: {self.routex_address}")
        if not is_valid_account_address(self.official_coin_address):
            raise ValueError(f"Invalid official_coin_address: {self.official_coin_address}")
        if not 1 <= self.max_hops <= MAX_HOPS:
            raise ValueError(f"max_hops must be between 1 and {MAX_HOPS}, got {self.max_hops}")
        if self.max_in_flight_quotes is not None and self.max_in_flight_quotes < 1:
            raise ValueError(
                f"max_in_flight_quotes must be positive, got {self.max_in_flight_quotes}"
            )
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if not 0 <= self.default_max_slippage <= SLIPPAGE_BASE:
            raise ValueError(
                f"default_max_slippage must be between 0 and {SLIPPAGE_BASE}, "
                f"got {self.default_max_slippage}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RoutexConfig:
        """Build a configuration from ROUTEX_* environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        in_flight = env.get("ROUTEX_MAX_IN_FLIGHT_QUOTES", "")
        return cls(
            fullnode_url=env.get("ROUTEX_FULLNODE", DEFAULT_FULLNODE_URL),
            routex_address=env.get("ROUTEX_ADDRESS", DEFAULT_ROUTEX_ADDRESS),
            official_coin_address=env.get(
                "ROUTEX_OFFICIAL_COIN_ADDRESS", DEFAULT_OFFICIAL_COIN_ADDRESS
            ),
            router_module=env.get("ROUTEX_MODULE", DEFAULT_ROUTER_MODULE),
            max_hops=int(env.get("ROUTEX_MAX_HOPS", str(MAX_HOPS))),
            max_in_flight_quotes=int(in_flight) if in_flight else None,
            request_timeout=float(env.get("ROUTEX_REQUEST_TIMEOUT", "30.0")),
            default_max_slippage=int(env.get("ROUTEX_MAX_SLIPPAGE", str(DEFAULT_MAX_SLIPPAGE))),
        )


# Default configuration instance
DEFAULT_CONFIG = RoutexConfig()
