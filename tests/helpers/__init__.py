"""Test helpers module for shared test utilities.

- constants: Coin type identifiers
- factories: Registry, edge and routing factory functions
"""

from tests.helpers.constants import (
    COIN_A,
    COIN_B,
    COIN_C,
    COIN_D,
    MOVE,
    OFFICIAL,
    ROUTEX,
    RTX,
    USDC,
    USDT,
    WBTC,
    WETH,
)
from tests.helpers.factories import (
    make_asset,
    make_edge,
    make_registry,
    make_routing,
    make_venue,
)

__all__ = [
    # Constants
    "COIN_A",
    "COIN_B",
    "COIN_C",
    "COIN_D",
    "MOVE",
    "OFFICIAL",
    "ROUTEX",
    "RTX",
    "USDC",
    "USDT",
    "WBTC",
    "WETH",
    # Factories
    "make_asset",
    "make_edge",
    "make_registry",
    "make_routing",
    "make_venue",
]
