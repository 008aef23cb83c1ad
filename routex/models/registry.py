"""Asset and venue registries.

Assets are identified by their Move type identifier, never by symbol:
symbols are display metadata and may repeat across deployments.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from routex.constants import (
    APTOS_COIN,
    DEFAULT_OFFICIAL_COIN_ADDRESS,
    DEFAULT_ROUTEX_ADDRESS,
)
from routex.models.types import is_valid_type_id


@dataclass(frozen=True)
class Asset:
    """A tradable coin."""

    symbol: str
    logo: str
    type_id: str
    decimals: int


@dataclass(frozen=True)
class Venue:
    """A swap venue the router can dispatch to.

    `id` is the numeric identifier passed to the chain in swap calls.
    """

    id: int
    name: str
    logo: str


class AssetRegistry:
    """Ordered, immutable collection of assets keyed by type identifier.

    Registration order is preserved; it determines the edge order of the
    pair graph built from this registry.
    """

    def __init__(self, assets: Iterable[Asset]) -> None:
        self._assets: dict[str, Asset] = {}
        for asset in assets:
            if not is_valid_type_id(asset.type_id):
                raise ValueError(f"Invalid Move type identifier: {asset.type_id!r}")
            if asset.type_id in self._assets:
                raise ValueError(f"Duplicate asset type identifier: {asset.type_id}")
            if asset.decimals < 0:
                raise ValueError(f"Asset {asset.symbol} has negative decimals")
            self._assets[asset.type_id] = asset

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets.values())

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._assets

    def get(self, type_id: str) -> Asset | None:
        return self._assets.get(type_id)

    def by_symbol(self, symbol: str) -> list[Asset]:
        """All assets with the given symbol (case-insensitive), in registry order."""
        wanted = symbol.upper()
        return [asset for asset in self._assets.values() if asset.symbol.upper() == wanted]

    def as_list(self) -> list[Asset]:
        return list(self._assets.values())


def build_venue_map(venues: Iterable[Venue]) -> dict[int, Venue]:
    """Index venues by id, rejecting duplicates."""
    venue_map: dict[int, Venue] = {}
    for venue in venues:
        if venue.id < 0:
            raise ValueError(f"Venue {venue.name} has negative id {venue.id}")
        if venue.id in venue_map:
            raise ValueError(f"Duplicate venue id: {venue.id}")
        venue_map[venue.id] = venue
    return venue_map


def default_assets(
    routex_address: str = DEFAULT_ROUTEX_ADDRESS,
    official_coin_address: str = DEFAULT_OFFICIAL_COIN_ADDRESS,
) -> AssetRegistry:
    """Assets listed on the Movement testnet deployment."""
    return AssetRegistry(
        [
            Asset(
                symbol="BTC",
                logo="https://cryptologos.cc/logos/bitcoin-btc-logo.png",
                type_id=f"{official_coin_address}::tokens::WBTC",
                decimals=8,
            ),
            Asset(
                symbol="ETH",
                logo="https://cryptologos.cc/logos/ethereum-eth-logo.png",
                type_id=f"{official_coin_address}::tokens::WETH",
                decimals=8,
            ),
            Asset(
                symbol="USDT",
                logo="https://cryptologos.cc/logos/tether-usdt-logo.png",
                type_id=f"{official_coin_address}::tokens::USDT",
                decimals=8,
            ),
            Asset(
                symbol="USDC",
                logo="https://cryptologos.cc/logos/usd-coin-usdc-logo.png",
                type_id=f"{official_coin_address}::tokens::USDC",
                decimals=8,
            ),
            Asset(
                symbol="RTX",
                logo="https://i.imgur.com/rgYOokU.png",
                type_id=f"{routex_address}::TestCoinsV1::RTX",
                decimals=8,
            ),
            Asset(
                symbol="MOVE",
                logo="https://i.imgur.com/Ds1sl3Q.png",
                type_id=APTOS_COIN,
                decimals=8,
            ),
        ]
    )


def default_venues() -> dict[int, Venue]:
    """Venues the testnet router dispatches to."""
    return build_venue_map(
        [
            Venue(id=1, name="Razor", logo="https://imgur.com/a/wzI9fa9.png"),
        ]
    )


__all__ = [
    "Asset",
    "AssetRegistry",
    "Venue",
    "build_venue_map",
    "default_assets",
    "default_venues",
]
