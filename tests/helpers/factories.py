"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_registry, make_edge

    assets, venues = make_registry([COIN_A, COIN_B], venue_ids=[1, 2])
"""

from collections.abc import Sequence

from routex.models.registry import Asset, AssetRegistry, Venue, build_venue_map
from routex.routing.types import Edge, Routing


def make_asset(type_id: str, symbol: str | None = None, decimals: int = 8) -> Asset:
    """Create an asset whose symbol defaults to the struct name of its type."""
    return Asset(
        symbol=symbol or type_id.rsplit("::", 1)[-1],
        logo=f"https://example.com/{type_id.rsplit('::', 1)[-1].lower()}.png",
        type_id=type_id,
        decimals=decimals,
    )


def make_venue(venue_id: int, name: str | None = None) -> Venue:
    return Venue(id=venue_id, name=name or f"Venue{venue_id}", logo="https://example.com/v.png")


def make_registry(
    type_ids: Sequence[str],
    venue_ids: Sequence[int] = (1,),
) -> tuple[AssetRegistry, dict[int, Venue]]:
    """Create an asset registry and venue map for the given identifiers."""
    assets = AssetRegistry(make_asset(type_id) for type_id in type_ids)
    venues = build_venue_map(make_venue(venue_id) for venue_id in venue_ids)
    return assets, venues


def make_edge(from_type_id: str, to_type_id: str, venue_id: int = 1) -> Edge:
    return Edge(
        from_type_id=from_type_id,
        to_type_id=to_type_id,
        venue_id=venue_id,
        venue_name=f"Venue{venue_id}",
        logo="https://example.com/v.png",
    )


def make_routing(
    type_path: Sequence[str],
    amount_in: int = 1_000,
    amount_out: int = 1_000,
    venue_ids: Sequence[int] | None = None,
) -> Routing:
    """Create a routing along `type_path` (origin, then each hop's destination)."""
    hops = len(type_path) - 1
    venue_ids = venue_ids or [1] * hops
    path = tuple(
        make_edge(type_path[i], type_path[i + 1], venue_ids[i]) for i in range(hops)
    )
    return Routing(
        from_type_id=type_path[0],
        to_type_id=type_path[-1],
        path=path,
        amount_in=amount_in,
        amount_out=amount_out,
    )
