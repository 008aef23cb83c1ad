"""Pair graph for multi-hop routing.

Every venue is assumed able to quote every ordered pair of distinct
registered assets, so the graph is a complete directed multigraph with
one edge per (from, to, venue) triple. Whether a quote actually succeeds
is decided at search time by the quote oracle.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

import structlog

from routex.models.registry import Asset, Venue
from routex.routing.types import Edge

logger = structlog.get_logger()


class PairGraph:
    """Adjacency list from asset type identifier to its outgoing edges.

    Edge order is construction order: for each source asset, for each
    destination asset (registry order), for each venue. The graph is
    read-only once built.
    """

    def __init__(self) -> None:
        """Initialize an empty pair graph."""
        self._adjacency: dict[str, tuple[Edge, ...]] = {}

    @classmethod
    def from_registries(
        cls,
        assets: Iterable[Asset],
        venues: Mapping[int, Venue],
    ) -> PairGraph:
        """Build the complete multigraph over the given assets and venues.

        Args:
            assets: Ordered assets; type identifiers must be unique
            venues: Venues keyed by id

        Returns:
            PairGraph with M*(M-1)*K edges for M assets and K venues
        """
        graph = cls()
        graph._build(list(assets), list(venues.values()))
        logger.debug(
            "pair_graph_built",
            asset_count=graph.asset_count,
            venue_count=len(venues),
            edge_count=graph.edge_count,
        )
        return graph

    def _build(self, assets: list[Asset], venues: list[Venue]) -> None:
        adjacency: dict[str, list[Edge]] = {}
        for source in assets:
            if source.type_id in adjacency:
                raise ValueError(f"Duplicate asset type identifier: {source.type_id}")
            edges: list[Edge] = []
            for target in assets:
                if target.type_id == source.type_id:
                    continue
                for venue in venues:
                    edges.append(
                        Edge(
                            from_type_id=source.type_id,
                            to_type_id=target.type_id,
                            venue_id=venue.id,
                            venue_name=venue.name,
                            logo=venue.logo,
                        )
                    )
            adjacency[source.type_id] = edges
        self._adjacency = {type_id: tuple(edges) for type_id, edges in adjacency.items()}

    def edges_from(self, type_id: str) -> tuple[Edge, ...]:
        """Outgoing edges of an asset (empty if the asset is not in the graph)."""
        return self._adjacency.get(type_id, ())

    def has_asset(self, type_id: str) -> bool:
        """Check if an asset is a source in the graph."""
        return type_id in self._adjacency

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._adjacency

    @property
    def asset_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over every edge in construction order."""
        for edges in self._adjacency.values():
            yield from edges


__all__ = ["PairGraph"]
