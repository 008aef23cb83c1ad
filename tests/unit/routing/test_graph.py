"""Tests for the pair graph."""

import pytest

from routex.models.registry import default_assets, default_venues
from routex.routing.graph import PairGraph
from tests.helpers import COIN_A, COIN_B, COIN_C, COIN_D, make_asset, make_registry, make_venue


class TestPairGraph:
    """Tests for PairGraph construction."""

    def test_empty_registries(self) -> None:
        graph = PairGraph.from_registries([], {})
        assert graph.asset_count == 0
        assert graph.edge_count == 0

    @pytest.mark.parametrize(
        "asset_count,venue_count",
        [(2, 1), (4, 1), (4, 3), (6, 2)],
    )
    def test_complete_multigraph_edge_count(self, asset_count: int, venue_count: int) -> None:
        type_ids = [f"0x{i + 1:x}::coins::C{i}" for i in range(asset_count)]
        assets, venues = make_registry(type_ids, venue_ids=list(range(1, venue_count + 1)))
        graph = PairGraph.from_registries(assets, venues)

        assert graph.edge_count == asset_count * (asset_count - 1) * venue_count
        assert graph.asset_count == asset_count

    def test_no_self_loops(self) -> None:
        assets, venues = make_registry([COIN_A, COIN_B, COIN_C], venue_ids=[1, 2])
        graph = PairGraph.from_registries(assets, venues)
        assert all(edge.from_type_id != edge.to_type_id for edge in graph.iter_edges())

    def test_edges_grouped_by_source(self) -> None:
        assets, venues = make_registry([COIN_A, COIN_B, COIN_C])
        graph = PairGraph.from_registries(assets, venues)
        for type_id in (COIN_A, COIN_B, COIN_C):
            assert all(edge.from_type_id == type_id for edge in graph.edges_from(type_id))

    def test_construction_order(self) -> None:
        """For each destination in registry order, one edge per venue."""
        assets, venues = make_registry([COIN_A, COIN_B, COIN_C], venue_ids=[1, 2])
        graph = PairGraph.from_registries(assets, venues)

        edges = graph.edges_from(COIN_A)
        assert [(e.to_type_id, e.venue_id) for e in edges] == [
            (COIN_B, 1),
            (COIN_B, 2),
            (COIN_C, 1),
            (COIN_C, 2),
        ]

    def test_edge_carries_venue_metadata(self) -> None:
        assets, _ = make_registry([COIN_A, COIN_B])
        graph = PairGraph.from_registries(assets, {7: make_venue(7, "Razor")})

        (edge,) = graph.edges_from(COIN_A)
        assert edge.venue_id == 7
        assert edge.venue_name == "Razor"

    def test_unknown_asset_has_no_edges(self) -> None:
        assets, venues = make_registry([COIN_A, COIN_B])
        graph = PairGraph.from_registries(assets, venues)

        assert graph.edges_from(COIN_D) == ()
        assert not graph.has_asset(COIN_D)
        assert COIN_D not in graph

    def test_duplicate_type_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            PairGraph.from_registries([make_asset(COIN_A), make_asset(COIN_A)], {})

    def test_default_deployment(self) -> None:
        graph = PairGraph.from_registries(default_assets(), default_venues())
        # 6 coins, 1 venue
        assert graph.edge_count == 6 * 5 * 1
