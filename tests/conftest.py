"""Pytest configuration and fixtures."""

import pytest

from routex.chain.quoter import MockQuoteOracle
from routex.config import RoutexConfig
from routex.routex import Routex
from routex.routing.engine import RoutingEngine
from routex.routing.graph import PairGraph
from tests.helpers import COIN_A, COIN_B, COIN_C, COIN_D, make_registry


@pytest.fixture
def abcd_graph() -> PairGraph:
    """Four coins, one venue."""
    assets, venues = make_registry([COIN_A, COIN_B, COIN_C, COIN_D])
    return PairGraph.from_registries(assets, venues)


@pytest.fixture
def doubling_oracle() -> MockQuoteOracle:
    """Every quote returns twice the input."""
    return MockQuoteOracle(default_rate=(2, 1))


@pytest.fixture
def doubling_engine(abcd_graph: PairGraph, doubling_oracle: MockQuoteOracle) -> RoutingEngine:
    return RoutingEngine(abcd_graph, doubling_oracle)


@pytest.fixture
def mock_routex() -> Routex:
    """Routex over the default deployment registries with a 1:1 mock oracle."""
    return Routex(MockQuoteOracle(default_rate=(1, 1)), config=RoutexConfig())
