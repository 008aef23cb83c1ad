"""Swap routing logic.

Module structure:
- types.py: Edge, PathState and Routing dataclasses
- graph.py: PairGraph built from the asset and venue registries
- frontier.py: Frontier, the best-amount record of one search
- engine.py: RoutingEngine, the bounded-hop best-amount search
"""

from routex.routing.engine import RoutingEngine
from routex.routing.frontier import Frontier
from routex.routing.graph import PairGraph
from routex.routing.types import Edge, PathState, Routing

__all__ = [
    "Edge",
    "Frontier",
    "PairGraph",
    "PathState",
    "Routing",
    "RoutingEngine",
]
