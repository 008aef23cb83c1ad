"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """One directed swap opportunity: `venue` can quote from_type_id -> to_type_id."""

    from_type_id: str
    to_type_id: str
    venue_id: int
    venue_name: str
    logo: str


@dataclass(frozen=True)
class PathState:
    """Amount of an asset reachable from the origin through a specific path.

    Never mutated: a better path to the same asset produces a new PathState.
    """

    type_id: str
    amount: int
    path: tuple[Edge, ...] = ()

    @property
    def hops(self) -> int:
        return len(self.path)

    def extend(self, edge: Edge, amount_out: int) -> PathState:
        """Follow `edge` from this state, receiving `amount_out`."""
        if edge.from_type_id != self.type_id:
            raise ValueError(
                f"edge starts at {edge.from_type_id}, state holds {self.type_id}"
            )
        return PathState(type_id=edge.to_type_id, amount=amount_out, path=(*self.path, edge))


@dataclass(frozen=True)
class Routing:
    """Result of a routing search."""

    from_type_id: str
    to_type_id: str
    path: tuple[Edge, ...]
    amount_in: int
    amount_out: int

    @property
    def hops(self) -> int:
        return len(self.path)

    @property
    def is_multihop(self) -> bool:
        """Check if this route swaps through intermediate assets."""
        return len(self.path) > 1

    @property
    def type_path(self) -> list[str]:
        """Origin asset followed by each hop's destination asset."""
        return [self.from_type_id, *(edge.to_type_id for edge in self.path)]

    @property
    def venue_ids(self) -> list[int]:
        return [edge.venue_id for edge in self.path]


__all__ = ["Edge", "PathState", "Routing"]
