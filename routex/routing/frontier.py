"""Best-amount-so-far record for a single routing search."""

from __future__ import annotations

from collections.abc import Iterator

from routex.routing.types import PathState


class Frontier:
    """Best known PathState per asset during one search.

    Entries only ever improve: a state replaces the stored one only when
    its amount is strictly greater. The first state offered for an asset
    is always recorded, even a zero-amount (dead) continuation, so a
    reachable asset keeps a path when every quote to it fails.
    """

    def __init__(self, origin: PathState) -> None:
        self._states: dict[str, PathState] = {origin.type_id: origin}

    def offer(self, state: PathState) -> bool:
        """Record `state` if it improves on the stored amount.

        Returns:
            True if the frontier changed
        """
        current = self._states.get(state.type_id)
        if current is not None and state.amount <= current.amount:
            return False
        self._states[state.type_id] = state
        return True

    def get(self, type_id: str) -> PathState | None:
        return self._states.get(type_id)

    def __getitem__(self, type_id: str) -> PathState:
        return self._states[type_id]

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._states

    def __iter__(self) -> Iterator[PathState]:
        return iter(self._states.values())

    def amounts(self) -> dict[str, int]:
        """Snapshot of the best amount per asset."""
        return {type_id: state.amount for type_id, state in self._states.items()}


__all__ = ["Frontier"]
