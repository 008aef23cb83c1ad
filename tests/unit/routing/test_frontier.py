"""Tests for the search frontier."""

from routex.routing.frontier import Frontier
from routex.routing.types import PathState
from tests.helpers import COIN_A, COIN_B, COIN_C, make_edge


def make_state(type_id: str, amount: int, hops: int = 1) -> PathState:
    path = tuple(make_edge(COIN_A, type_id) for _ in range(hops))
    return PathState(type_id=type_id, amount=amount, path=path)


class TestFrontier:
    """Tests for Frontier improvement rules."""

    def test_holds_origin(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        assert COIN_A in frontier
        assert frontier[COIN_A].amount == 100
        assert frontier.amounts() == {COIN_A: 100}

    def test_new_asset_accepted(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        assert frontier.offer(make_state(COIN_B, 50)) is True
        assert frontier.get(COIN_B).amount == 50

    def test_strict_improvement_replaces(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        frontier.offer(make_state(COIN_B, 50))
        better = make_state(COIN_B, 51, hops=2)

        assert frontier.offer(better) is True
        assert frontier[COIN_B] is better

    def test_tie_keeps_earlier_state(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        first = make_state(COIN_B, 50)
        frontier.offer(first)

        assert frontier.offer(make_state(COIN_B, 50, hops=2)) is False
        assert frontier[COIN_B] is first

    def test_never_decreases(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        frontier.offer(make_state(COIN_B, 80))

        assert frontier.offer(make_state(COIN_B, 10)) is False
        assert frontier[COIN_B].amount == 80

    def test_dead_continuation_fills_missing_entry(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        dead = make_state(COIN_C, 0)

        assert frontier.offer(dead) is True
        assert frontier[COIN_C] is dead

    def test_dead_continuation_never_replaces(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        first = make_state(COIN_C, 0)
        frontier.offer(first)

        assert frontier.offer(make_state(COIN_C, 0, hops=2)) is False
        assert frontier.offer(make_state(COIN_A, 0, hops=2)) is False
        assert frontier[COIN_C] is first
        assert frontier[COIN_A].amount == 100

    def test_dead_continuation_is_superseded(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        frontier.offer(make_state(COIN_C, 0))

        assert frontier.offer(make_state(COIN_C, 1, hops=2)) is True
        assert frontier[COIN_C].amount == 1

    def test_origin_can_improve_through_cycle(self) -> None:
        frontier = Frontier(PathState(type_id=COIN_A, amount=100))
        assert frontier.offer(make_state(COIN_A, 120, hops=2)) is True
        assert frontier[COIN_A].hops == 2
