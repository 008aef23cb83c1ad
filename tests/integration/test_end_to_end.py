"""End-to-end routing scenarios from registries to compiled payload."""

import pytest

from routex.chain.quoter import MockQuoteOracle
from routex.config import RoutexConfig
from routex.errors import NoRouteFound
from routex.routex import Routex
from tests.helpers import COIN_A, COIN_B, COIN_C, COIN_D, make_registry


class ConstantProductOracle:
    """Quotes from x*y=k pools with a 0.3% fee, one pool per unordered pair."""

    def __init__(self, reserves: dict[frozenset[str], dict[str, int]]) -> None:
        self.reserves = reserves

    async def quote(self, venue_id: int, from_type_id: str, to_type_id: str, amount_in: int) -> int:
        pool = self.reserves[frozenset((from_type_id, to_type_id))]
        reserve_in, reserve_out = pool[from_type_id], pool[to_type_id]
        amount_in_with_fee = amount_in * 997
        return amount_in_with_fee * reserve_out // (reserve_in * 1000 + amount_in_with_fee)


def make_routex(oracle, type_ids=(COIN_A, COIN_B, COIN_C, COIN_D)) -> Routex:  # type: ignore[no-untyped-def]
    assets, venues = make_registry(type_ids)
    return Routex(oracle, config=RoutexConfig(), assets=assets, venues=venues)


class TestDoublingScenario:
    """Four coins, one venue, every quote doubles the input."""

    @pytest.mark.asyncio
    async def test_best_amount_within_three_hops(self) -> None:
        routex = make_routex(MockQuoteOracle(default_rate=(2, 1)))

        routing = await routex.find_route(COIN_A, COIN_D, 100, max_hops=3)
        call = routex.compile_swap(routing, max_slippage=10)

        assert routing.amount_out == 800
        assert routing.hops <= 3
        assert call.function.endswith("swap_exact_coins_for_coins_3_pair_entry")
        assert call.type_arguments[0] == COIN_A
        assert call.type_arguments[-1] == COIN_D
        assert call.function_arguments[2] == 792


class TestConstantProductScenario:
    """Nonlinear pricing: the thin direct pool loses to a deep two-hop path."""

    @pytest.mark.asyncio
    async def test_prefers_deep_liquidity(self) -> None:
        oracle = ConstantProductOracle(
            {
                frozenset((COIN_A, COIN_C)): {COIN_A: 1_000, COIN_C: 1_000},
                frozenset((COIN_A, COIN_B)): {COIN_A: 10**9, COIN_B: 10**9},
                frozenset((COIN_B, COIN_C)): {COIN_B: 10**9, COIN_C: 10**9},
            }
        )
        routex = make_routex(oracle, type_ids=(COIN_A, COIN_B, COIN_C))

        routing = await routex.find_route(COIN_A, COIN_C, 1_000, max_hops=2)

        assert routing.type_path == [COIN_A, COIN_B, COIN_C]
        # Two 0.3% fees on deep pools
        assert 990 <= routing.amount_out < 1_000
        payload = routex.compile_swap(routing).to_payload()
        assert payload["type_arguments"] == [COIN_A, COIN_B, COIN_C]
        assert payload["arguments"][0] == ["1", "1"]

    @pytest.mark.asyncio
    async def test_single_hop_budget_takes_thin_pool(self) -> None:
        oracle = ConstantProductOracle(
            {
                frozenset((COIN_A, COIN_C)): {COIN_A: 1_000, COIN_C: 1_000},
                frozenset((COIN_A, COIN_B)): {COIN_A: 10**9, COIN_B: 10**9},
                frozenset((COIN_B, COIN_C)): {COIN_B: 10**9, COIN_C: 10**9},
            }
        )
        routex = make_routex(oracle, type_ids=(COIN_A, COIN_B, COIN_C))

        routing = await routex.find_route(COIN_A, COIN_C, 1_000, max_hops=1)
        assert routing.hops == 1
        assert routing.amount_out == 499


class TestNoRouteScenario:
    """Origin outside the pair graph."""

    @pytest.mark.asyncio
    async def test_no_quotes_issued(self) -> None:
        oracle = MockQuoteOracle(default_rate=(2, 1))
        routex = make_routex(oracle, type_ids=(COIN_B, COIN_C))

        with pytest.raises(NoRouteFound):
            await routex.find_route(COIN_A, COIN_B, 100)
        assert oracle.calls == []
