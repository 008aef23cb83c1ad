"""Bounded-hop best-amount search over the pair graph.

The search runs a fixed number of relaxation rounds. Each round quotes
every outgoing edge of the assets that improved in the previous round,
all concurrently, then keeps a new state for an asset if the asset is
not reached yet or the state beats the best amount seen so far for it.

Edge outputs depend on the input amount (venues may price nonlinearly),
so this is a greedy local-improvement search rather than an exhaustive
one: a path that reaches an intermediate asset with a smaller amount is
abandoned even if it would have ended better.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import structlog

from routex.chain.quoter import QuoteOracle
from routex.constants import MAX_HOPS
from routex.errors import NoRouteFound
from routex.routing.frontier import Frontier
from routex.routing.graph import PairGraph
from routex.routing.types import Edge, PathState, Routing

logger = structlog.get_logger()

# Called after each round with (round_number, best amount per asset)
RoundListener = Callable[[int, dict[str, int]], None]


class RoutingEngine:
    """Finds the path that maximizes output between two assets.

    The engine holds no per-search state: each `find_route` call builds its
    own frontier, so concurrent calls on one engine do not interfere.

    Args:
        graph: Pair graph to search
        oracle: Quote source for edge outputs
        max_in_flight_quotes: Upper bound on concurrent quote requests within a
            round. None dispatches every request of the round at once.
        round_listener: Optional hook observing the frontier after each round
    """

    def __init__(
        self,
        graph: PairGraph,
        oracle: QuoteOracle,
        max_in_flight_quotes: int | None = None,
        round_listener: RoundListener | None = None,
    ) -> None:
        if max_in_flight_quotes is not None and max_in_flight_quotes < 1:
            raise ValueError(f"max_in_flight_quotes must be positive, got {max_in_flight_quotes}")
        self.graph = graph
        self.oracle = oracle
        self.max_in_flight_quotes = max_in_flight_quotes
        self.round_listener = round_listener

    async def find_route(
        self,
        from_type_id: str,
        to_type_id: str,
        amount_in: int,
        max_hops: int = MAX_HOPS,
    ) -> Routing:
        """Find the best path from one asset to another.

        Args:
            from_type_id: Origin asset type identifier
            to_type_id: Destination asset type identifier
            amount_in: Exact input amount
            max_hops: Number of relaxation rounds (maximum path length)

        Returns:
            Routing with the best path found and its quoted output

        Raises:
            NoRouteFound: If the origin is not in the graph, or no non-empty
                path reaches the destination within max_hops. A reachable
                destination whose quotes all failed yields amount_out 0.
            ValueError: If amount_in is negative or max_hops < 1
        """
        if amount_in < 0:
            raise ValueError(f"amount_in cannot be negative: {amount_in}")
        if max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {max_hops}")

        if not self.graph.edges_from(from_type_id):
            logger.info(
                "route_not_found",
                from_type_id=from_type_id,
                to_type_id=to_type_id,
                reason="unknown_origin",
            )
            raise NoRouteFound(from_type_id, to_type_id)

        frontier = Frontier(PathState(type_id=from_type_id, amount=amount_in))
        # dict keys as an ordered set: first-improvement order keeps results deterministic
        active: dict[str, None] = {from_type_id: None}
        semaphore = (
            asyncio.Semaphore(self.max_in_flight_quotes)
            if self.max_in_flight_quotes is not None
            else None
        )

        rounds = 0
        for round_number in range(1, max_hops + 1):
            if not active:
                break
            candidates = await self._expand_round(frontier, list(active), semaphore)

            improved: dict[str, None] = {}
            for state in candidates:
                if frontier.offer(state):
                    improved[state.type_id] = None
            active = improved
            rounds = round_number

            logger.debug(
                "routing_round",
                round=round_number,
                quotes=len(candidates),
                improved_assets=len(active),
            )
            if self.round_listener is not None:
                self.round_listener(round_number, frontier.amounts())

        best = frontier.get(to_type_id)
        if best is None or not best.path:
            logger.info(
                "route_not_found",
                from_type_id=from_type_id,
                to_type_id=to_type_id,
                rounds=rounds,
            )
            raise NoRouteFound(from_type_id, to_type_id)

        logger.info(
            "route_found",
            from_type_id=from_type_id,
            to_type_id=to_type_id,
            hops=best.hops,
            amount_in=amount_in,
            amount_out=best.amount,
            rounds=rounds,
        )
        return Routing(
            from_type_id=from_type_id,
            to_type_id=to_type_id,
            path=best.path,
            amount_in=amount_in,
            amount_out=best.amount,
        )

    async def _expand_round(
        self,
        frontier: Frontier,
        active: list[str],
        semaphore: asyncio.Semaphore | None,
    ) -> list[PathState]:
        """Quote every outgoing edge of the active assets concurrently.

        Returns the resulting states in dispatch order, once all quotes
        have completed. If any request is cancelled, the rest of the round
        is cancelled and awaited before the cancellation propagates.
        """
        tasks = [
            asyncio.ensure_future(self._quote_edge(frontier[type_id], edge, semaphore))
            for type_id in active
            for edge in self.graph.edges_from(type_id)
        ]
        try:
            return list(await asyncio.gather(*tasks))
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

    async def _quote_edge(
        self,
        state: PathState,
        edge: Edge,
        semaphore: asyncio.Semaphore | None,
    ) -> PathState:
        """Follow one edge; a failed quote yields a zero-amount continuation."""
        try:
            if semaphore is None:
                amount_out = await self._quote(edge, state.amount)
            else:
                async with semaphore:
                    amount_out = await self._quote(edge, state.amount)
        except Exception as e:
            logger.warning(
                "quote_failed",
                venue_id=edge.venue_id,
                from_type_id=edge.from_type_id,
                to_type_id=edge.to_type_id,
                amount_in=state.amount,
                error=str(e),
            )
            amount_out = 0
        return state.extend(edge, amount_out)

    async def _quote(self, edge: Edge, amount_in: int) -> int:
        amount_out = await self.oracle.quote(
            edge.venue_id, edge.from_type_id, edge.to_type_id, amount_in
        )
        if isinstance(amount_out, bool) or not isinstance(amount_out, int) or amount_out < 0:
            raise ValueError(f"oracle returned invalid amount {amount_out!r}")
        return amount_out


__all__ = ["RoutingEngine", "RoundListener"]
