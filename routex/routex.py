"""Routex facade: registries, routing engine and transaction compiler.

The Routex class is the entry point for callers. It builds the pair graph
once from the registries and delegates searches and compilation.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from routex.chain.client import AptosViewClient
from routex.chain.quoter import AptosQuoteOracle, QuoteOracle
from routex.config import RoutexConfig
from routex.models.registry import (
    Asset,
    AssetRegistry,
    Venue,
    default_assets,
    default_venues,
)
from routex.routing.engine import RoutingEngine
from routex.routing.graph import PairGraph
from routex.routing.types import Routing
from routex.transactions.compiler import CallDescriptor, TransactionCompiler

logger = structlog.get_logger()


class Routex:
    """Swap router over a fixed set of assets and venues.

    Args:
        oracle: Quote source used by searches
        config: Deployment configuration. Defaults to RoutexConfig().
        assets: Asset registry. Defaults to the deployment's listed assets.
        venues: Venues keyed by id. Defaults to the deployment's venues.
    """

    def __init__(
        self,
        oracle: QuoteOracle,
        config: RoutexConfig | None = None,
        assets: AssetRegistry | None = None,
        venues: Mapping[int, Venue] | None = None,
    ) -> None:
        self.config = config or RoutexConfig()
        if assets is None:
            assets = default_assets(self.config.routex_address, self.config.official_coin_address)
        self.assets = assets
        self.venues: dict[int, Venue] = dict(venues) if venues is not None else default_venues()
        self.graph = PairGraph.from_registries(self.assets, self.venues)
        self.engine = RoutingEngine(
            self.graph,
            oracle,
            max_in_flight_quotes=self.config.max_in_flight_quotes,
        )
        self.compiler = TransactionCompiler(
            routex_address=self.config.routex_address,
            router_module=self.config.router_module,
            official_coin_address=self.config.official_coin_address,
        )

    def list_assets(self) -> list[Asset]:
        """All supported assets, in registry order."""
        return self.assets.as_list()

    def list_venues(self) -> dict[int, Venue]:
        """All supported venues, keyed by id."""
        return dict(self.venues)

    def get_asset(self, type_id: str) -> Asset | None:
        return self.assets.get(type_id)

    async def find_route(
        self,
        from_type_id: str,
        to_type_id: str,
        amount_in: int,
        max_hops: int | None = None,
    ) -> Routing:
        """Find the best route; see RoutingEngine.find_route."""
        return await self.engine.find_route(
            from_type_id,
            to_type_id,
            amount_in,
            max_hops=self.config.max_hops if max_hops is None else max_hops,
        )

    def compile_swap(self, routing: Routing, max_slippage: int | None = None) -> CallDescriptor:
        """Build the swap call for a routing; see TransactionCompiler.compile_swap."""
        return self.compiler.compile_swap(
            routing,
            self.config.default_max_slippage if max_slippage is None else max_slippage,
        )


def create_default_routex(config: RoutexConfig | None = None) -> Routex:
    """Create a Routex instance quoting against the configured fullnode.

    Configuration is read from ROUTEX_* environment variables when no
    config is given.
    """
    config = config or RoutexConfig.from_env()
    client = AptosViewClient(config.fullnode_url, timeout=config.request_timeout)
    oracle = AptosQuoteOracle(client, config.routex_address, config.router_module)
    logger.info(
        "routex_initialized",
        fullnode_url=config.fullnode_url,
        router_module=config.router_module,
        max_hops=config.max_hops,
    )
    return Routex(oracle, config=config)
