"""Find the best route between two assets and print the swap payload.

Quotes come from the configured fullnode (ROUTEX_* environment variables).
Nothing is signed or submitted.

Usage:
    python -m scripts.find_route --from USDT --to RTX --amount 1000000
    python -m scripts.find_route --from 0x1::aptos_coin::AptosCoin --to USDT --amount 10000
"""

import argparse
import asyncio
import json
import time

import structlog

from routex.chain import AptosBalanceReader, AptosQuoteOracle, AptosViewClient
from routex.config import RoutexConfig
from routex.errors import NoRouteFound
from routex.routex import Routex

logger = structlog.get_logger()


def resolve_asset(routex: Routex, name: str) -> str:
    """Resolve a symbol or type identifier to a listed type identifier."""
    if routex.get_asset(name) is not None:
        return name
    matches = routex.assets.by_symbol(name)
    if not matches:
        raise SystemExit(f"Unknown asset: {name}")
    if len(matches) > 1:
        raise SystemExit(f"Ambiguous symbol {name}; use one of {[a.type_id for a in matches]}")
    return matches[0].type_id


async def find_route(
    from_asset: str,
    to_asset: str,
    amount: int,
    max_hops: int | None,
    max_slippage: int | None,
    account: str | None,
) -> int:
    config = RoutexConfig.from_env()
    async with AptosViewClient(config.fullnode_url, timeout=config.request_timeout) as client:
        oracle = AptosQuoteOracle(client, config.routex_address, config.router_module)
        routex = Routex(oracle, config=config)

        from_type_id = resolve_asset(routex, from_asset)
        to_type_id = resolve_asset(routex, to_asset)

        if account is not None:
            balances = AptosBalanceReader(client)
            try:
                balance = await balances.balance_of(from_type_id, account)
            except ValueError as e:
                raise SystemExit(str(e)) from e
            print(f"Balance of {account}: {balance} {from_type_id}")

        start = time.perf_counter()
        try:
            routing = await routex.find_route(from_type_id, to_type_id, amount, max_hops)
        except NoRouteFound as e:
            logger.error("no_route", error=str(e))
            return 1
        elapsed_ms = (time.perf_counter() - start) * 1000

        print(f"Route {from_type_id} -> {to_type_id} ({elapsed_ms:.0f} ms)")
        for i, edge in enumerate(routing.path, start=1):
            print(f"  {i}. {edge.from_type_id} -> {edge.to_type_id} via {edge.venue_name}")
        print(f"  amount in:  {routing.amount_in}")
        print(f"  amount out: {routing.amount_out}")

        call = routex.compile_swap(routing, max_slippage)
        print(json.dumps(call.to_payload(), indent=2))
        return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Find the best swap route")
    parser.add_argument("--from", dest="from_asset", required=True, help="Symbol or type id")
    parser.add_argument("--to", dest="to_asset", required=True, help="Symbol or type id")
    parser.add_argument("--amount", type=int, required=True, help="Input amount (base units)")
    parser.add_argument("--max-hops", type=int, default=None, help="Hop budget")
    parser.add_argument(
        "--max-slippage",
        type=int,
        default=None,
        help="Slippage tolerance in tenths of a percent (10 = 1.0%%)",
    )
    parser.add_argument("--account", default=None, help="Also print this account's balance")
    args = parser.parse_args()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ]
    )

    exit_code = asyncio.run(
        find_route(
            args.from_asset,
            args.to_asset,
            args.amount,
            args.max_hops,
            args.max_slippage,
            args.account,
        )
    )
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
