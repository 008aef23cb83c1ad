"""API endpoints for the Routex service."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException

from routex.errors import NoRouteFound, UnsupportedHopCount
from routex.models.api import (
    AssetModel,
    RouteRequest,
    RoutingModel,
    SwapRequest,
    SwapResponse,
    VenueModel,
)
from routex.routex import Routex, create_default_routex

logger = structlog.get_logger()

router = APIRouter()


@lru_cache(maxsize=1)
def _default_routex() -> Routex:
    return create_default_routex()


def get_routex() -> Routex:
    """Dependency provider for the Routex instance.

    Override this in tests to inject a Routex with a mock oracle:
        app.dependency_overrides[get_routex] = lambda: routex
    """
    return _default_routex()


def _check_listed(routex: Routex, *type_ids: str) -> None:
    for type_id in type_ids:
        if routex.get_asset(type_id) is None:
            raise HTTPException(status_code=404, detail=f"Unknown asset: {type_id}")


@router.get("/assets")
async def list_assets(routex: Routex = Depends(get_routex)) -> list[AssetModel]:
    """Supported assets, in registry order."""
    return [AssetModel.from_asset(asset) for asset in routex.list_assets()]


@router.get("/venues")
async def list_venues(routex: Routex = Depends(get_routex)) -> dict[int, VenueModel]:
    """Supported venues keyed by id."""
    return {
        venue_id: VenueModel.from_venue(venue) for venue_id, venue in routex.list_venues().items()
    }


@router.post("/route")
async def route(request: RouteRequest, routex: Routex = Depends(get_routex)) -> RoutingModel:
    """Find the best route between two listed assets.

    Error Handling:
        - Unlisted asset: 404
        - No route within the hop budget: 404
    """
    _check_listed(routex, request.from_type_id, request.to_type_id)
    try:
        routing = await routex.find_route(
            request.from_type_id,
            request.to_type_id,
            request.amount_in,
            max_hops=request.max_hops,
        )
    except NoRouteFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return RoutingModel.from_routing(routing)


@router.post("/swap")
async def swap(request: SwapRequest, routex: Routex = Depends(get_routex)) -> SwapResponse:
    """Find the best route and compile the swap call that executes it.

    The payload is returned unsigned; submitting it is up to the caller.
    """
    _check_listed(routex, request.from_type_id, request.to_type_id)
    try:
        routing = await routex.find_route(
            request.from_type_id,
            request.to_type_id,
            request.amount_in,
            max_hops=request.max_hops,
        )
        call = routex.compile_swap(routing, request.max_slippage)
    except NoRouteFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except UnsupportedHopCount as e:
        # Engine and compiler disagree on the hop limit
        logger.error("unsupported_hop_count", hops=e.hops)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return SwapResponse.from_call(routing, call)
