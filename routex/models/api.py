"""Pydantic models for the Routex HTTP service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from routex.constants import DEFAULT_MAX_SLIPPAGE, MAX_HOPS, SLIPPAGE_BASE
from routex.models.registry import Asset, Venue
from routex.models.types import U64, TypeId
from routex.routing.types import Edge, Routing
from routex.transactions.compiler import CallDescriptor


class AssetModel(BaseModel):
    """A tradable coin."""

    symbol: str
    logo: str
    type_id: str = Field(alias="typeId")
    decimals: int

    model_config = {"populate_by_name": True}

    @classmethod
    def from_asset(cls, asset: Asset) -> AssetModel:
        return cls(
            symbol=asset.symbol,
            logo=asset.logo,
            type_id=asset.type_id,
            decimals=asset.decimals,
        )


class VenueModel(BaseModel):
    """A swap venue."""

    id: int
    name: str
    logo: str

    @classmethod
    def from_venue(cls, venue: Venue) -> VenueModel:
        return cls(id=venue.id, name=venue.name, logo=venue.logo)


class EdgeModel(BaseModel):
    """One hop of a route."""

    from_type_id: str = Field(alias="from")
    to_type_id: str = Field(alias="to")
    venue_id: int = Field(alias="venueId")
    venue_name: str = Field(alias="venueName")
    logo: str

    model_config = {"populate_by_name": True}

    @classmethod
    def from_edge(cls, edge: Edge) -> EdgeModel:
        return cls(
            from_type_id=edge.from_type_id,
            to_type_id=edge.to_type_id,
            venue_id=edge.venue_id,
            venue_name=edge.venue_name,
            logo=edge.logo,
        )


class RouteRequest(BaseModel):
    """Request body for route searches."""

    from_type_id: TypeId = Field(alias="from")
    to_type_id: TypeId = Field(alias="to")
    amount_in: U64 = Field(alias="amountIn")
    max_hops: int = Field(default=MAX_HOPS, alias="maxHops", ge=1, le=MAX_HOPS)

    model_config = {"populate_by_name": True}


class SwapRequest(RouteRequest):
    """Request body for compiling a swap along the best route."""

    max_slippage: int = Field(
        default=DEFAULT_MAX_SLIPPAGE,
        alias="maxSlippage",
        ge=0,
        le=SLIPPAGE_BASE,
        description="Slippage tolerance in tenths of a percent (10 = 1.0%)",
    )


class RoutingModel(BaseModel):
    """Best route between two assets. Amounts are decimal strings."""

    from_type_id: str = Field(alias="from")
    to_type_id: str = Field(alias="to")
    path: list[EdgeModel]
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_routing(cls, routing: Routing) -> RoutingModel:
        return cls(
            from_type_id=routing.from_type_id,
            to_type_id=routing.to_type_id,
            path=[EdgeModel.from_edge(edge) for edge in routing.path],
            amount_in=str(routing.amount_in),
            amount_out=str(routing.amount_out),
        )


class SwapResponse(BaseModel):
    """Route plus the entry-function payload that executes it."""

    routing: RoutingModel
    min_amount_out: str = Field(alias="minAmountOut")
    payload: dict[str, Any]

    model_config = {"populate_by_name": True}

    @classmethod
    def from_call(cls, routing: Routing, call: CallDescriptor) -> SwapResponse:
        payload = call.to_payload()
        return cls(
            routing=RoutingModel.from_routing(routing),
            # arguments are (venue ids, amount_in, min_amount_out)
            min_amount_out=payload["arguments"][2],
            payload=payload,
        )
