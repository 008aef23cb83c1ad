"""Routex error classes."""


class RoutexError(Exception):
    """Base error for Routex operations."""

    pass


class NoRouteFound(RoutexError, LookupError):
    """No path reaches the destination asset within the hop budget."""

    def __init__(self, from_type_id: str, to_type_id: str) -> None:
        super().__init__(f"cannot find route from {from_type_id} to {to_type_id}")
        self.from_type_id = from_type_id
        self.to_type_id = to_type_id


class UnsupportedHopCount(RoutexError, ValueError):
    """Path length has no matching swap entry point."""

    def __init__(self, hops: int) -> None:
        super().__init__(f"unsupported hop count {hops}")
        self.hops = hops


class QuoteUnavailable(RoutexError):
    """A venue could not quote a swap.

    Raised by quote oracles. The routing engine turns it into a
    zero-amount continuation instead of failing the search.
    """

    pass


class MalformedViewResponse(QuoteUnavailable):
    """A view function returned something that is not a u64."""

    pass
