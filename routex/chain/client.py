"""Minimal async client for the chain's REST view endpoint."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from routex.errors import MalformedViewResponse

logger = structlog.get_logger()


class AptosViewClient:
    """Calls Move view functions through a fullnode's `/view` endpoint.

    The client owns its `httpx.AsyncClient` unless one is injected, in which
    case closing it is the caller's job.

    Usage:
        async with AptosViewClient("https://fullnode/v1") as client:
            result = await client.view("0x1::coin::balance", [coin], [account])
    """

    def __init__(
        self,
        fullnode_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            fullnode_url: REST base URL, including the version prefix (e.g. ".../v1")
            timeout: Per-request timeout in seconds
            http_client: Optional shared client (e.g. with a mock transport in tests)
        """
        self.fullnode_url = fullnode_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def view(
        self,
        function: str,
        type_arguments: list[str],
        arguments: list[Any],
    ) -> list[Any]:
        """Execute a view function and return its decoded result list.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses
            MalformedViewResponse: If the body is not a JSON list
        """
        response = await self._client.post(
            f"{self.fullnode_url}/view",
            json={
                "function": function,
                "type_arguments": type_arguments,
                "arguments": arguments,
            },
        )
        response.raise_for_status()
        try:
            result = response.json()
        except ValueError as err:
            raise MalformedViewResponse(f"{function}: response is not JSON") from err
        if not isinstance(result, list):
            raise MalformedViewResponse(
                f"{function}: expected a JSON list, got {type(result).__name__}"
            )
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AptosViewClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["AptosViewClient"]
