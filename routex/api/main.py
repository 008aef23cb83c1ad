"""FastAPI application for the Routex router."""

import os

import uvicorn
from fastapi import FastAPI

from routex import __version__
from routex.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("ROUTEX_HOST", "0.0.0.0")
PORT = int(os.environ.get("ROUTEX_PORT", "8000"))
DEBUG = os.environ.get("ROUTEX_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Routex",
    description="Multi-hop swap routing across Move DEX venues",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the Routex API server.

    Configuration via environment variables:
    - ROUTEX_HOST: Host to bind to (default: 0.0.0.0)
    - ROUTEX_PORT: Port to bind to (default: 8000)
    - ROUTEX_DEBUG: Enable debug/reload mode (default: false)
    - ROUTEX_*: Deployment settings, see RoutexConfig.from_env
    """
    uvicorn.run(
        "routex.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
