"""Core dependencies for FastAPI application."""

from typing import Annotated, Optional

from fastapi import Depends

from .riot_api import RiotAPIClient

# One client per process: the response cache and the request spacing must be
# shared by every request because the upstream limit is per API key.
_riot_client: Optional[RiotAPIClient] = None


def get_riot_client() -> RiotAPIClient:
    """Get the process-wide Riot API client, creating it on first use."""
    global _riot_client
    if _riot_client is None:
        _riot_client = RiotAPIClient()
    return _riot_client


async def close_riot_client() -> None:
    """Close the shared client's HTTP session and forget it."""
    global _riot_client
    if _riot_client is not None:
        await _riot_client.close()
        _riot_client = None


# Type aliases for cleaner dependency injection
RiotClientDep = Annotated[RiotAPIClient, Depends(get_riot_client)]

__all__ = ["get_riot_client", "close_riot_client", "RiotClientDep"]
