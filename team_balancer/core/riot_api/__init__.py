"""
Riot API client package for League of Legends API integration.

This package provides the HTTP client used to look players up, together with
the shared response cache and request spacing that protect the upstream
rate limit.
"""

from .client import RiotAPIClient
from .cache import RateLimitedCache, TTLCache
from .rate_limiter import RateLimiter
from .errors import (
    RiotAPIError,
    RateLimitError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    BadRequestError,
    ServiceUnavailableError,
)
from .models import (
    AccountDTO,
    SummonerDTO,
    LeagueEntryDTO,
    MatchDTO,
    ParticipantDTO,
)
from .endpoints import RiotAPIEndpoints

__all__ = [
    "RiotAPIClient",
    "RateLimitedCache",
    "TTLCache",
    "RateLimiter",
    "RiotAPIError",
    "RateLimitError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "BadRequestError",
    "ServiceUnavailableError",
    "AccountDTO",
    "SummonerDTO",
    "LeagueEntryDTO",
    "MatchDTO",
    "ParticipantDTO",
    "RiotAPIEndpoints",
]
