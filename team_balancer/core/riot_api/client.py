"""Riot API HTTP client with shared caching, request spacing and typed errors."""

import asyncio
from typing import Optional, Any, List, Union
import httpx
import structlog

from team_balancer.core.config import get_global_settings
from .cache import RateLimitedCache, TTLCache
from .constants import AUTH_HEADER, Region, Platform
from .endpoints import RiotAPIEndpoints
from .errors import ERRORS_BY_STATUS, RiotAPIError
from .models import AccountDTO, SummonerDTO, LeagueEntryDTO, MatchDTO
from .rate_limiter import RateLimiter

logger = structlog.get_logger(__name__)


class RiotAPIClient:
    """
    Typed accessors for the Riot API operations the service needs.

    Every call is routed through one ``RateLimitedCache``: identical requests
    inside the cache TTL are answered locally and all others are spaced by
    the shared limiter. Non-2xx responses raise ``RiotAPIError`` subclasses
    carrying the status code and response body. Nothing is retried here.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        region: Optional[Region] = None,
        platform: Optional[Platform] = None,
        fetcher: Optional[RateLimitedCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key (uses config if None)
            region: Region for regional endpoints (uses config if None)
            platform: Platform for platform endpoints (uses config if None)
            fetcher: Shared cache/limiter (built from config if None)
            transport: Optional httpx transport, used by tests
        """
        settings = get_global_settings()
        self.api_key = api_key or settings.riot_api_key
        self.region = region or Region(settings.riot_region)
        self.platform = platform or Platform(settings.riot_platform)
        self.fetcher = fetcher or RateLimitedCache(
            TTLCache(maxsize=settings.cache_maxsize, ttl=settings.cache_ttl_seconds),
            RateLimiter(min_interval=settings.rate_limit_interval_seconds),
        )
        self.endpoints = RiotAPIEndpoints(self.region, self.platform)

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        AUTH_HEADER: self.api_key,
                        "Accept": "application/json",
                        "User-Agent": "TeamBalancer/0.1",
                    }

                    timeout = httpx.Timeout(
                        connect=5.0, read=25.0, write=10.0, pool=30.0
                    )
                    limits = httpx.Limits(
                        max_keepalive_connections=20, max_connections=5
                    )

                    self.session = httpx.AsyncClient(
                        headers=headers,
                        timeout=timeout,
                        limits=limits,
                        transport=self._transport,
                    )

                    logger.info(
                        "Riot API client session started",
                        region=self._enum_str(self.region),
                        platform=self._enum_str(self.platform),
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Riot API client session closed")

    @staticmethod
    def _response_body(response: httpx.Response) -> Any:
        """Decode a response body as JSON, falling back to raw text."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise the ``RiotAPIError`` subclass matching a non-2xx response."""
        status = response.status_code
        body = self._response_body(response)
        error_class, message = ERRORS_BY_STATUS.get(
            status,
            (RiotAPIError, f"Server error {status}" if status >= 500 else f"Unexpected status {status}"),
        )

        retry_after = None
        if status == 429:
            try:
                retry_after = float(response.headers.get("Retry-After", ""))
            except ValueError:
                retry_after = None

        raise error_class(
            message,
            status_code=status,
            response_data=body,
            retry_after=retry_after,
            app_rate_limit=response.headers.get("X-App-Rate-Limit"),
            method_rate_limit=response.headers.get("X-Method-Rate-Limit"),
        )

    async def _make_request(self, url: str) -> Any:
        """
        Perform a single GET request.

        Args:
            url: Request URL

        Returns:
            Response data as dictionary or list

        Raises:
            RiotAPIError: For non-2xx responses and transport failures
        """
        await self.start_session()

        if self.session is None:
            raise RiotAPIError("Session not initialized")

        try:
            response = await self.session.get(url)
        except httpx.HTTPError as e:
            logger.warning("Riot API request failed", url=url, error=str(e))
            raise RiotAPIError(f"Request failed: {str(e)}") from e

        try:
            logger.debug("Riot API response", url=url, status=response.status_code)
            if not response.is_success:
                self._raise_for_status(response)
            try:
                return response.json()
            except ValueError as e:
                raise RiotAPIError(
                    "Invalid JSON in response",
                    status_code=response.status_code,
                    response_data=response.text,
                ) from e
        finally:
            await response.aclose()

    @staticmethod
    def _enum_str(value: Union[Region, Platform, str]) -> str:
        """Extract string value from enum or return as-is."""
        return value.value if hasattr(value, "value") else value

    @staticmethod
    def _as_dict(data: Any) -> dict:
        """Treat anything but a JSON object as an empty record."""
        return data if isinstance(data, dict) else {}

    # Account endpoints
    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> AccountDTO:
        """Get account (PUUID) by Riot ID (gameName#tagLine)."""
        url = self.endpoints.account_by_riot_id(game_name, tag_line)
        data = await self.fetcher.fetch(
            f"puuid:{game_name}#{tag_line}", lambda: self._make_request(url)
        )
        return AccountDTO.model_validate(self._as_dict(data))

    # Summoner endpoints
    async def get_summoner_by_name(self, summoner_name: str) -> SummonerDTO:
        """Get summoner by legacy summoner name."""
        url = self.endpoints.summoner_by_name(summoner_name)
        key = f"summoner:{self._enum_str(self.platform)}:{summoner_name}"
        data = await self.fetcher.fetch(key, lambda: self._make_request(url))
        return SummonerDTO.model_validate(self._as_dict(data))

    async def get_summoner_by_puuid(self, puuid: str) -> SummonerDTO:
        """Get summoner by PUUID."""
        url = self.endpoints.summoner_by_puuid(puuid)
        key = f"summoner_puuid:{self._enum_str(self.platform)}:{puuid}"
        data = await self.fetcher.fetch(key, lambda: self._make_request(url))
        return SummonerDTO.model_validate(self._as_dict(data))

    # League endpoints
    async def get_league_entries(self, summoner_id: str) -> List[LeagueEntryDTO]:
        """Get league entries by encrypted summoner ID; empty when unranked."""
        url = self.endpoints.league_entries_by_summoner(summoner_id)
        data = await self.fetcher.fetch(
            f"league:{summoner_id}", lambda: self._make_request(url)
        )

        if not isinstance(data, list):
            logger.warning(
                "Unexpected league entries payload",
                summoner_id=summoner_id,
                payload_type=type(data).__name__,
            )
            return []

        return [LeagueEntryDTO.model_validate(e) for e in data if isinstance(e, dict)]

    # Match endpoints
    async def get_match_ids(self, puuid: str, count: int = 10) -> List[str]:
        """Get up to ``count`` most recent match IDs for a PUUID, newest first."""
        url = self.endpoints.match_ids_by_puuid(puuid, start=0, count=count)
        data = await self.fetcher.fetch(
            f"matches:{puuid}:{count}", lambda: self._make_request(url)
        )

        if not isinstance(data, list):
            return []
        return [str(match_id) for match_id in data[:count]]

    async def get_match(self, match_id: str) -> MatchDTO:
        """Get match details by match ID."""
        url = self.endpoints.match_by_id(match_id)
        data = await self.fetcher.fetch(
            f"match:{match_id}", lambda: self._make_request(url)
        )
        return MatchDTO.model_validate(self._as_dict(data))
