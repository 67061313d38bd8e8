"""Riot API endpoint definitions and routing information."""

from typing import Optional
from urllib.parse import quote

from .constants import Region, Platform


def _segment(value: str) -> str:
    """Percent-encode a value used as a single path segment."""
    return quote(str(value), safe="")


class RiotAPIEndpoints:
    """Riot API endpoint definitions and routing."""

    def __init__(self, region: Region = Region.ASIA, platform: Platform = Platform.JP1):
        """
        Initialize endpoint configuration.

        Args:
            region: Default region for regional endpoints
            platform: Default platform for platform endpoints
        """
        self.region = region
        self.platform = platform

    def get_base_url(self, region: Optional[Region] = None) -> str:
        """Get base URL for regional endpoints."""
        region = region or self.region
        region_str = region.value if isinstance(region, Region) else region
        return f"https://{region_str}.api.riotgames.com"

    def get_platform_url(self, platform: Optional[Platform] = None) -> str:
        """Get base URL for platform endpoints."""
        platform = platform or self.platform
        platform_str = platform.value if isinstance(platform, Platform) else platform
        return f"https://{platform_str}.api.riotgames.com"

    # Account endpoints (Regional)
    def account_by_riot_id(self, game_name: str, tag_line: str) -> str:
        """Get account by Riot ID endpoint."""
        base_url = self.get_base_url()
        return (
            f"{base_url}/riot/account/v1/accounts/by-riot-id/"
            f"{_segment(game_name)}/{_segment(tag_line)}"
        )

    # Summoner endpoints (Platform)
    def summoner_by_name(self, summoner_name: str) -> str:
        """Get summoner by legacy summoner name endpoint."""
        platform_url = self.get_platform_url()
        return f"{platform_url}/lol/summoner/v4/summoners/by-name/{_segment(summoner_name)}"

    def summoner_by_puuid(self, puuid: str) -> str:
        """Get summoner by PUUID endpoint."""
        platform_url = self.get_platform_url()
        return f"{platform_url}/lol/summoner/v4/summoners/by-puuid/{_segment(puuid)}"

    # League endpoints (Platform)
    def league_entries_by_summoner(self, summoner_id: str) -> str:
        """Get league entries by encrypted summoner ID endpoint."""
        platform_url = self.get_platform_url()
        return f"{platform_url}/lol/league/v4/entries/by-summoner/{_segment(summoner_id)}"

    # Match endpoints (Regional)
    def match_ids_by_puuid(self, puuid: str, start: int = 0, count: int = 20) -> str:
        """Get match id list by PUUID endpoint."""
        base_url = self.get_base_url()
        url = f"{base_url}/lol/match/v5/matches/by-puuid/{_segment(puuid)}/ids"
        return f"{url}?start={start}&count={count}"

    def match_by_id(self, match_id: str) -> str:
        """Get match by ID endpoint."""
        base_url = self.get_base_url()
        return f"{base_url}/lol/match/v5/matches/{_segment(match_id)}"
