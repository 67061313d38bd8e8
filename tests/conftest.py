"""Shared fixtures: a scripted Riot API upstream served through httpx.MockTransport."""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from team_balancer.core.riot_api import RateLimitedCache, RateLimiter, RiotAPIClient, TTLCache
from team_balancer.core.riot_api.constants import Platform, Region

PUUID = "puuid-faker"
SUMMONER_ID = "summoner-faker"


class FakeRiotAPI:
    """Answers requests by URL path and records every call it receives."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, Any]] = {}
        self.calls: List[httpx.Request] = []

    def add(self, path: str, payload: Any, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        status, payload = self.routes.get(
            request.url.path, (404, {"status": {"message": "Data not found", "status_code": 404}})
        )
        if isinstance(payload, Exception):
            raise payload
        return httpx.Response(status, json=payload)

    def paths(self) -> List[str]:
        return [request.url.path for request in self.calls]

    def count(self, fragment: str) -> int:
        return sum(1 for path in self.paths() if fragment in path)


def build_client(
    api: FakeRiotAPI, fetcher: Optional[RateLimitedCache] = None
) -> RiotAPIClient:
    """Riot API client wired to ``api`` with no request spacing."""
    return RiotAPIClient(
        api_key="test_api_key",
        region=Region.ASIA,
        platform=Platform.JP1,
        fetcher=fetcher
        or RateLimitedCache(TTLCache(maxsize=100, ttl=3600), RateLimiter(min_interval=0)),
        transport=httpx.MockTransport(api.handler),
    )


def make_match(match_id: str, puuid: str, position: str) -> Dict[str, Any]:
    """Match-v5 payload where ``puuid`` played ``position``."""
    return {
        "metadata": {"matchId": match_id, "participants": [puuid, "someone-else"]},
        "info": {
            "queueId": 420,
            "participants": [
                {"puuid": "someone-else", "teamPosition": "JUNGLE", "championName": "Lee Sin"},
                {"puuid": puuid, "teamPosition": position, "championName": "Ahri"},
            ],
        },
    }


@pytest.fixture
def sample_account_data():
    """Sample account-v1 payload."""
    return {"puuid": PUUID, "gameName": "Faker", "tagLine": "KR1"}


@pytest.fixture
def sample_summoner_data():
    """Sample summoner-v4 payload."""
    return {
        "id": SUMMONER_ID,
        "puuid": PUUID,
        "name": "Hide on bush",
        "profileIconId": 6,
        "summonerLevel": 700,
        "revisionDate": 1710000000000,
    }


@pytest.fixture
def sample_league_data():
    """League entries with flex listed before solo queue."""
    return [
        {
            "leagueId": "flex-league",
            "queueType": "RANKED_FLEX_SR",
            "tier": "GOLD",
            "rank": "I",
            "leaguePoints": 12,
            "wins": 10,
            "losses": 9,
        },
        {
            "leagueId": "solo-league",
            "queueType": "RANKED_SOLO_5x5",
            "tier": "DIAMOND",
            "rank": "II",
            "leaguePoints": 55,
            "wins": 120,
            "losses": 100,
            "hotStreak": False,
        },
    ]


@pytest.fixture
def fake_api():
    """Empty scripted upstream."""
    return FakeRiotAPI()


@pytest.fixture
def make_client():
    """Factory building a client against a FakeRiotAPI."""
    return build_client


@pytest.fixture
def match_payload():
    """Factory building match-v5 payloads."""
    return make_match


@pytest.fixture
def scripted_api(fake_api, sample_account_data, sample_summoner_data, sample_league_data):
    """Upstream knowing Faker#KR1 (Riot ID) and OldName (legacy name) with a mostly MIDDLE history."""
    fake_api.add("/riot/account/v1/accounts/by-riot-id/Faker/KR1", sample_account_data)
    fake_api.add(f"/lol/summoner/v4/summoners/by-puuid/{PUUID}", sample_summoner_data)
    fake_api.add("/lol/summoner/v4/summoners/by-name/OldName", sample_summoner_data)
    fake_api.add(f"/lol/league/v4/entries/by-summoner/{SUMMONER_ID}", sample_league_data)
    fake_api.add(
        f"/lol/match/v5/matches/by-puuid/{PUUID}/ids", ["JP1_3", "JP1_2", "JP1_1"]
    )
    fake_api.add("/lol/match/v5/matches/JP1_3", make_match("JP1_3", PUUID, "MIDDLE"))
    fake_api.add("/lol/match/v5/matches/JP1_2", make_match("JP1_2", PUUID, "MIDDLE"))
    fake_api.add("/lol/match/v5/matches/JP1_1", make_match("JP1_1", PUUID, "TOP"))
    return fake_api
