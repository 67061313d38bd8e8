"""
Tests for the HTTP endpoints.
"""

import random

import httpx
import pytest
from fastapi.testclient import TestClient

from team_balancer.core.dependencies import get_riot_client
from team_balancer.features.teams.dependencies import get_team_split_service
from team_balancer.features.teams.service import TeamSplitService
from team_balancer.main import app


@pytest.fixture
def api_client(scripted_api, make_client):
    """TestClient whose Riot API client talks to the scripted upstream."""
    riot_client = make_client(scripted_api)
    app.dependency_overrides[get_riot_client] = lambda: riot_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


class TestPlayerEndpoint:
    """Test cases for GET /api/player."""

    def test_lookup_by_riot_id(self, api_client):
        """Riot IDs resolve to score, rank entry and role."""
        response = api_client.get("/api/player", params={"q": "Faker#KR1"})

        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "Faker#KR1"
        assert data["summoner"]["puuid"] == "puuid-faker"
        assert data["rank_entry"]["tier"] == "DIAMOND"
        assert data["score"] == pytest.approx(7.4)
        assert data["role"] == "MIDDLE"

    def test_lookup_by_legacy_name(self, api_client):
        """Legacy names resolve the same player."""
        response = api_client.get("/api/player", params={"q": "OldName"})

        assert response.status_code == 200
        assert response.json()["summoner"]["name"] == "Hide on bush"

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    def test_missing_query(self, api_client, params):
        """Missing or blank q is a 400."""
        response = api_client.get("/api/player", params=params)

        assert response.status_code == 400
        assert "q is required" in response.json()["error"]

    def test_malformed_riot_id(self, api_client):
        """A Riot ID without a tag is a 400."""
        response = api_client.get("/api/player", params={"q": "Faker#"})

        assert response.status_code == 400

    def test_upstream_status_is_passed_through(self, api_client):
        """Unknown players return the upstream 404 and its body."""
        response = api_client.get("/api/player", params={"q": "Nobody#000"})

        assert response.status_code == 404
        assert response.json()["error"]["status"]["message"] == "Data not found"

    def test_transport_failure_is_500(self, api_client, scripted_api):
        """Failures without an upstream status become 500."""
        scripted_api.add(
            "/riot/account/v1/accounts/by-riot-id/Down/KR1", httpx.ConnectError("refused")
        )

        response = api_client.get("/api/player", params={"q": "Down#KR1"})

        assert response.status_code == 500
        assert "Request failed" in response.json()["error"]


class TestTeamSplitEndpoint:
    """Test cases for POST /api/team-split."""

    def test_balanced_split(self, api_client):
        """Scores [5, 3, 2] balance to 5 against 5."""
        payload = {
            "players": [
                {"name": "a", "score": 5},
                {"name": "b", "score": 3},
                {"name": "c", "score": 2},
            ],
            "mode": "balanced",
        }

        response = api_client.post("/api/team-split", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "balanced"
        assert [p["name"] for p in data["team_a"]] == ["a"]
        assert [p["name"] for p in data["team_b"]] == ["b", "c"]
        assert data["score_a"] == 5
        assert data["score_b"] == 5
        assert data["diff"] == 0

    def test_duo_split(self, api_client):
        """The first two players stay together on team A."""
        payload = {
            "players": [{"name": n, "score": s} for n, s in [("x", 1), ("y", 1), ("z", 9), ("w", 8)]],
            "mode": "duo",
        }

        data = api_client.post("/api/team-split", json=payload).json()

        assert [p["name"] for p in data["team_a"]][:2] == ["x", "y"]
        assert data["diff"] == 1

    def test_unknown_mode_falls_back_to_balanced(self, api_client):
        """Unrecognized modes split as balanced and echo the given mode."""
        payload = {"players": [{"name": "a", "score": 5}, {"name": "b", "score": 3}], "mode": "chaos"}

        data = api_client.post("/api/team-split", json=payload).json()

        assert data["mode"] == "chaos"
        assert [p["name"] for p in data["team_a"]] == ["a"]

    def test_extra_player_fields_are_echoed(self, api_client):
        """Fields beyond name, score and role come back unchanged."""
        payload = {
            "players": [
                {"name": "a", "score": 4, "role": "MIDDLE", "discord": "a#1"},
                {"name": "b"},
            ]
        }

        data = api_client.post("/api/team-split", json=payload).json()

        first = data["team_a"][0]
        assert first["discord"] == "a#1"
        assert first["role"] == "MIDDLE"
        assert data["score_b"] == 1

    def test_random_split_with_seeded_service(self, api_client):
        """Random mode uses the service's random source."""
        app.dependency_overrides[get_team_split_service] = lambda: TeamSplitService(random.Random(5))
        payload = {"players": [{"name": str(i), "score": i} for i in range(1, 6)], "mode": "random"}

        first = api_client.post("/api/team-split", json=payload).json()
        second = api_client.post("/api/team-split", json=payload).json()

        assert first == second
        assert len(first["team_a"]) == 3
        assert len(first["team_b"]) == 2

    @pytest.mark.parametrize("players", [[], [{"name": "solo", "score": 5}]])
    def test_too_few_players(self, api_client, players):
        """Fewer than two players is a 400."""
        response = api_client.post("/api/team-split", json={"players": players})

        assert response.status_code == 400
        body = response.json()
        assert "players" in body["error"]
        assert body["context"]["field"] == "players"


def test_health_check(api_client):
    """Test health check endpoint."""
    response = api_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
