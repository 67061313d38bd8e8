"""
Player lookup service.

Resolves a free-form identity string into a PlayerProfile by chaining the
Riot API calls in dependency order:

1. Riot ID -> account (puuid) -> summoner by puuid, or legacy name -> summoner by name
2. summoner id -> league entries -> score
3. puuid -> recent matches -> role
"""

from typing import Optional, Tuple
import structlog

from team_balancer.algorithms.rank_score import best_rank_entry, score_rank_entry
from team_balancer.algorithms.role_inference import RoleInferencer
from team_balancer.core.enums import Role
from team_balancer.core.exceptions import ValidationError
from team_balancer.core.riot_api.client import RiotAPIClient
from team_balancer.core.riot_api.errors import RiotAPIError
from team_balancer.core.riot_api.models import LeagueEntryDTO, SummonerDTO
from .schemas import PlayerHandle, PlayerProfile, RankEntryResponse, SummonerSummary

logger = structlog.get_logger(__name__)

RIOT_ID_SEPARATOR = "#"


def normalize_handle(raw: Optional[str]) -> PlayerHandle:
    """
    Parse user input into a PlayerHandle.

    ``"Faker#KR1"`` becomes a Riot ID, anything without ``#`` is a legacy
    summoner name. Input is trimmed and split on the first separator only.

    Raises:
        ValidationError: If the input is empty or a Riot ID part is missing
    """
    value = (raw or "").strip()
    if not value:
        raise ValidationError(
            "q is required (Riot ID 'Name#Tag' or summoner name)",
            service="PlayerService",
            operation="normalize_handle",
            field="q",
        )

    if RIOT_ID_SEPARATOR not in value:
        return PlayerHandle(legacy_name=value)

    game_name, tag_line = value.split(RIOT_ID_SEPARATOR, 1)
    if not game_name or not tag_line:
        raise ValidationError(
            "Riot ID must look like 'Name#Tag'",
            service="PlayerService",
            operation="normalize_handle",
            field="q",
            value=value,
        )
    return PlayerHandle(game_name=game_name, tag_line=tag_line)


class PlayerService:
    """Builds player profiles from the Riot API."""

    def __init__(self, client: RiotAPIClient, role_inferencer: RoleInferencer):
        """
        Initialize the service.

        :param client: Shared Riot API client
        :param role_inferencer: Role inferencer backed by the same client
        """
        self.client = client
        self.role_inferencer = role_inferencer

    async def resolve(self, query: str) -> PlayerProfile:
        """
        Look a player up and derive score and role.

        :param query: ``Name#Tag`` or legacy summoner name
        :returns: Combined player profile
        :raises ValidationError: For empty or malformed input
        :raises RiotAPIError: For any upstream failure, unchanged
        """
        handle = normalize_handle(query)
        summoner, puuid = await self._fetch_summoner(handle)

        entry = await self._fetch_rank_entry(summoner)
        score = score_rank_entry(entry)

        if puuid:
            role = await self.role_inferencer.infer_role(puuid)
        else:
            logger.warning("Summoner has no puuid, skipping role inference", query=query)
            role = Role.UNKNOWN

        logger.info(
            "Player resolved",
            query=query,
            riot_id=handle.is_riot_id,
            tier=entry.tier if entry else None,
            score=score,
            role=role.value,
        )

        return PlayerProfile(
            query=query.strip(),
            summoner=SummonerSummary(
                name=summoner.name, summoner_id=summoner.id, puuid=puuid
            ),
            rank_entry=self._to_rank_response(entry),
            score=score,
            role=role,
        )

    async def _fetch_summoner(self, handle: PlayerHandle) -> Tuple[SummonerDTO, Optional[str]]:
        """Return the summoner record and the puuid to use for match lookups."""
        if not handle.is_riot_id:
            summoner = await self.client.get_summoner_by_name(handle.legacy_name)
            return summoner, summoner.puuid

        account = await self.client.get_account_by_riot_id(handle.game_name, handle.tag_line)
        if not account.puuid:
            raise RiotAPIError(
                "Account response did not include a puuid",
                status_code=502,
                response_data=account.model_dump(by_alias=True),
            )

        summoner = await self.client.get_summoner_by_puuid(account.puuid)
        return summoner, account.puuid

    async def _fetch_rank_entry(self, summoner: SummonerDTO) -> Optional[LeagueEntryDTO]:
        """Fetch league entries and pick the one used for scoring."""
        if not summoner.id:
            logger.warning("Summoner has no encrypted id, treating as unranked", name=summoner.name)
            return None

        entries = await self.client.get_league_entries(summoner.id)
        return best_rank_entry(entries)

    @staticmethod
    def _to_rank_response(entry: Optional[LeagueEntryDTO]) -> Optional[RankEntryResponse]:
        if entry is None:
            return None
        return RankEntryResponse(
            queue_type=entry.queue_type,
            tier=entry.tier,
            rank=entry.rank,
            league_points=entry.league_points,
            wins=entry.wins,
            losses=entry.losses,
        )
