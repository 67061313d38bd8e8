"""Player lookup endpoint."""

from fastapi import APIRouter, Query

from .dependencies import PlayerServiceDep
from .schemas import PlayerProfile

router = APIRouter(tags=["players"])


@router.get("/player", response_model=PlayerProfile)
async def get_player(
    player_service: PlayerServiceDep,
    q: str = Query("", description="Riot ID 'Name#Tag' or legacy summoner name"),
) -> PlayerProfile:
    """
    Look up a single player: rank entry, 1-10 score and inferred main role.

    Examples:
        GET /api/player?q=Faker%23KR1
        GET /api/player?q=OldSummonerName
    """
    return await player_service.resolve(q)
