"""Team split endpoint."""

from fastapi import APIRouter

from .dependencies import TeamSplitServiceDep
from .schemas import TeamSplitRequest, TeamSplitResponse

router = APIRouter(tags=["teams"])


@router.post("/team-split", response_model=TeamSplitResponse)
async def team_split(
    request: TeamSplitRequest, service: TeamSplitServiceDep
) -> TeamSplitResponse:
    """Split players into two teams (balanced, duo or random)."""
    return service.split(request)
