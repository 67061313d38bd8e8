"""Dependencies for the teams feature."""

from typing import Annotated
from fastapi import Depends

from .service import TeamSplitService


def get_team_split_service() -> TeamSplitService:
    """Get team split service instance."""
    return TeamSplitService()


TeamSplitServiceDep = Annotated[TeamSplitService, Depends(get_team_split_service)]

__all__ = ["get_team_split_service", "TeamSplitServiceDep"]
