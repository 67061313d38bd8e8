"""Team split service."""

import random
from typing import Optional

from team_balancer.algorithms.team_split import split_teams
from team_balancer.core.enums import SplitMode
from .schemas import TeamSplitRequest, TeamSplitResponse


class TeamSplitService:
    """Applies a split policy to a roster."""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        :param rng: Random source for the random policy (module ``random`` if None)
        """
        self.rng = rng

    def split(self, request: TeamSplitRequest) -> TeamSplitResponse:
        """
        Split ``request.players`` according to ``request.mode``.

        :raises ValidationError: If fewer than two players are given
        """
        result = split_teams(request.players, SplitMode.parse(request.mode), rng=self.rng)
        return TeamSplitResponse(
            mode=request.mode,
            team_a=result.team_a,
            team_b=result.team_b,
            score_a=result.score_a,
            score_b=result.score_b,
            diff=result.diff,
        )
