"""
Two-team partitioning for custom games.

Each policy is a pure function ``players -> (team_a, team_b)``. Players are
any objects exposing an optional ``score`` attribute; a missing or zero score
counts as 1.
"""

import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import structlog

from team_balancer.core.enums import SplitMode
from team_balancer.core.exceptions import ValidationError

logger = structlog.get_logger(__name__)

DEFAULT_PLAYER_SCORE = 1.0
MIN_PLAYERS = 2

Teams = Tuple[List[Any], List[Any]]


@dataclass
class TeamSplit:
    """Result of a team split."""

    mode: SplitMode
    team_a: List[Any]
    team_b: List[Any]
    score_a: float
    score_b: float
    diff: float


def player_score(player: Any) -> float:
    """Score used for balancing; falls back to 1 when unset or zero."""
    return getattr(player, "score", None) or DEFAULT_PLAYER_SCORE


def team_score(team: Sequence[Any]) -> float:
    """Sum of member scores."""
    return sum(player_score(p) for p in team)


def _by_score_desc(players: Sequence[Any]) -> List[Any]:
    # sorted() is stable with reverse=True, so equal scores keep input order
    return sorted(players, key=player_score, reverse=True)


def _greedy_fill(players: Sequence[Any], team_a: List[Any], team_b: List[Any]) -> Teams:
    """Append each player to the team with the lower running total (ties go to A)."""
    total_a, total_b = team_score(team_a), team_score(team_b)
    for player in players:
        if total_a <= total_b:
            team_a.append(player)
            total_a += player_score(player)
        else:
            team_b.append(player)
            total_b += player_score(player)
    return team_a, team_b


def split_balanced(players: Sequence[Any]) -> Teams:
    """Strongest first, each player joins whichever team is currently weaker."""
    return _greedy_fill(_by_score_desc(players), [], [])


def split_duo(players: Sequence[Any]) -> Teams:
    """
    Keep the first two players (input order) together on team A.

    The remaining players are balanced greedily around them. The duo is placed
    unconditionally, even when that leaves team B empty or lopsided.
    """
    if len(players) < 2:
        return split_balanced(players)

    duo, rest = list(players[:2]), players[2:]
    return _greedy_fill(_by_score_desc(rest), duo, [])


def split_random(players: Sequence[Any], rng: Optional[random.Random] = None) -> Teams:
    """Shuffle, then team A takes the first ceil(n/2) players."""
    shuffled = list(players)
    (rng or random).shuffle(shuffled)
    mid = math.ceil(len(shuffled) / 2)
    return shuffled[:mid], shuffled[mid:]


# Policies that need no random source; RANDOM is dispatched with its rng.
DETERMINISTIC_SPLITTERS: Dict[SplitMode, Callable[[Sequence[Any]], Teams]] = {
    SplitMode.BALANCED: split_balanced,
    SplitMode.DUO: split_duo,
}


def split_teams(
    players: Sequence[Any],
    mode: SplitMode = SplitMode.BALANCED,
    rng: Optional[random.Random] = None,
) -> TeamSplit:
    """
    Partition ``players`` into two teams under ``mode``.

    Args:
        players: At least two players
        mode: Split policy
        rng: Random source for SplitMode.RANDOM (module ``random`` if None)

    Returns:
        TeamSplit with both rosters, their score sums and the absolute difference

    Raises:
        ValidationError: If fewer than two players are given
    """
    if len(players) < MIN_PLAYERS:
        raise ValidationError(
            f"players[] >= {MIN_PLAYERS} required",
            service="TeamSplitter",
            operation="split_teams",
            field="players",
            value=len(players),
        )

    if mode is SplitMode.RANDOM:
        team_a, team_b = split_random(players, rng)
    else:
        team_a, team_b = DETERMINISTIC_SPLITTERS[mode](players)

    score_a, score_b = team_score(team_a), team_score(team_b)

    logger.debug(
        "Teams split",
        mode=mode.value,
        players=len(players),
        score_a=score_a,
        score_b=score_b,
    )

    return TeamSplit(
        mode=mode,
        team_a=team_a,
        team_b=team_b,
        score_a=score_a,
        score_b=score_b,
        diff=abs(score_a - score_b),
    )
