"""
Rank scoring for team balancing.

Maps a ranked league entry onto a 1-10 ladder so players from different
tiers can be summed and compared when splitting teams.
"""

from typing import Iterable, Optional

from team_balancer.core.enums import Division, Tier
from team_balancer.core.riot_api.models import LeagueEntryDTO

UNRANKED_SCORE = 1.0

TIER_SCORES = {
    Tier.IRON.value: 1,
    Tier.BRONZE.value: 2,
    Tier.SILVER.value: 3,
    Tier.GOLD.value: 4,
    Tier.PLATINUM.value: 5,
    Tier.EMERALD.value: 6,
    Tier.DIAMOND.value: 7,
    Tier.MASTER.value: 8,
    Tier.GRANDMASTER.value: 9,
    Tier.CHALLENGER.value: 10,
}

DIVISION_BONUS = {
    Division.I.value: 0.6,
    Division.II.value: 0.4,
    Division.III.value: 0.2,
    Division.IV.value: 0.0,
}

# Apex tiers have a single ladder and report no meaningful division.
APEX_TIERS = frozenset(
    {Tier.MASTER.value, Tier.GRANDMASTER.value, Tier.CHALLENGER.value}
)


def score_rank_entry(entry: Optional[LeagueEntryDTO]) -> float:
    """
    Score a league entry on the 1-10 ladder.

    Unranked players (no entry) score 1. Unknown tiers score as IRON and
    unknown divisions add nothing, so this never raises.

    Args:
        entry: League entry, or None when the player is unranked

    Returns:
        Score between 1.0 and 10.0
    """
    if entry is None:
        return UNRANKED_SCORE

    tier = str(entry.tier or "").upper()
    division = str(entry.rank or "").upper()

    base = TIER_SCORES.get(tier, TIER_SCORES[Tier.IRON.value])
    if tier in APEX_TIERS:
        return float(base)
    return base + DIVISION_BONUS.get(division, 0.0)


def best_rank_entry(
    entries: Optional[Iterable[LeagueEntryDTO]],
) -> Optional[LeagueEntryDTO]:
    """Pick the solo queue entry, else the first entry, else None."""
    entries = list(entries or [])
    if not entries:
        return None
    return next((e for e in entries if e.is_solo_queue), entries[0])
