"""
Primary role inference from recent match history.

Samples a player's most recent matches and takes a majority vote over the
``teamPosition`` they were assigned in each one.
"""

from typing import Dict
import structlog

from team_balancer.core.enums import COUNTED_ROLES, Role
from team_balancer.core.riot_api.client import RiotAPIClient

logger = structlog.get_logger(__name__)

DEFAULT_SAMPLE_SIZE = 15

COUNTED_ROLE_NAMES = frozenset(role.value for role in COUNTED_ROLES)


class MissingParticipantError(LookupError):
    """Raised when a match does not list the player being inferred."""


def pick_majority_role(counts: Dict[Role, int]) -> Role:
    """
    Return the most frequent role.

    Roles are scanned in the fixed order TOP, JUNGLE, MIDDLE, BOTTOM, UTILITY
    and only a strictly greater count replaces the current leader, so the
    earliest role wins ties. Returns UNKNOWN when nothing was counted.
    """
    best, best_count = Role.UNKNOWN, 0
    for role in COUNTED_ROLES:
        if counts.get(role, 0) > best_count:
            best, best_count = role, counts[role]
    return best


class RoleInferencer:
    """Infers a player's main role from their recent matches."""

    def __init__(self, client: RiotAPIClient, sample_size: int = DEFAULT_SAMPLE_SIZE):
        """
        Initialize the role inferencer.

        Args:
            client: Riot API client (cached and rate limited)
            sample_size: Maximum number of recent matches to inspect
        """
        self.client = client
        self.sample_size = sample_size

    async def infer_role(self, puuid: str) -> Role:
        """
        Infer the primary role for ``puuid``.

        Matches are fetched one at a time, newest first. Any failure while
        sampling (upstream error, transport error, player missing from a
        match) degrades the whole result to UNKNOWN.

        Args:
            puuid: Player's unique id

        Returns:
            Majority role, or Role.UNKNOWN
        """
        try:
            counts = await self._count_roles(puuid)
        except Exception as e:
            logger.warning(
                "Role inference failed, returning UNKNOWN",
                puuid=puuid,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Role.UNKNOWN

        role = pick_majority_role(counts)
        logger.debug(
            "Role inference completed",
            puuid=puuid,
            role=role.value,
            counts={r.value: n for r, n in counts.items()},
        )
        return role

    async def _count_roles(self, puuid: str) -> Dict[Role, int]:
        """Tally known ``teamPosition`` labels across the sampled matches."""
        counts: Dict[Role, int] = {role: 0 for role in COUNTED_ROLES}
        match_ids = await self.client.get_match_ids(puuid, count=self.sample_size)

        for match_id in match_ids:
            match = await self.client.get_match(match_id)
            participant = match.participant(puuid)
            if participant is None:
                raise MissingParticipantError(
                    f"Player {puuid} not found in match {match_id}"
                )

            position = (participant.team_position or "").upper()
            if position in COUNTED_ROLE_NAMES:
                counts[Role(position)] += 1

        return counts
