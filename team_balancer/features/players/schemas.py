"""Pydantic schemas for player lookups."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from team_balancer.core.enums import Role


class PlayerHandle(BaseModel):
    """A parsed player identity: either a Riot ID or a legacy summoner name."""

    game_name: Optional[str] = Field(None, description="Riot ID name part")
    tag_line: Optional[str] = Field(None, description="Riot ID tag part")
    legacy_name: Optional[str] = Field(None, description="Pre Riot ID summoner name")

    @model_validator(mode="after")
    def check_single_variant(self) -> "PlayerHandle":
        """Exactly one of the two identity variants must be populated."""
        has_riot_id = self.game_name is not None and self.tag_line is not None
        has_legacy = self.legacy_name is not None
        if has_riot_id == has_legacy:
            raise ValueError("Provide either game_name and tag_line, or legacy_name")
        return self

    @property
    def is_riot_id(self) -> bool:
        """Whether this handle uses the name#tag form."""
        return self.legacy_name is None


class SummonerSummary(BaseModel):
    """Identifiers of a resolved summoner."""

    name: Optional[str] = Field(None, description="Display name")
    summoner_id: Optional[str] = Field(None, description="Encrypted summoner ID (rank lookups)")
    puuid: Optional[str] = Field(None, description="Player's PUUID (match lookups)")


class RankEntryResponse(BaseModel):
    """Ranked standing in a single queue."""

    queue_type: Optional[str] = None
    tier: Optional[str] = None
    rank: Optional[str] = Field(None, description="Division (I, II, III, IV)")
    league_points: Optional[int] = None
    wins: Optional[int] = None
    losses: Optional[int] = None


class PlayerProfile(BaseModel):
    """Combined lookup result for one player."""

    query: str = Field(..., description="Identity string as submitted")
    summoner: SummonerSummary
    rank_entry: Optional[RankEntryResponse] = Field(
        None, description="Solo queue entry if present, else first entry, else null"
    )
    score: float = Field(..., ge=0, le=10, description="Skill score on a 1-10 ladder")
    role: Role = Field(..., description="Majority role over recent matches")
