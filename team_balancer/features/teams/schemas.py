"""Schemas for team split requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScoredPlayer(BaseModel):
    """A roster entry. Unknown fields are kept and echoed back unchanged."""

    name: str = Field(..., description="Display name")
    score: Optional[float] = Field(
        None, description="Skill score; missing or zero counts as 1"
    )
    role: Optional[str] = Field(None, description="Preferred role, informational only")

    model_config = ConfigDict(extra="allow")


class TeamSplitRequest(BaseModel):
    """Request to split a roster into two teams."""

    players: List[ScoredPlayer] = Field(default_factory=list)
    mode: str = Field(
        "balanced", description="balanced, duo or random; anything else means balanced"
    )


class TeamSplitResponse(BaseModel):
    """Two rosters with their score totals."""

    mode: str
    team_a: List[ScoredPlayer]
    team_b: List[ScoredPlayer]
    score_a: float
    score_b: float
    diff: float = Field(..., ge=0, description="|score_a - score_b|")
