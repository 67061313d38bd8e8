"""Pydantic models for Riot API response data.

Only the fields the service reads are declared. Every field is optional,
unknown fields are ignored and a value of the wrong type falls back to the
field default, so a changed upstream payload degrades to missing values
instead of a validation failure.
"""

from typing import Any, Optional, List
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .constants import RankedQueue


class RiotDTO(BaseModel):
    """Base for upstream payloads: camelCase aliases, lenient field types."""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_bad_value(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        """Replace a value that fails validation with the field default."""
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class AccountDTO(RiotDTO):
    """Riot Account information."""

    puuid: Optional[str] = None
    game_name: Optional[str] = Field(None, alias="gameName")
    tag_line: Optional[str] = Field(None, alias="tagLine")


class SummonerDTO(RiotDTO):
    """League of Legends Summoner information."""

    id: Optional[str] = None
    puuid: Optional[str] = None
    name: Optional[str] = None
    profile_icon_id: Optional[int] = Field(None, alias="profileIconId")
    summoner_level: Optional[int] = Field(None, alias="summonerLevel")


class LeagueEntryDTO(RiotDTO):
    """League entry information for one ranked queue."""

    queue_type: Optional[str] = Field(None, alias="queueType")
    tier: Optional[str] = None
    rank: Optional[str] = None
    league_points: Optional[int] = Field(0, alias="leaguePoints")
    wins: Optional[int] = 0
    losses: Optional[int] = 0

    @property
    def is_solo_queue(self) -> bool:
        """Whether this entry belongs to ranked solo/duo."""
        return self.queue_type == RankedQueue.SOLO.value


class ParticipantDTO(RiotDTO):
    """Match participant information."""

    puuid: Optional[str] = None
    team_position: Optional[str] = Field(None, alias="teamPosition")
    individual_position: Optional[str] = Field(None, alias="individualPosition")
    champion_name: Optional[str] = Field(None, alias="championName")


class MatchInfoDTO(RiotDTO):
    """Match information."""

    queue_id: Optional[int] = Field(None, alias="queueId")
    participants: List[ParticipantDTO] = Field(default_factory=list)


class MatchMetadataDTO(RiotDTO):
    """Match metadata."""

    match_id: Optional[str] = Field(None, alias="matchId")
    participants: List[str] = Field(default_factory=list)


class MatchDTO(RiotDTO):
    """Complete match data."""

    metadata: MatchMetadataDTO = Field(default_factory=MatchMetadataDTO)
    info: MatchInfoDTO = Field(default_factory=MatchInfoDTO)

    @property
    def match_id(self) -> Optional[str]:
        """Get match ID from metadata."""
        return self.metadata.match_id

    def participant(self, puuid: str) -> Optional[ParticipantDTO]:
        """Find the participant entry for ``puuid``."""
        return next((p for p in self.info.participants if p.puuid == puuid), None)
