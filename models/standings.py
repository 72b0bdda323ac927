from pydantic import Field
from typing import List

from .base import BaseLeagueModel
from .schedule import RoundStatus
from .scorecard import TeamSideup


class StandingsRow(BaseLeagueModel):
    """Season record for one team. Win = 1 point, tie = 0.5, loss = 0."""
    team_id: str
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    ties: int = Field(0, ge=0)
    points: float = Field(0.0, ge=0)

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses + self.ties


class SeasonMatch(BaseLeagueModel):
    """One match of a season with the status of the round it belongs to."""
    match_id: str
    round_status: RoundStatus = RoundStatus.SCHEDULED
    hole_count: int = Field(18, ge=1, le=18)
    sideups: List[TeamSideup] = Field(default_factory=list)
