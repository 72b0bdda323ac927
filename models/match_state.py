from enum import Enum
from pydantic import Field
from typing import List, Optional

from .base import BaseLeagueModel
from .side import Side


class Leader(str, Enum):
    """Who is ahead in a match (or who won a hole)."""
    A = "A"
    B = "B"
    ALL_SQUARE = "all_square"


class MatchStatus(str, Enum):
    """Lifecycle of a scored match as seen by the scorer."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    INVALID_FORMAT = "invalid_format"


NOT_STARTED_LABEL = "Not Started"
ALL_SQUARE_LABEL = "All Square"
INVALID_FORMAT_LABEL = "Invalid Match Format"


class HoleResult(BaseLeagueModel):
    """Best-ball comparison for one hole both sides have completed."""
    hole_number: int = Field(..., ge=1)
    best_a: int
    best_b: int
    winner: Optional[Leader] = None  # None = halved
    holes_won_a: int = 0  # running tally after this hole
    holes_won_b: int = 0


class MatchState(BaseLeagueModel):
    """Derived match-play status. Recomputed from scores on every read, never stored."""
    status: MatchStatus = MatchStatus.NOT_STARTED
    holes_won_a: int = Field(0, ge=0)
    holes_won_b: int = Field(0, ge=0)
    holes_played: int = Field(0, ge=0)
    status_label: str = NOT_STARTED_LABEL
    leader: Optional[Leader] = None
    side_a: Optional[Side] = None
    side_b: Optional[Side] = None
    hole_results: List[HoleResult] = Field(default_factory=list)

    @property
    def is_valid_format(self) -> bool:
        return self.status != MatchStatus.INVALID_FORMAT
