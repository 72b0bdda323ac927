from datetime import date as date_type
from enum import Enum
from pydantic import Field
from typing import List, Optional, Tuple

from .base import BaseLeagueModel


class RoundStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class RoundType(str, Enum):
    """Which holes a calendar round is played over."""
    EIGHTEEN_HOLES = "18_holes"
    FRONT_NINE = "front_9"
    BACK_NINE = "back_9"


class CalendarRound(BaseLeagueModel):
    """A dated league round as the scheduler sees it."""
    round_id: str
    date: date_type
    match_count: int = Field(0, ge=0)  # matches already persisted for the round

    @property
    def has_matches(self) -> bool:
        return self.match_count > 0


class RoundAssignment(BaseLeagueModel):
    """Pairings chosen for one empty calendar round."""
    round_id: str
    date: date_type
    week_index: int = Field(..., ge=0)
    pairings: List[Tuple[str, str]] = Field(default_factory=list)


class PlannedRound(BaseLeagueModel):
    """A round proposed by the season calendar, not yet persisted."""
    date: date_type
    holes_count: int = 18
    round_type: RoundType = RoundType.EIGHTEEN_HOLES
    course_id: Optional[str] = None
