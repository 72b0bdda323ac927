"""API request/response models wrapping the engine's inputs and outputs."""

from datetime import date
from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional, Tuple

from models import (
    CalendarRound,
    Leader,
    MatchState,
    PlayerScorecard,
    RoundAssignment,
    SeasonMatch,
)


class DifferentialRequest(BaseModel):
    score: int = Field(..., ge=1)
    course_rating: float
    slope: int = Field(..., gt=0)


class DifferentialResponse(BaseModel):
    differential: float


class HandicapIndexRequest(BaseModel):
    differentials: List[float] = Field(default_factory=list)
    adjustment_percentage: float = Field(1.0, gt=0, le=1)


class HandicapIndexResponse(BaseModel):
    handicap_index: float
    differentials_used: int


class StrokesRequest(BaseModel):
    handicap_a: float
    handicap_b: float
    stroke_indexes: Dict[int, int] = Field(default_factory=dict)  # {hole_number: stroke_index}


class StrokesResponse(BaseModel):
    """Strokes the higher handicap receives and where they fall."""
    match_strokes: float
    receiver: Optional[Leader] = None  # None when handicaps are equal
    allocation: Dict[int, int] = Field(default_factory=dict)


class RecalculateResponse(BaseModel):
    user_id: str
    league_id: str
    handicap_index: Optional[float] = None
    scores_used: int
    updated: bool


class ScoreMatchRequest(BaseModel):
    scorecards: List[PlayerScorecard]
    hole_count: int = Field(18, ge=1, le=18)
    net: bool = False


class RoundBoardResponse(BaseModel):
    """Live status for every match in a round."""
    round_id: str
    matches: Dict[str, MatchState]


class StandingsRequest(BaseModel):
    team_ids: List[str]
    matches: List[SeasonMatch] = Field(default_factory=list)


class PairingsRequest(BaseModel):
    team_ids: List[str]
    rounds: List[CalendarRound] = Field(default_factory=list)


class PairingsResponse(BaseModel):
    weeks: List[List[Tuple[str, str]]]
    assignments: List[RoundAssignment] = Field(default_factory=list)


class CalendarRequest(BaseModel):
    start_date: date
    end_date: date
    weekday: int = Field(..., ge=0, le=6)  # Sunday = 0
    holes_count: Literal[9, 18] = 18
    rotation: Literal["18_holes", "front_9", "back_9", "rotate"] = "18_holes"
    course_id: Optional[str] = None


class CreateRoundsResponse(BaseModel):
    season_id: str
    rounds_created: int


class ScheduleResponse(BaseModel):
    season_id: str
    rounds_filled: int
    matches_created: int
    assignments: List[RoundAssignment] = Field(default_factory=list)
