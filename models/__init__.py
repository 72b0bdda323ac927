from .base import BaseLeagueModel
from .hole_score import HoleScore
from .league import LeagueSettings
from .match_state import HoleResult, Leader, MatchState, MatchStatus
from .schedule import CalendarRound, PlannedRound, RoundAssignment, RoundStatus, RoundType
from .score_record import ScoreRecord
from .scorecard import PlayerScorecard, TeamSideup
from .side import IndividualSide, Side, TeamSide, side_for
from .standings import SeasonMatch, StandingsRow

__all__ = [
    "BaseLeagueModel",
    "CalendarRound",
    "HoleResult",
    "HoleScore",
    "IndividualSide",
    "Leader",
    "LeagueSettings",
    "MatchState",
    "MatchStatus",
    "PlannedRound",
    "PlayerScorecard",
    "RoundAssignment",
    "RoundStatus",
    "RoundType",
    "ScoreRecord",
    "SeasonMatch",
    "Side",
    "StandingsRow",
    "TeamSide",
    "TeamSideup",
    "side_for",
]
