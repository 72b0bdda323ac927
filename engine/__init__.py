from .handicap import (
    calculate_differential,
    calculate_handicap_index,
    calculate_player_handicap,
    count_to_average,
)
from .match_play import group_sideups, score_match, score_round, score_scorecards
from .schedule import assign_pairings, generate_pairings, generate_season_rounds, plan_schedule
from .standings import aggregate_results, aggregate_standings
from .strokes import allocate_strokes, calculate_match_strokes, strokes_for_hole

__all__ = [
    "calculate_differential",
    "calculate_handicap_index",
    "calculate_player_handicap",
    "count_to_average",
    "calculate_match_strokes",
    "strokes_for_hole",
    "allocate_strokes",
    "group_sideups",
    "score_match",
    "score_scorecards",
    "score_round",
    "aggregate_standings",
    "aggregate_results",
    "generate_pairings",
    "assign_pairings",
    "plan_schedule",
    "generate_season_rounds",
]
