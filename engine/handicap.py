"""
Handicap differentials and the rolling handicap index.

WHS-inspired, not certified: the index averages the best few differentials
from a player's recent window and applies the league's percentage.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from models.league import LeagueSettings
from models.score_record import ScoreRecord

STANDARD_SLOPE = 113
HANDICAP_WINDOW = 20

# (largest sample size in the bracket, number of best differentials averaged)
BEST_DIFFERENTIALS_TABLE = (
    (5, 1),
    (8, 2),
    (11, 3),
    (14, 4),
    (16, 5),
    (18, 6),
    (19, 7),
)
MAX_DIFFERENTIALS_AVERAGED = 8


def calculate_differential(effective_score: float, course_rating: float, slope: float) -> float:
    """(score - rating) * (113 / slope). No rounding and no range checks."""
    return (effective_score - course_rating) * (STANDARD_SLOPE / slope)


def count_to_average(sample_size: int) -> int:
    """How many of the best differentials count for a window of this size."""
    if sample_size <= 0:
        return 0
    for upper_bound, count in BEST_DIFFERENTIALS_TABLE:
        if sample_size <= upper_bound:
            return count
    return MAX_DIFFERENTIALS_AVERAGED


def round_one_decimal(value: float) -> float:
    """
    Round to one decimal place, halves away from zero.

    Works on the float's shortest decimal form, so 4.45 -> 4.5 and
    -4.45 -> -4.5. Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    quantized = Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(quantized)


def calculate_handicap_index(
    differentials: Sequence[float],
    adjustment_percentage: float = 1.0,
) -> float:
    """
    Average the best differentials and apply the league percentage.

    Empty input gives 0.0. NaN differentials propagate as NaN.
    """
    if not differentials:
        return 0.0
    if any(math.isnan(d) for d in differentials):
        return math.nan

    ordered = sorted(differentials)
    count = count_to_average(len(ordered))
    best = ordered[:count]
    average = sum(best) / count
    return round_one_decimal(average * adjustment_percentage)


def differentials_for(records: Iterable[ScoreRecord]) -> List[float]:
    """Differentials for every record with a resolvable tee; the rest are ignored."""
    return [
        calculate_differential(r.effective_score, r.course_rating, r.slope)
        for r in records
        if r.is_resolvable
    ]


def calculate_player_handicap(
    records: Sequence[ScoreRecord],
    settings: Optional[LeagueSettings] = None,
    window: int = HANDICAP_WINDOW,
) -> Optional[float]:
    """
    Handicap index for one player in one league, or None when not computable.

    `records` must be ordered most recent first. Records without a rating or
    slope are dropped before the window is applied. Returns None when nothing
    usable remains or the league's minimum score count is not met.
    """
    settings = settings or LeagueSettings()
    usable = [r for r in records if r.is_resolvable][:window]
    if not usable or len(usable) < settings.minimum_scores_to_calculate:
        return None
    return calculate_handicap_index(
        differentials_for(usable), settings.adjustment_percentage
    )
