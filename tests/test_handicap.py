import math

import pytest

from engine.handicap import (
    calculate_differential,
    calculate_handicap_index,
    calculate_player_handicap,
    count_to_average,
    differentials_for,
    round_one_decimal,
)
from models import LeagueSettings, ScoreRecord


# ================================================================
# Differential
# ================================================================

def test_differential_formula():
    # (80 - 72.0) * (113 / 125) = 7.232
    assert calculate_differential(80, 72.0, 125) == pytest.approx(7.232, abs=1e-3)


@pytest.mark.parametrize("rating", [65.4, 70.0, 72.0, 74.9])
def test_scratch_score_on_neutral_slope_is_zero(rating):
    assert calculate_differential(rating, rating, 113) == 0


def test_differential_can_be_negative():
    assert calculate_differential(68, 71.0, 113) == pytest.approx(-3.0)


def test_differential_does_not_round_or_check_slope():
    # slope outside 55-155 is the caller's problem
    assert calculate_differential(80, 72.0, 200) == pytest.approx(8 * 113 / 200)


# ================================================================
# Count table
# ================================================================

@pytest.mark.parametrize(
    "sample_size, expected",
    [
        (1, 1), (5, 1),
        (6, 2), (8, 2),
        (9, 3), (11, 3),
        (12, 4), (14, 4),
        (15, 5), (16, 5),
        (17, 6), (18, 6),
        (19, 7),
        (20, 8), (25, 8),
    ],
)
def test_count_to_average_table(sample_size, expected):
    assert count_to_average(sample_size) == expected


def test_count_to_average_empty():
    assert count_to_average(0) == 0


# ================================================================
# Index
# ================================================================

def test_index_empty_is_zero():
    assert calculate_handicap_index([]) == 0


def test_index_single_differential():
    assert calculate_handicap_index([12.3]) == 12.3


def test_index_uses_best_for_each_bracket():
    assert calculate_handicap_index([10, 20]) == 10
    assert calculate_handicap_index([5, 4, 3, 2, 1]) == 1
    assert calculate_handicap_index(list(range(1, 7))) == 1.5     # (1+2)/2
    assert calculate_handicap_index(list(range(1, 10))) == 2      # (1+2+3)/3
    assert calculate_handicap_index(list(range(1, 13))) == 2.5    # best 4
    assert calculate_handicap_index(list(range(1, 16))) == 3      # best 5
    assert calculate_handicap_index(list(range(1, 18))) == 3.5    # best 6
    assert calculate_handicap_index(list(range(1, 20))) == 4.0    # best 7
    assert calculate_handicap_index(list(range(1, 21))) == 4.5    # best 8


def test_index_ignores_input_order():
    assert calculate_handicap_index([9.0, 3.0, 7.0, 1.0, 5.0, 11.0]) == 2.0


def test_index_applies_league_percentage():
    assert calculate_handicap_index([10.0, 10.0, 10.0], 0.9) == 9.0


def test_index_rounds_to_one_decimal():
    assert calculate_handicap_index([7.232]) == 7.2
    assert calculate_handicap_index([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 0.9) == 1.4  # 1.35 -> 1.4


def test_index_is_monotonic_in_a_single_differential():
    base = [14.0, 9.0, 12.0, 18.0, 11.0, 16.0, 10.0]
    previous = calculate_handicap_index(base)
    for lowered in (8.0, 5.0, 0.0, -2.0):
        current = calculate_handicap_index([lowered] + base[1:])
        assert current <= previous
        previous = current


def test_index_nan_propagates():
    assert math.isnan(calculate_handicap_index([10.0, float("nan")]))


def test_round_one_decimal_halves_away_from_zero():
    assert round_one_decimal(4.45) == 4.5
    assert round_one_decimal(-4.45) == -4.5
    assert round_one_decimal(0.25) == 0.3
    assert round_one_decimal(2.04) == 2.0
    assert math.isnan(round_one_decimal(float("nan")))


# ================================================================
# Player handicap
# ================================================================

def _record(score, rating=72.0, slope=113, override=None):
    return ScoreRecord(gross_score=score, override_score=override, course_rating=rating, slope=slope)


def test_player_handicap_uses_effective_score():
    records = [_record(90, override=80), _record(85), _record(84)]
    # differentials 8, 13, 12 -> best one of three
    assert calculate_player_handicap(records) == 8.0


def test_player_handicap_ignores_unresolvable_rounds():
    records = [
        ScoreRecord(gross_score=70),                       # no tee data
        ScoreRecord(gross_score=71, course_rating=72.0),   # no slope
        _record(82), _record(84), _record(86),
    ]
    assert differentials_for(records) == [10.0, 12.0, 14.0]
    assert calculate_player_handicap(records) == 10.0


def test_player_handicap_respects_minimum_scores():
    records = [_record(80), _record(82)]
    settings = LeagueSettings(minimum_scores_to_calculate=3)
    assert calculate_player_handicap(records, settings) is None
    assert calculate_player_handicap([], LeagueSettings(minimum_scores_to_calculate=0)) is None


def test_player_handicap_caps_window_at_most_recent():
    recent = [_record(90) for _ in range(20)]
    older = [_record(72)]   # a scratch round outside the window
    assert calculate_player_handicap(recent + older) == 18.0


def test_player_handicap_applies_percentage():
    records = [_record(82), _record(82), _record(82)]
    settings = LeagueSettings(adjustment_percentage=0.9)
    assert calculate_player_handicap(records, settings) == 9.0
