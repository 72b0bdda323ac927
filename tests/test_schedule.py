from datetime import date, timedelta
from itertools import combinations

import pytest

from engine.schedule import (
    MAX_SEASON_ROUNDS,
    assign_pairings,
    generate_pairings,
    generate_season_rounds,
    plan_schedule,
)
from models import CalendarRound, RoundType


def _rounds(count, start=date(2026, 5, 4), **match_counts):
    """Weekly calendar rounds r0, r1, ...; pass r2=3 to mark a round as populated."""
    return [
        CalendarRound(
            round_id=f"r{i}",
            date=start + timedelta(weeks=i),
            match_count=match_counts.get(f"r{i}", 0),
        )
        for i in range(count)
    ]


def _unordered(weeks):
    return [frozenset(pair) for week in weeks for pair in week]


# ================================================================
# generate_pairings
# ================================================================

def test_four_teams_play_everyone_once():
    weeks = generate_pairings(["A", "B", "C", "D"])

    assert len(weeks) == 3
    assert all(len(week) == 2 for week in weeks)
    pairs = _unordered(weeks)
    assert len(pairs) == len(set(pairs)) == 6
    assert set(pairs) == {frozenset(p) for p in combinations("ABCD", 2)}


def test_each_team_plays_once_per_week():
    for week in generate_pairings(["A", "B", "C", "D", "E", "F"]):
        teams = [team for pair in week for team in pair]
        assert len(teams) == len(set(teams))


def test_odd_count_gives_each_team_one_bye():
    weeks = generate_pairings(["A", "B", "C"])

    assert len(weeks) == 3
    assert all(len(week) == 1 for week in weeks)
    assert set(_unordered(weeks)) == {frozenset(p) for p in combinations("ABC", 2)}

    idle = []
    for week in weeks:
        playing = {team for pair in week for team in pair}
        idle.extend(set("ABC") - playing)
    assert sorted(idle) == ["A", "B", "C"]


def test_no_team_plays_itself():
    for week in generate_pairings([f"T{i}" for i in range(7)]):
        for team_a, team_b in week:
            assert team_a != team_b


def test_first_week_pairs_opposite_seats():
    assert generate_pairings(["A", "B", "C", "D"])[0] == [("A", "D"), ("B", "C")]


@pytest.mark.parametrize("team_ids", [[], ["A"]])
def test_too_few_teams(team_ids):
    assert generate_pairings(team_ids) == []


# ================================================================
# assign_pairings
# ================================================================

def test_assign_cycles_through_weeks():
    pairings = generate_pairings(["A", "B", "C", "D"])
    assignments = assign_pairings(_rounds(7), pairings)

    assert [a.week_index for a in assignments] == [0, 1, 2, 0, 1, 2, 0]
    assert assignments[3].pairings == pairings[0]


def test_populated_round_is_skipped_but_uses_its_week():
    pairings = generate_pairings(["A", "B", "C", "D"])
    assignments = assign_pairings(_rounds(4, r1=2), pairings)

    assert [a.round_id for a in assignments] == ["r0", "r2", "r3"]
    assert [a.week_index for a in assignments] == [0, 2, 0]


def test_rerun_leaves_first_round_alone():
    pairings = generate_pairings(["A", "B", "C", "D"])
    assignments = assign_pairings(_rounds(3, r0=2), pairings)

    assert [a.round_id for a in assignments] == ["r1", "r2"]
    assert [a.week_index for a in assignments] == [1, 2]


def test_rounds_are_taken_in_date_order():
    rounds = list(reversed(_rounds(3)))
    assignments = assign_pairings(rounds, generate_pairings(["A", "B", "C", "D"]))

    assert [a.round_id for a in assignments] == ["r0", "r1", "r2"]
    assert [a.week_index for a in assignments] == [0, 1, 2]


def test_nothing_to_assign():
    assert assign_pairings([], generate_pairings(["A", "B"])) == []
    assert assign_pairings(_rounds(3), []) == []


def test_plan_schedule_for_two_teams():
    assignments = plan_schedule(["A", "B"], _rounds(3))
    assert [a.pairings for a in assignments] == [[("A", "B")]] * 3


# ================================================================
# generate_season_rounds
# ================================================================

def test_weekly_rounds_on_weekday():
    # 2026-05-01 is a Friday; Tuesdays follow
    planned = generate_season_rounds(date(2026, 5, 1), date(2026, 5, 31), weekday=2)

    assert [p.date for p in planned] == [
        date(2026, 5, 5), date(2026, 5, 12), date(2026, 5, 19), date(2026, 5, 26),
    ]
    assert all(p.round_type == RoundType.EIGHTEEN_HOLES for p in planned)
    assert all(p.holes_count == 18 for p in planned)


def test_weekday_counts_from_sunday():
    # 2026-05-01 is a Friday
    sundays = generate_season_rounds(date(2026, 5, 1), date(2026, 5, 10), weekday=0)
    saturdays = generate_season_rounds(date(2026, 5, 1), date(2026, 5, 10), weekday=6)

    assert [p.date for p in sundays] == [date(2026, 5, 3), date(2026, 5, 10)]
    assert [p.date for p in saturdays] == [date(2026, 5, 2), date(2026, 5, 9)]


def test_start_on_weekday_is_included():
    planned = generate_season_rounds(date(2026, 5, 4), date(2026, 5, 4), weekday=1)
    assert [p.date for p in planned] == [date(2026, 5, 4)]


def test_nine_hole_rotation_alternates():
    planned = generate_season_rounds(
        date(2026, 5, 4), date(2026, 6, 1), weekday=1, holes_count=9, rotation="rotate",
    )
    assert [p.round_type for p in planned] == [
        RoundType.FRONT_NINE, RoundType.BACK_NINE,
        RoundType.FRONT_NINE, RoundType.BACK_NINE, RoundType.FRONT_NINE,
    ]


def test_nine_hole_fixed_side():
    planned = generate_season_rounds(
        date(2026, 5, 4), date(2026, 5, 18), weekday=1, holes_count=9, rotation="back_9",
    )
    assert {p.round_type for p in planned} == {RoundType.BACK_NINE}


def test_season_is_capped():
    planned = generate_season_rounds(date(2026, 1, 1), date(2036, 1, 1), weekday=3)
    assert len(planned) == MAX_SEASON_ROUNDS


def test_empty_when_start_after_end():
    assert generate_season_rounds(date(2026, 6, 1), date(2026, 5, 1), weekday=0) == []


def test_bad_weekday():
    with pytest.raises(ValueError):
        generate_season_rounds(date(2026, 5, 1), date(2026, 6, 1), weekday=7)
