import pytest
from datetime import date
from pydantic import BaseModel, ValidationError

from models import (
    CalendarRound,
    HoleScore,
    IndividualSide,
    LeagueSettings,
    MatchState,
    MatchStatus,
    PlayerScorecard,
    ScoreRecord,
    Side,
    StandingsRow,
    TeamSide,
    TeamSideup,
    side_for,
)


# ================================================================
# ScoreRecord
# ================================================================

def test_score_record_effective_score():
    assert ScoreRecord(gross_score=85).effective_score == 85
    assert ScoreRecord(gross_score=85, override_score=82).effective_score == 82


def test_score_record_resolvable():
    assert ScoreRecord(gross_score=80, course_rating=71.2, slope=125).is_resolvable
    assert not ScoreRecord(gross_score=80, course_rating=71.2).is_resolvable
    assert not ScoreRecord(gross_score=80, slope=125).is_resolvable


def test_score_record_validation():
    with pytest.raises(ValidationError):
        ScoreRecord(gross_score=0)          # gross < 1

    with pytest.raises(ValidationError):
        ScoreRecord(gross_score=80, slope=160)   # slope > 155

    with pytest.raises(ValidationError):
        ScoreRecord(gross_score=80, slope=50)    # slope < 55


def test_score_record_is_immutable():
    record = ScoreRecord(gross_score=80, course_rating=72.0, slope=113)
    with pytest.raises(ValidationError):
        record.gross_score = 70


# ================================================================
# HoleScore
# ================================================================

def test_hole_score_validation():
    hs = HoleScore(hole_number=1, par=4, stroke_index=7, gross_score=5)
    assert hs.is_valid_score

    with pytest.raises(ValidationError):
        HoleScore(hole_number=19)

    with pytest.raises(ValidationError):
        HoleScore(hole_number=1, stroke_index=0)

    with pytest.raises(ValidationError):
        HoleScore(hole_number=1, stroke_index=19)


def test_hole_score_validity():
    assert HoleScore(hole_number=1, gross_score=4).is_valid_score
    assert not HoleScore(hole_number=1).is_valid_score
    assert not HoleScore(hole_number=1, gross_score=0).is_valid_score


def test_hole_score_assignment_is_validated():
    hs = HoleScore(hole_number=3, gross_score=4)
    hs.gross_score = 5
    assert hs.gross_score == 5

    with pytest.raises(ValidationError):
        hs.stroke_index = 25
    assert hs.stroke_index is None


# ================================================================
# Side
# ================================================================

class _SideHolder(BaseModel):
    side: Side


def test_side_is_tagged_variant():
    team = _SideHolder(side={"kind": "team", "team_id": "t1"}).side
    solo = _SideHolder(side={"kind": "individual", "player_id": "p1"}).side

    assert isinstance(team, TeamSide)
    assert isinstance(solo, IndividualSide)
    assert team.team_id == "t1"
    assert solo.player_id == "p1"

    with pytest.raises(ValidationError):
        _SideHolder(side={"kind": "club", "team_id": "t1"})


def test_sides_are_hashable_and_compare_by_value():
    assert TeamSide(team_id="t1") == TeamSide(team_id="t1")
    assert TeamSide(team_id="x") != IndividualSide(player_id="x")
    assert len({TeamSide(team_id="t1"), TeamSide(team_id="t1")}) == 1


def test_side_for_falls_back_to_individual():
    assert side_for("p1", "t1") == TeamSide(team_id="t1")
    assert side_for("p1") == IndividualSide(player_id="p1")
    assert side_for("p1", None) == IndividualSide(player_id="p1")


# ================================================================
# Scorecards
# ================================================================

def test_scorecard_latest_score_per_hole_wins():
    card = PlayerScorecard(
        player_id="p1",
        side=TeamSide(team_id="t1"),
        hole_scores=[
            HoleScore(hole_number=1, gross_score=5, stroke_index=3),
            HoleScore(hole_number=1, gross_score=3),
            HoleScore(hole_number=2, gross_score=None, stroke_index=11),
        ],
    )
    assert card.valid_score(1) == 3
    assert card.valid_score(2) is None
    assert card.valid_score(3) is None
    assert card.stroke_indexes() == {1: 3, 2: 11}


def test_team_sideup_best_ball():
    side = TeamSide(team_id="t1")
    sideup = TeamSideup(
        side=side,
        players=[
            PlayerScorecard(player_id="p1", side=side, hole_scores=[
                HoleScore(hole_number=1, gross_score=5),
                HoleScore(hole_number=2, gross_score=0),
            ]),
            PlayerScorecard(player_id="p2", side=side, hole_scores=[
                HoleScore(hole_number=1, gross_score=4),
            ]),
        ],
    )
    assert sideup.best_ball(1) == 4
    assert sideup.best_ball(2) is None   # zero is not a valid score
    assert sideup.best_ball(3) is None

    # net: p1 gets two strokes on hole 1
    assert sideup.best_ball(1, {"p1": {1: 2}}) == 3


# ================================================================
# League settings / derived rows
# ================================================================

def test_league_settings_bounds():
    assert LeagueSettings().adjustment_percentage == 1.0
    assert LeagueSettings().minimum_scores_to_calculate == 3
    assert LeagueSettings(adjustment_percentage=0.9).adjustment_percentage == 0.9

    with pytest.raises(ValidationError):
        LeagueSettings(adjustment_percentage=0)

    with pytest.raises(ValidationError):
        LeagueSettings(adjustment_percentage=1.1)


def test_standings_row_defaults():
    row = StandingsRow(team_id="t1")
    assert (row.wins, row.losses, row.ties, row.points) == (0, 0, 0, 0.0)
    assert row.matches_played == 0


def test_match_state_defaults():
    state = MatchState()
    assert state.status == MatchStatus.NOT_STARTED
    assert state.status_label == "Not Started"
    assert state.leader is None
    assert state.is_valid_format


def test_calendar_round_has_matches():
    assert not CalendarRound(round_id="r1", date=date(2026, 5, 6)).has_matches
    assert CalendarRound(round_id="r1", date=date(2026, 5, 6), match_count=2).has_matches
