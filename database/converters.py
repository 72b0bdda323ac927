"""Conversion between asyncpg database rows and Pydantic domain models.

Centralizes all mapping logic between the normalized league schema
and the engine's input/output models.
"""

from typing import Dict, List, Optional
from uuid import UUID

from engine.match_play import group_sideups
from models import (
    CalendarRound,
    HoleScore,
    LeagueSettings,
    PlannedRound,
    PlayerScorecard,
    RoundStatus,
    ScoreRecord,
    SeasonMatch,
    side_for,
)

FULL_ROUND_HOLES = 18


def _str_id(value) -> Optional[str]:
    return str(value) if value is not None else None


# ================================================================
# Row -> Model (reads)
# ================================================================

def league_settings_from_row(row) -> LeagueSettings:
    """league.organizations row -> LeagueSettings."""
    return LeagueSettings(
        adjustment_percentage=float(row["handicap_percentage"]),
        minimum_scores_to_calculate=row["min_scores_to_calculate"],
    )


def score_record_from_row(row) -> ScoreRecord:
    """
    Per-round score aggregate joined to its tee -> ScoreRecord.

    Tee ratings are 18-hole ratings, so nine-hole totals are doubled to
    an 18-hole equivalent before they reach the differential.
    """
    scale = FULL_ROUND_HOLES // row["holes_count"] if row["holes_count"] else 1
    override = row["override_score"]
    return ScoreRecord(
        gross_score=row["gross_score"] * scale,
        override_score=override * scale if override is not None else None,
        course_rating=float(row["rating"]) if row["rating"] is not None else None,
        slope=row["slope"],
    )


def hole_score_from_row(row) -> HoleScore:
    """league.scores row joined to courses.holes -> HoleScore."""
    return HoleScore(
        hole_number=row["hole_number"],
        par=row["par"],
        stroke_index=row["stroke_index"],
        gross_score=row["gross_score"],
    )


def scorecards_by_match(rows) -> Dict[str, List[PlayerScorecard]]:
    """
    Group match_players x scores rows into scorecards per match.

    Rows without a hole (players who have not scored yet) still produce an
    empty scorecard so the player's side is known. Order of first appearance
    is kept for both matches and players.
    """
    matches: Dict[str, Dict[str, PlayerScorecard]] = {}
    for row in rows:
        match_id = str(row["match_id"])
        cards = matches.setdefault(match_id, {})
        key = str(row["match_player_id"])
        card = cards.get(key)
        if card is None:
            player_id = str(row["user_id"])
            card = PlayerScorecard(
                player_id=player_id,
                side=side_for(player_id, _str_id(row["team_id"])),
                handicap=(
                    float(row["starting_handicap"])
                    if row["starting_handicap"] is not None else None
                ),
            )
            cards[key] = card
        if row["hole_number"] is not None:
            card.hole_scores.append(hole_score_from_row(row))
    return {match_id: list(cards.values()) for match_id, cards in matches.items()}


def season_matches_from_rows(rows) -> List[SeasonMatch]:
    """Scorecard rows carrying the round status -> SeasonMatch list.

    Hole range stays at the full 18 so back-nine rounds are scored too.
    """
    statuses: Dict[str, str] = {}
    for row in rows:
        statuses.setdefault(str(row["match_id"]), row["round_status"])

    return [
        SeasonMatch(
            match_id=match_id,
            round_status=RoundStatus(statuses[match_id]),
            sideups=group_sideups(cards),
        )
        for match_id, cards in scorecards_by_match(rows).items()
    ]


def calendar_round_from_row(row) -> CalendarRound:
    """league.rounds row with a match count -> CalendarRound."""
    round_date = row["date"]
    if hasattr(round_date, "date"):
        round_date = round_date.date()
    return CalendarRound(
        round_id=str(row["id"]),
        date=round_date,
        match_count=row["match_count"],
    )


# ================================================================
# Model -> Row tuple (writes)
# ================================================================

def planned_round_to_row(planned: PlannedRound, season_id: UUID) -> tuple:
    """PlannedRound -> tuple for league.rounds INSERT (for executemany)."""
    return (
        season_id,
        UUID(planned.course_id) if planned.course_id else None,
        planned.date,
        planned.holes_count,
        planned.round_type.value,
    )
