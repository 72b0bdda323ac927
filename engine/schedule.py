"""
Round-robin pairings and the season calendar.

Pairings use the circle method: the first team stays put while the rest
rotate one seat per week, so N teams meet every opponent once over N-1
weeks (N rounded up to even with a bye). Pairing-weeks are then laid over
the season's dated rounds, repeating from the start when the calendar is
longer than the rotation.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from models.schedule import CalendarRound, PlannedRound, RoundAssignment, RoundType

Pairing = Tuple[str, str]

MAX_SEASON_ROUNDS = 104
ROTATE_NINES = "rotate"

# Sentinel seat for odd team counts; whoever draws it sits out the week.
_BYE = object()


def generate_pairings(team_ids: Sequence[str]) -> List[List[Pairing]]:
    """One list of (team_a, team_b) pairings per week. Fewer than two teams gives []."""
    if len(team_ids) < 2:
        return []

    seats: list = list(team_ids)
    if len(seats) % 2:
        seats.append(_BYE)

    n = len(seats)
    weeks: List[List[Pairing]] = []
    for _ in range(n - 1):
        week: List[Pairing] = []
        for i in range(n // 2):
            team_a, team_b = seats[i], seats[n - 1 - i]
            if team_a is _BYE or team_b is _BYE:
                continue
            week.append((team_a, team_b))
        weeks.append(week)
        seats = [seats[0], seats[-1]] + seats[1:-1]
    return weeks


def assign_pairings(
    rounds: Sequence[CalendarRound],
    pairings: Sequence[Sequence[Pairing]],
) -> List[RoundAssignment]:
    """
    Map pairing-weeks onto calendar rounds in date order.

    Round i (0-based, by date) takes week i mod len(pairings). A round that
    already has matches is skipped as a whole but still uses up its week,
    so re-running against a partly filled season only fills the empty rounds.
    """
    if not rounds or not pairings:
        return []

    assignments: List[RoundAssignment] = []
    for index, round_ in enumerate(sorted(rounds, key=lambda r: r.date)):
        if round_.has_matches:
            continue
        week_index = index % len(pairings)
        assignments.append(
            RoundAssignment(
                round_id=round_.round_id,
                date=round_.date,
                week_index=week_index,
                pairings=list(pairings[week_index]),
            )
        )
    return assignments


def plan_schedule(team_ids: Sequence[str], rounds: Sequence[CalendarRound]) -> List[RoundAssignment]:
    """Pairings for every empty round of a season."""
    return assign_pairings(rounds, generate_pairings(team_ids))


def _round_type(holes_count: int, rotation: str, index: int) -> RoundType:
    if holes_count != 9:
        return RoundType.EIGHTEEN_HOLES
    if rotation == ROTATE_NINES:
        return RoundType.FRONT_NINE if index % 2 == 0 else RoundType.BACK_NINE
    return RoundType(rotation)


def generate_season_rounds(
    start: date,
    end: date,
    weekday: int,
    holes_count: int = 18,
    rotation: str = RoundType.EIGHTEEN_HOLES.value,
    course_id: Optional[str] = None,
) -> List[PlannedRound]:
    """
    Weekly rounds on `weekday` (Sunday = 0 through Saturday = 6) from the
    first such day on or after `start` through `end` inclusive, capped at
    MAX_SEASON_ROUNDS.

    Nine-hole seasons play `rotation`: "rotate" alternates front and back
    nines, "front_9" / "back_9" fixes one. Eighteen-hole seasons ignore it.
    """
    if start > end:
        return []
    if not 0 <= weekday <= 6:
        raise ValueError(f"weekday must be 0-6, got {weekday}")

    # isoweekday() % 7 puts Sunday at 0
    current = start + timedelta(days=(weekday - start.isoweekday() % 7) % 7)
    planned: List[PlannedRound] = []
    while current <= end and len(planned) < MAX_SEASON_ROUNDS:
        planned.append(
            PlannedRound(
                date=current,
                holes_count=holes_count,
                round_type=_round_type(holes_count, rotation, len(planned)),
                course_id=course_id,
            )
        )
        current += timedelta(weeks=1)
    return planned
