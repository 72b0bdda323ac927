"""Season standings folded from completed best-ball matches."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from engine.match_play import HOLES_PER_ROUND, holes_won
from models.match_state import MatchState
from models.schedule import RoundStatus
from models.side import TeamSide
from models.standings import SeasonMatch, StandingsRow

WIN_POINTS = 1.0
TIE_POINTS = 0.5


def _empty_table(all_team_ids: Iterable[str]) -> Dict[str, StandingsRow]:
    table: Dict[str, StandingsRow] = {}
    for team_id in all_team_ids:
        if team_id not in table:
            table[team_id] = StandingsRow(team_id=team_id)
    return table


def _record_result(
    table: Dict[str, StandingsRow],
    team_a: str,
    team_b: str,
    holes_won_a: int,
    holes_won_b: int,
) -> None:
    row_a = table.get(team_a)
    row_b = table.get(team_b)
    if row_a is None or row_b is None:
        return

    if holes_won_a > holes_won_b:
        row_a.wins += 1
        row_a.points += WIN_POINTS
        row_b.losses += 1
    elif holes_won_b > holes_won_a:
        row_b.wins += 1
        row_b.points += WIN_POINTS
        row_a.losses += 1
    else:
        row_a.ties += 1
        row_a.points += TIE_POINTS
        row_b.ties += 1
        row_b.points += TIE_POINTS


def _sorted(table: Dict[str, StandingsRow]) -> List[StandingsRow]:
    # stable: teams level on points keep their input order
    return sorted(table.values(), key=lambda row: row.points, reverse=True)


def aggregate_standings(
    matches: Iterable[SeasonMatch],
    all_team_ids: Sequence[str],
) -> List[StandingsRow]:
    """
    Win/loss/tie table for a season, highest points first.

    Only matches from completed rounds count. Players without a team are
    left out, and a match that does not come down to exactly two teams is
    skipped. Holes won are recomputed from the raw scores over the match's
    full hole range. Every team in `all_team_ids` appears, even with no
    matches played.
    """
    table = _empty_table(all_team_ids)

    for match in matches:
        if match.round_status != RoundStatus.COMPLETED:
            continue
        team_sideups = [s for s in match.sideups if isinstance(s.side, TeamSide)]
        if len(team_sideups) != 2:
            continue

        side_a, side_b = team_sideups
        if side_a.side == side_b.side:
            continue
        won_a, won_b = holes_won(side_a, side_b, match.hole_count or HOLES_PER_ROUND)
        _record_result(table, side_a.side.team_id, side_b.side.team_id, won_a, won_b)

    return _sorted(table)


def aggregate_results(
    results: Iterable[Tuple[str, str, MatchState]],
    all_team_ids: Sequence[str],
) -> List[StandingsRow]:
    """Fold already-scored matches given as (team_a, team_b, state)."""
    table = _empty_table(all_team_ids)
    for team_a, team_b, state in results:
        if not state.is_valid_format or team_a == team_b:
            continue
        _record_result(table, team_a, team_b, state.holes_won_a, state.holes_won_b)
    return _sorted(table)
