"""
Best-ball match play scoring.

Each side's score on a hole is the lowest valid score among its players.
A hole counts only once both sides have a valid score on it; the lower
best ball wins the hole and equal scores halve it. Every scored hole is
evaluated, so a match is never closed out early (no "3&2").
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.match_state import (
    ALL_SQUARE_LABEL,
    INVALID_FORMAT_LABEL,
    NOT_STARTED_LABEL,
    HoleResult,
    Leader,
    MatchState,
    MatchStatus,
)
from models.scorecard import PlayerScorecard, TeamSideup
from engine.strokes import stroke_allowances

HOLES_PER_ROUND = 18

StrokeAllowances = Mapping[str, Mapping[int, int]]


def group_sideups(cards: Iterable[PlayerScorecard]) -> List[TeamSideup]:
    """Group a match's scorecards by side, keeping first-seen order."""
    sideups: Dict[object, TeamSideup] = {}
    for card in cards:
        sideup = sideups.get(card.side)
        if sideup is None:
            sideup = TeamSideup(side=card.side)
            sideups[card.side] = sideup
        sideup.players.append(card)
    return list(sideups.values())


def compare_holes(
    side_a: TeamSideup,
    side_b: TeamSideup,
    hole_count: int = HOLES_PER_ROUND,
    stroke_allowances: Optional[StrokeAllowances] = None,
) -> List[HoleResult]:
    """Hole-by-hole best-ball results for every hole both sides have scored."""
    results: List[HoleResult] = []
    won_a = won_b = 0
    for hole_number in range(1, hole_count + 1):
        best_a = side_a.best_ball(hole_number, stroke_allowances)
        best_b = side_b.best_ball(hole_number, stroke_allowances)
        if best_a is None or best_b is None:
            continue

        winner = None
        if best_a < best_b:
            won_a += 1
            winner = Leader.A
        elif best_b < best_a:
            won_b += 1
            winner = Leader.B

        results.append(
            HoleResult(
                hole_number=hole_number,
                best_a=best_a,
                best_b=best_b,
                winner=winner,
                holes_won_a=won_a,
                holes_won_b=won_b,
            )
        )
    return results


def holes_won(
    side_a: TeamSideup,
    side_b: TeamSideup,
    hole_count: int = HOLES_PER_ROUND,
    stroke_allowances: Optional[StrokeAllowances] = None,
) -> Tuple[int, int]:
    """Total holes won by each side."""
    results = compare_holes(side_a, side_b, hole_count, stroke_allowances)
    if not results:
        return 0, 0
    return results[-1].holes_won_a, results[-1].holes_won_b


def status_for(holes_won_a: int, holes_won_b: int, holes_played: int) -> Tuple[Optional[Leader], str]:
    """Leader and display label for a running tally."""
    if holes_won_a > holes_won_b:
        return Leader.A, f"{holes_won_a - holes_won_b} UP"
    if holes_won_b > holes_won_a:
        return Leader.B, f"{holes_won_b - holes_won_a} UP"
    if holes_played > 0:
        return Leader.ALL_SQUARE, ALL_SQUARE_LABEL
    return None, NOT_STARTED_LABEL


def invalid_format(side_a: Optional[TeamSideup] = None, side_b: Optional[TeamSideup] = None) -> MatchState:
    return MatchState(
        status=MatchStatus.INVALID_FORMAT,
        status_label=INVALID_FORMAT_LABEL,
        side_a=side_a.side if side_a else None,
        side_b=side_b.side if side_b else None,
    )


def score_match(
    side_a: TeamSideup,
    side_b: TeamSideup,
    hole_count: int = HOLES_PER_ROUND,
    stroke_allowances: Optional[StrokeAllowances] = None,
) -> MatchState:
    """
    Score a two-sided best-ball match from the current snapshot of scores.

    Sides must be distinct and each must have at least one player, otherwise
    the result is an INVALID_FORMAT state with zero tallies.
    """
    if side_a.side == side_b.side or not side_a.players or not side_b.players:
        return invalid_format(side_a, side_b)

    results = compare_holes(side_a, side_b, hole_count, stroke_allowances)
    won_a = results[-1].holes_won_a if results else 0
    won_b = results[-1].holes_won_b if results else 0
    # furthest two-sided hole, not a count: sparse data can leave gaps
    holes_played = results[-1].hole_number if results else 0
    leader, label = status_for(won_a, won_b, holes_played)

    return MatchState(
        status=MatchStatus.IN_PROGRESS if holes_played else MatchStatus.NOT_STARTED,
        holes_won_a=won_a,
        holes_won_b=won_b,
        holes_played=holes_played,
        status_label=label,
        leader=leader,
        side_a=side_a.side,
        side_b=side_b.side,
        hole_results=results,
    )


def score_scorecards(
    cards: Iterable[PlayerScorecard],
    hole_count: int = HOLES_PER_ROUND,
    stroke_allowances: Optional[StrokeAllowances] = None,
) -> MatchState:
    """Score a match given as a flat list of player scorecards."""
    sideups = group_sideups(cards)
    if len(sideups) != 2:
        return invalid_format(
            sideups[0] if sideups else None,
            sideups[1] if len(sideups) > 1 else None,
        )
    return score_match(sideups[0], sideups[1], hole_count, stroke_allowances)


def score_round(
    cards_by_match: Mapping[str, Iterable[PlayerScorecard]],
    hole_count: int = HOLES_PER_ROUND,
) -> Dict[str, MatchState]:
    """Score every match of a round for the live board."""
    return {
        match_id: score_scorecards(cards, hole_count)
        for match_id, cards in cards_by_match.items()
    }


def handicap_allowances(cards: Iterable[PlayerScorecard]) -> Dict[str, Dict[int, int]]:
    """Net-play stroke allowances from the starting handicaps on the scorecards."""
    cards = list(cards)
    handicaps = {c.player_id: c.handicap for c in cards if c.handicap is not None}
    stroke_indexes: Dict[int, int] = {}
    for card in cards:
        stroke_indexes.update(card.stroke_indexes())
    return stroke_allowances(handicaps, stroke_indexes)
