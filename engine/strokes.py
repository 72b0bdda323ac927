"""Stroke allocation for handicap match play."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Mapping, Optional

HOLES_PER_CYCLE = 18


def calculate_match_strokes(handicap_a: float, handicap_b: float) -> float:
    """Strokes the higher handicap receives from the lower one."""
    return abs(handicap_b - handicap_a)


def strokes_for_hole(total_strokes: float, stroke_index: int) -> Optional[int]:
    """
    Strokes received on a hole of the given stroke index (1 = hardest).

    Allowances above 18 cycle: 20 strokes means one everywhere plus a second
    on stroke indexes 1 and 2. Returns None for a stroke index outside 1..18.
    """
    if not 1 <= stroke_index <= HOLES_PER_CYCLE:
        return None
    full_cycles, remainder = divmod(total_strokes, HOLES_PER_CYCLE)
    return int(full_cycles) + (1 if stroke_index <= remainder else 0)


def allocate_strokes(total_strokes: float, stroke_indexes: Mapping[int, int]) -> Dict[int, int]:
    """Spread an allowance over holes given as {hole_number: stroke_index}."""
    allocation: Dict[int, int] = {}
    for hole_number, stroke_index in stroke_indexes.items():
        strokes = strokes_for_hole(total_strokes, stroke_index)
        if strokes is not None:
            allocation[hole_number] = strokes
    return allocation


def whole_strokes(value: float) -> int:
    """Round a handicap difference to whole strokes, halves up."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def stroke_allowances(
    handicaps: Mapping[str, float],
    stroke_indexes: Mapping[int, int],
) -> Dict[str, Dict[int, int]]:
    """
    Per-player hole allocations, played off the lowest handicap in the match.

    The low player receives nothing; everyone else receives the rounded
    difference to the low handicap.
    """
    if not handicaps:
        return {}
    low = min(handicaps.values())
    return {
        player_id: allocate_strokes(
            whole_strokes(calculate_match_strokes(low, handicap)), stroke_indexes
        )
        for player_id, handicap in handicaps.items()
    }
