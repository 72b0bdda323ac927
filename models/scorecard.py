from pydantic import Field
from typing import Dict, List, Mapping, Optional

from .base import BaseLeagueModel
from .hole_score import HoleScore
from .side import Side


class PlayerScorecard(BaseLeagueModel):
    """A player's hole scores for one match, tagged with the side they play for."""
    player_id: str
    side: Side
    handicap: Optional[float] = None  # starting handicap when the match was set up
    hole_scores: List[HoleScore] = Field(default_factory=list)

    def get_hole_score(self, hole_number: int) -> Optional[HoleScore]:
        """Latest score posted for the hole; a re-posted hole replaces the earlier entry."""
        for hole_score in reversed(self.hole_scores):
            if hole_score.hole_number == hole_number:
                return hole_score
        return None

    def valid_score(self, hole_number: int) -> Optional[int]:
        hole_score = self.get_hole_score(hole_number)
        if hole_score is None or not hole_score.is_valid_score:
            return None
        return hole_score.gross_score

    def stroke_indexes(self) -> Dict[int, int]:
        """Map hole_number -> stroke index for holes that carry one."""
        return {
            hs.hole_number: hs.stroke_index
            for hs in self.hole_scores
            if hs.stroke_index is not None
        }


class TeamSideup(BaseLeagueModel):
    """All players competing for one side of a match."""
    side: Side
    players: List[PlayerScorecard] = Field(default_factory=list)

    def best_ball(
        self,
        hole_number: int,
        stroke_allowances: Optional[Mapping[str, Mapping[int, int]]] = None,
    ) -> Optional[int]:
        """
        Lowest valid score among the side's players on a hole, or None.

        Validity is judged on the gross score. With stroke_allowances
        ({player_id: {hole_number: strokes}}) the compared score is net.
        """
        scores = []
        for player in self.players:
            gross = player.valid_score(hole_number)
            if gross is None:
                continue
            strokes = 0
            if stroke_allowances:
                strokes = stroke_allowances.get(player.player_id, {}).get(hole_number, 0)
            scores.append(gross - strokes)
        return min(scores) if scores else None
