from pydantic import Field
from typing import Optional

from .base import BaseLeagueModel


class HoleScore(BaseLeagueModel):
    """Represents a player's gross score on a single hole."""

    hole_number: int = Field(..., ge=1, le=18)
    par: Optional[int] = Field(None, ge=3, le=6)
    stroke_index: Optional[int] = Field(None, ge=1, le=18)  # 1 = hardest hole
    gross_score: Optional[int] = None

    @property
    def is_valid_score(self) -> bool:
        """A score counts for match play only when present and positive."""
        return self.gross_score is not None and self.gross_score > 0

