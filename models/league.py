from pydantic import Field

from .base import BaseLeagueModel


class LeagueSettings(BaseLeagueModel):
    """Per-league handicap configuration."""
    adjustment_percentage: float = Field(1.0, gt=0, le=1)  # e.g. 0.90 for a 90% league
    minimum_scores_to_calculate: int = Field(3, ge=0)
