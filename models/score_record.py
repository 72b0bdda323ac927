from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ScoreRecord(BaseModel):
    """One round's contribution to a player's handicap, with the tee it was played from."""
    model_config = ConfigDict(frozen=True)

    gross_score: int = Field(..., ge=1)
    override_score: Optional[int] = Field(None, ge=1)  # admin correction
    course_rating: Optional[float] = None
    slope: Optional[int] = Field(None, ge=55, le=155)

    @property
    def effective_score(self) -> int:
        """Override wins over the gross score when present."""
        if self.override_score is not None:
            return self.override_score
        return self.gross_score

    @property
    def is_resolvable(self) -> bool:
        """True when the tee rating and slope are both known."""
        return self.course_rating is not None and self.slope is not None
