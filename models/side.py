from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Union


class TeamSide(BaseModel):
    """A match side made of a league team's players."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["team"] = "team"
    team_id: str


class IndividualSide(BaseModel):
    """Pseudo-team for a player with no team assignment in the match."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["individual"] = "individual"
    player_id: str


Side = Annotated[Union[TeamSide, IndividualSide], Field(discriminator="kind")]


def side_for(player_id: str, team_id: Optional[str] = None) -> Union[TeamSide, IndividualSide]:
    """Pick the side a player plays for: their team, or themselves when unassigned."""
    if team_id:
        return TeamSide(team_id=team_id)
    return IndividualSide(player_id=player_id)
