from pydantic import BaseModel, ConfigDict


class BaseLeagueModel(BaseModel):
    """Mutable league record. Assignments are validated like construction."""
    model_config = ConfigDict(validate_assignment=True)
