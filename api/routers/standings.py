"""Season standings endpoints."""

from fastapi import APIRouter, Depends
from typing import List

from api.dependencies import get_db
from api.schemas import StandingsRequest
from database.db_manager import DatabaseManager
from engine.standings import aggregate_standings
from models import StandingsRow

router = APIRouter()


@router.post("", response_model=List[StandingsRow])
async def compute_standings(req: StandingsRequest):
    return aggregate_standings(req.matches, req.team_ids)


@router.get("/leagues/{league_id}/seasons/{season_id}", response_model=List[StandingsRow])
async def season_standings(
    league_id: str,
    season_id: str,
    db: DatabaseManager = Depends(get_db),
):
    """Table for every team in the league from the season's completed rounds."""
    team_ids = await db.leagues.get_team_ids(league_id)
    matches = await db.matches.get_completed_season_matches(season_id)
    return aggregate_standings(matches, team_ids)
