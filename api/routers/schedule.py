"""Round-robin schedule and season calendar endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from typing import List

from api.dependencies import get_db
from api.schemas import (
    CalendarRequest,
    CreateRoundsResponse,
    PairingsRequest,
    PairingsResponse,
    ScheduleResponse,
)
from database.db_manager import DatabaseManager
from database.exceptions import IntegrityError
from engine.schedule import assign_pairings, generate_pairings, generate_season_rounds
from models import PlannedRound

logger = logging.getLogger(__name__)

router = APIRouter()


def _planned_rounds(req: CalendarRequest) -> List[PlannedRound]:
    return generate_season_rounds(
        req.start_date,
        req.end_date,
        req.weekday,
        holes_count=req.holes_count,
        rotation=req.rotation,
        course_id=req.course_id,
    )


@router.post("/pairings", response_model=PairingsResponse)
async def pairings(req: PairingsRequest):
    weeks = generate_pairings(req.team_ids)
    return PairingsResponse(weeks=weeks, assignments=assign_pairings(req.rounds, weeks))


@router.post("/calendar", response_model=List[PlannedRound])
async def calendar(req: CalendarRequest):
    return _planned_rounds(req)


@router.post("/seasons/{season_id}/rounds", response_model=CreateRoundsResponse, status_code=201)
async def create_season_rounds(
    season_id: str,
    req: CalendarRequest,
    db: DatabaseManager = Depends(get_db),
):
    try:
        created = await db.schedule.create_rounds(season_id, _planned_rounds(req))
    except IntegrityError:
        raise HTTPException(404, "Season not found")
    return CreateRoundsResponse(season_id=season_id, rounds_created=created)


@router.post(
    "/leagues/{league_id}/seasons/{season_id}/generate",
    response_model=ScheduleResponse,
)
async def generate_schedule(
    league_id: str,
    season_id: str,
    db: DatabaseManager = Depends(get_db),
):
    """Fill the season's empty rounds with round-robin matches. Safe to re-run."""
    team_ids = await db.leagues.get_team_ids(league_id)
    try:
        assignments = await db.schedule.apply_schedule(season_id, team_ids)
    except IntegrityError:
        raise HTTPException(404, "Season or team not found")
    except Exception:
        logger.exception("Schedule generation failed for season %s", season_id)
        raise HTTPException(500, "Schedule generation failed")

    return ScheduleResponse(
        season_id=season_id,
        rounds_filled=len(assignments),
        matches_created=sum(len(a.pairings) for a in assignments),
        assignments=assignments,
    )
