"""Handicap calculator endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_db
from api.schemas import (
    DifferentialRequest,
    DifferentialResponse,
    HandicapIndexRequest,
    HandicapIndexResponse,
    RecalculateResponse,
    StrokesRequest,
    StrokesResponse,
)
from config import Settings, get_settings
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from engine.handicap import (
    calculate_differential,
    calculate_handicap_index,
    calculate_player_handicap,
    count_to_average,
)
from engine.strokes import allocate_strokes, calculate_match_strokes, whole_strokes
from models import Leader

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/differential", response_model=DifferentialResponse)
async def differential(req: DifferentialRequest):
    return DifferentialResponse(
        differential=calculate_differential(req.score, req.course_rating, req.slope)
    )


@router.post("/index", response_model=HandicapIndexResponse)
async def handicap_index(req: HandicapIndexRequest):
    return HandicapIndexResponse(
        handicap_index=calculate_handicap_index(req.differentials, req.adjustment_percentage),
        differentials_used=count_to_average(len(req.differentials)),
    )


@router.post("/strokes", response_model=StrokesResponse)
async def match_strokes(req: StrokesRequest):
    strokes = calculate_match_strokes(req.handicap_a, req.handicap_b)
    receiver = None
    if req.handicap_a > req.handicap_b:
        receiver = Leader.A
    elif req.handicap_b > req.handicap_a:
        receiver = Leader.B
    return StrokesResponse(
        match_strokes=strokes,
        receiver=receiver,
        allocation=allocate_strokes(whole_strokes(strokes), req.stroke_indexes),
    )


@router.post(
    "/players/{user_id}/leagues/{league_id}/recalculate",
    response_model=RecalculateResponse,
)
async def recalculate_player_handicap(
    user_id: str,
    league_id: str,
    db: DatabaseManager = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Recompute a player's index from their recent rounds and store it."""
    league = await db.leagues.get_settings(league_id)
    if not league:
        raise HTTPException(404, "League not found")

    records = await db.scores.get_recent_score_records(
        user_id, limit=settings.handicap_window
    )
    index = calculate_player_handicap(records, league, window=settings.handicap_window)
    if index is None:
        return RecalculateResponse(
            user_id=user_id,
            league_id=league_id,
            scores_used=len(records),
            updated=False,
        )

    try:
        await db.scores.save_handicap(user_id, league_id, index)
    except NotFoundError:
        raise HTTPException(404, "League membership not found")
    except Exception:
        logger.exception("Failed to save handicap for user %s", user_id)
        raise HTTPException(500, "Handicap update failed")

    return RecalculateResponse(
        user_id=user_id,
        league_id=league_id,
        handicap_index=index,
        scores_used=len(records),
        updated=True,
    )
