"""Live match-play endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_db
from api.schemas import RoundBoardResponse, ScoreMatchRequest
from database.db_manager import DatabaseManager
from engine.match_play import handicap_allowances, score_round, score_scorecards
from models import MatchState

router = APIRouter()


@router.post("/score", response_model=MatchState)
async def score_match(req: ScoreMatchRequest):
    """Score scorecards posted directly (no storage involved)."""
    allowances = handicap_allowances(req.scorecards) if req.net else None
    return score_scorecards(req.scorecards, req.hole_count, allowances)


@router.get("/rounds/{round_id}", response_model=RoundBoardResponse)
async def round_board(round_id: str, db: DatabaseManager = Depends(get_db)):
    cards_by_match = await db.matches.get_round_scorecards(round_id)
    return RoundBoardResponse(round_id=round_id, matches=score_round(cards_by_match))


@router.get("/{match_id}", response_model=MatchState)
async def get_match_state(
    match_id: str,
    net: bool = Query(False),
    db: DatabaseManager = Depends(get_db),
):
    cards = await db.matches.get_match_scorecards(match_id)
    if cards is None:
        raise HTTPException(404, "Match not found")
    allowances = handicap_allowances(cards) if net else None
    return score_scorecards(cards, stroke_allowances=allowances)
