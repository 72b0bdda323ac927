"""Score history reads and handicap writes."""

import asyncpg
import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from models import ScoreRecord
from database.converters import score_record_from_row
from database.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ScoreRepositoryDB:
    """Async access to a player's scores and league handicap."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_recent_score_records(self, user_id: str, *, limit: int = 20) -> List[ScoreRecord]:
        """
        One ScoreRecord per completed match, most recent first.

        Hole scores are summed per match player. Only rounds marked completed
        and cards with every hole of the round scored count, so a round in
        progress never reaches the index. The inner join on tees drops rounds
        without a resolvable rating/slope. A round with any admin override
        gets an override total, overridden holes replacing gross.
        """
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT mp.id,
                          SUM(s.gross_score) AS gross_score,
                          CASE WHEN COUNT(s.score_override) > 0
                               THEN SUM(COALESCE(s.score_override, s.gross_score))
                          END AS override_score,
                          t.rating, t.slope, r.holes_count,
                          MAX(s.updated_at) AS last_updated
                   FROM league.scores s
                   JOIN league.match_players mp ON mp.id = s.match_player_id
                   JOIN league.matches m ON m.id = mp.match_id
                   JOIN league.rounds r ON r.id = m.round_id
                   JOIN courses.tees t ON t.id = mp.tee_id
                   WHERE mp.user_id = $1
                     AND r.status = 'completed'
                     AND s.gross_score IS NOT NULL
                   GROUP BY mp.id, t.rating, t.slope, r.holes_count
                   HAVING COUNT(DISTINCT s.hole_id) = r.holes_count
                   ORDER BY last_updated DESC
                   LIMIT $2""",
                UUID(user_id), limit,
            )
            return [score_record_from_row(r) for r in rows]

    async def save_handicap(self, user_id: str, league_id: str, handicap: float) -> None:
        """Store the latest index on the player's league membership."""
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                """UPDATE league.league_members SET handicap = $3
                   WHERE user_id = $1 AND organization_id = $2""",
                UUID(user_id), UUID(league_id), Decimal(repr(handicap)),
            )
            if result == "UPDATE 0":
                raise NotFoundError(
                    f"User {user_id} is not a member of league {league_id}"
                )
        logger.info("Handicap for user %s in league %s set to %.1f", user_id, league_id, handicap)
