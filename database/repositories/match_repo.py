"""Scorecard reads for live matches and season standings."""

import asyncpg
from typing import Dict, List, Optional
from uuid import UUID

from models import PlayerScorecard, SeasonMatch
from database.converters import scorecards_by_match, season_matches_from_rows

_SCORECARD_COLUMNS = """
    mp.match_id, mp.id AS match_player_id, mp.user_id, mp.team_id,
    mp.starting_handicap, h.hole_number, h.par, h.stroke_index, s.gross_score
"""

_SCORECARD_JOINS = """
    LEFT JOIN league.scores s ON s.match_player_id = mp.id
    LEFT JOIN courses.holes h ON h.id = s.hole_id
"""


class MatchRepositoryDB:
    """Async reads that assemble PlayerScorecards from match_players and scores."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_match_scorecards(self, match_id: str) -> Optional[List[PlayerScorecard]]:
        """Scorecards for one match, or None if the match does not exist."""
        async with self._pool.acquire() as conn:
            match_row = await conn.fetchrow(
                "SELECT id FROM league.matches WHERE id = $1", UUID(match_id)
            )
            if not match_row:
                return None
            rows = await conn.fetch(
                f"""SELECT {_SCORECARD_COLUMNS}
                    FROM league.match_players mp
                    {_SCORECARD_JOINS}
                    WHERE mp.match_id = $1
                    ORDER BY mp.id, h.hole_number, s.updated_at""",
                UUID(match_id),
            )
            return scorecards_by_match(rows).get(match_id, [])

    async def get_round_scorecards(self, round_id: str) -> Dict[str, List[PlayerScorecard]]:
        """Scorecards for every match in a round, keyed by match id."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"""SELECT {_SCORECARD_COLUMNS}
                    FROM league.matches m
                    JOIN league.match_players mp ON mp.match_id = m.id
                    {_SCORECARD_JOINS}
                    WHERE m.round_id = $1
                    ORDER BY m.id, mp.id, h.hole_number, s.updated_at""",
                UUID(round_id),
            )
            return scorecards_by_match(rows)

    async def get_completed_season_matches(self, season_id: str) -> List[SeasonMatch]:
        """Every match played in a completed round of the season."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"""SELECT {_SCORECARD_COLUMNS},
                           r.status AS round_status
                    FROM league.rounds r
                    JOIN league.matches m ON m.round_id = r.id
                    JOIN league.match_players mp ON mp.match_id = m.id
                    {_SCORECARD_JOINS}
                    WHERE r.season_id = $1 AND r.status = 'completed'
                    ORDER BY r.date, m.id, mp.id, h.hole_number, s.updated_at""",
                UUID(season_id),
            )
            return season_matches_from_rows(rows)
