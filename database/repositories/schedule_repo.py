"""Season calendar and pairing persistence."""

import asyncpg
import logging
from typing import List, Sequence
from uuid import UUID

from engine.schedule import plan_schedule
from models import CalendarRound, PlannedRound, RoundAssignment
from database.converters import calendar_round_from_row, planned_round_to_row
from database.exceptions import IntegrityError

logger = logging.getLogger(__name__)


class ScheduleRepositoryDB:
    """Async reads/writes for league.rounds, league.matches and league.match_players."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Private helpers
    # ================================================================

    async def _fetch_calendar_rounds(self, conn, season_id: UUID) -> List[CalendarRound]:
        rows = await conn.fetch(
            """SELECT r.id, r.date, COUNT(m.id) AS match_count
               FROM league.rounds r
               LEFT JOIN league.matches m ON m.round_id = r.id
               WHERE r.season_id = $1
               GROUP BY r.id, r.date
               ORDER BY r.date""",
            season_id,
        )
        return [calendar_round_from_row(r) for r in rows]

    async def _insert_match(self, conn, round_id: UUID, team_a: str, team_b: str) -> UUID:
        """Create a match and enter every member of both teams with their handicap."""
        match_row = await conn.fetchrow(
            """INSERT INTO league.matches (round_id, format)
               VALUES ($1, 'match_play') RETURNING id""",
            round_id,
        )
        for team_id in (team_a, team_b):
            await conn.execute(
                """INSERT INTO league.match_players
                       (match_id, user_id, team_id, starting_handicap)
                   SELECT $1, lm.user_id, tm.team_id, lm.handicap
                   FROM league.team_members tm
                   JOIN league.league_members lm ON lm.id = tm.league_member_id
                   WHERE tm.team_id = $2""",
                match_row["id"], UUID(team_id),
            )
        return match_row["id"]

    # ================================================================
    # Read
    # ================================================================

    async def get_calendar_rounds(self, season_id: str) -> List[CalendarRound]:
        """Season rounds in date order with how many matches each already has."""
        async with self._pool.acquire() as conn:
            return await self._fetch_calendar_rounds(conn, UUID(season_id))

    # ================================================================
    # Write
    # ================================================================

    async def apply_schedule(self, season_id: str, team_ids: Sequence[str]) -> List[RoundAssignment]:
        """
        Fill every empty round of the season with round-robin matches.

        Runs in one transaction under a per-season advisory lock so two
        concurrent requests cannot both see a round as empty. Rounds that
        already have matches are left alone.
        """
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    await conn.execute(
                        "SELECT pg_advisory_xact_lock(hashtext($1))", season_id
                    )
                    rounds = await self._fetch_calendar_rounds(conn, UUID(season_id))
                    assignments = plan_schedule(team_ids, rounds)
                    for assignment in assignments:
                        for team_a, team_b in assignment.pairings:
                            await self._insert_match(
                                conn, UUID(assignment.round_id), team_a, team_b
                            )
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(str(e)) from e

        skipped = sum(1 for r in rounds if r.has_matches)
        if skipped:
            logger.debug("Season %s: %d rounds already had matches", season_id, skipped)
        logger.info(
            "Season %s: scheduled %d matches over %d rounds",
            season_id,
            sum(len(a.pairings) for a in assignments),
            len(assignments),
        )
        return assignments

    async def create_rounds(self, season_id: str, planned: Sequence[PlannedRound]) -> int:
        """Insert a generated season calendar. Returns the number of rounds created."""
        if not planned:
            return 0
        try:
            async with self._pool.acquire() as conn:
                async with conn.transaction():
                    await conn.executemany(
                        """INSERT INTO league.rounds
                           (season_id, course_id, date, holes_count, round_type)
                           VALUES ($1, $2, $3, $4, $5)""",
                        [planned_round_to_row(p, UUID(season_id)) for p in planned],
                    )
        except asyncpg.ForeignKeyViolationError as e:
            raise IntegrityError(str(e)) from e
        logger.info("Season %s: created %d rounds", season_id, len(planned))
        return len(planned)
