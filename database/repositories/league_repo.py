"""Reads of league-level configuration and rosters."""

import asyncpg
from typing import List, Optional
from uuid import UUID

from models import LeagueSettings
from database.converters import league_settings_from_row


class LeagueRepositoryDB:
    """Async reads for league.organizations and league.teams."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_settings(self, league_id: str) -> Optional[LeagueSettings]:
        """Handicap percentage and minimum score count for a league."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                """SELECT handicap_percentage, min_scores_to_calculate
                   FROM league.organizations WHERE id = $1""",
                UUID(league_id),
            )
            return league_settings_from_row(row) if row else None

    async def get_team_ids(self, league_id: str) -> List[str]:
        """All team ids of a league in creation order."""
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT id FROM league.teams
                   WHERE organization_id = $1
                   ORDER BY created_at, id""",
                UUID(league_id),
            )
            return [str(r["id"]) for r in rows]
