"""Single entry point bundling the league repositories over one pool."""

import asyncpg

from database.repositories import (
    LeagueRepositoryDB,
    MatchRepositoryDB,
    ScheduleRepositoryDB,
    ScoreRepositoryDB,
)


class DatabaseManager:
    """
    Async data-access layer handed to API routes.

    Notes:
    - Repositories use raw SQL (no ORM) to keep behavior explicit.
    - All of them share the asyncpg pool owned by `database.connection.db`.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self.pool = pool
        self.leagues = LeagueRepositoryDB(pool)
        self.scores = ScoreRepositoryDB(pool)
        self.matches = MatchRepositoryDB(pool)
        self.schedule = ScheduleRepositoryDB(pool)
