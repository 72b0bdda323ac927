from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import (
    LeagueRepositoryDB,
    MatchRepositoryDB,
    ScheduleRepositoryDB,
    ScoreRepositoryDB,
)
from database.exceptions import DatabaseError, NotFoundError, IntegrityError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "LeagueRepositoryDB",
    "MatchRepositoryDB",
    "ScheduleRepositoryDB",
    "ScoreRepositoryDB",
    "DatabaseError",
    "NotFoundError",
    "IntegrityError",
]
