from .league_repo import LeagueRepositoryDB
from .match_repo import MatchRepositoryDB
from .schedule_repo import ScheduleRepositoryDB
from .score_repo import ScoreRepositoryDB

__all__ = ["LeagueRepositoryDB", "MatchRepositoryDB", "ScheduleRepositoryDB", "ScoreRepositoryDB"]
