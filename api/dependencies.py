from fastapi import HTTPException, Request

from database.db_manager import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """League repositories bound to the app's pool. 503 until startup has run."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise HTTPException(503, "Database not available")
    return manager
