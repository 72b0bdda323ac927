"""FastAPI application for the golf league competition engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from database.connection import db
from database.db_manager import DatabaseManager


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool on startup, close on shutdown."""
    await db.initialize(dsn=get_settings().database_url)
    app.state.db_manager = DatabaseManager(db.pool)
    yield
    await db.close()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Golf League API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import handicaps, matches, schedule, standings
    app.include_router(handicaps.router, prefix="/api/handicaps", tags=["handicaps"])
    app.include_router(matches.router, prefix="/api/matches", tags=["matches"])
    app.include_router(standings.router, prefix="/api/standings", tags=["standings"])
    app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
