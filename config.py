"""Service settings read from the environment (and a local .env file)."""

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    database_url: Optional[str] = None
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    handicap_window: int = Field(20, ge=1)


def _split_origins(raw: Optional[str]) -> Optional[List[str]]:
    if not raw:
        return None
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Build settings once per process; unset variables fall back to defaults."""
    values = {
        "database_url": os.environ.get("DATABASE_URL"),
        "log_level": os.environ.get("LOG_LEVEL"),
        "cors_origins": _split_origins(os.environ.get("CORS_ORIGINS")),
        "handicap_window": os.environ.get("HANDICAP_WINDOW"),
    }
    return Settings(**{k: v for k, v in values.items() if v is not None})
