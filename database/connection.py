import asyncpg
import logging
from typing import Optional

logger = logging.getLogger(__name__)

APPLICATION_NAME = "golf-league-engine"


class DatabasePool:
    """Owns the asyncpg pool shared by every league repository."""

    def __init__(self):
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_initialized(self) -> bool:
        return self._pool is not None

    async def initialize(
        self,
        dsn: Optional[str] = None,
        *,
        min_size: int = 2,
        max_size: int = 10,
        command_timeout: float = 30.0,
    ) -> None:
        """
        Open the pool once at app startup.

        Without a DSN, asyncpg falls back to the libpq environment
        (PGHOST, PGDATABASE, PGUSER, ...). Calling again is a no-op.
        """
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
            server_settings={"application_name": APPLICATION_NAME},
        )
        logger.info("League database pool ready (min=%d, max=%d)", min_size, max_size)

    async def close(self) -> None:
        if self._pool is None:
            return
        await self._pool.close()
        self._pool = None
        logger.info("League database pool closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("Database pool not initialized; call await db.initialize() first")
        return self._pool

    async def health_check(self) -> bool:
        """SELECT 1 against the pool. False when unreachable or not initialized."""
        if self._pool is None:
            return False
        try:
            async with self._pool.acquire() as conn:
                await conn.fetchval("SELECT 1")
        except (OSError, asyncpg.PostgresError):
            logger.warning("Database health check failed", exc_info=True)
            return False
        return True


db = DatabasePool()
