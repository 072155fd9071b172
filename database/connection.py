import asyncpg
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DatabasePool:
    """Owns the asyncpg pool behind the club set repository.

    The DSN comes from DATABASE_URL; with no DSN asyncpg falls back to the
    standard PG* environment variables.
    """

    def __init__(self, min_size: int = 1, max_size: int = 5):
        self._pool: Optional[asyncpg.Pool] = None
        self._min_size = min_size
        self._max_size = max_size

    async def initialize(self, dsn: Optional[str] = None) -> None:
        """Open the pool once at startup. Repeated calls are no-ops."""
        if self._pool is not None:
            return
        self._pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=self._min_size,
            max_size=self._max_size,
        )
        logger.info("Database pool open (%d-%d connections)", self._min_size, self._max_size)

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    @property
    def is_initialized(self) -> bool:
        return self._pool is not None

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call await db.initialize() first.")
        return self._pool

    async def health_check(self) -> bool:
        """SELECT 1 round trip."""
        try:
            async with self.pool.acquire() as conn:
                return await conn.fetchval("SELECT 1") == 1
        except (asyncpg.PostgresError, OSError) as e:
            logger.warning("Database health check failed: %s", e)
            return False


db = DatabasePool()
