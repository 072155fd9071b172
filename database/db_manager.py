import asyncpg

from database.repositories import ClubSetRepositoryDB


class DatabaseManager:
    """Groups the async repositories that share one asyncpg pool."""

    def __init__(self, pool: asyncpg.Pool) -> None:
        self.clubs = ClubSetRepositoryDB(pool)
