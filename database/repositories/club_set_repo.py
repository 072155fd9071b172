"""CRUD operations for the caddie.club_sets table."""

import asyncpg
from typing import Optional

from models import ClubSet
from database.converters import club_set_from_row, club_set_to_row
from database.exceptions import NotFoundError


class ClubSetRepositoryDB:
    """Async CRUD for a user's saved club set (one row per user)."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def load_clubs(self, user_id: str) -> Optional[ClubSet]:
        """Get the saved set. None when absent or unreadable."""
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT * FROM caddie.club_sets WHERE user_id = $1", user_id
            )
            return club_set_from_row(row) if row else None

    async def save_clubs(self, user_id: str, clubs: ClubSet) -> ClubSet:
        """Insert or replace the user's set."""
        data = club_set_to_row(user_id, clubs)
        async with self._pool.acquire() as conn:
            await conn.execute(
                """INSERT INTO caddie.club_sets (user_id, clubs, updated_at)
                   VALUES ($1, $2::jsonb, NOW())
                   ON CONFLICT (user_id)
                   DO UPDATE SET clubs = EXCLUDED.clubs, updated_at = NOW()""",
                data["user_id"], data["clubs"],
            )
        return clubs

    async def delete_clubs(self, user_id: str) -> None:
        async with self._pool.acquire() as conn:
            result = await conn.execute(
                "DELETE FROM caddie.club_sets WHERE user_id = $1", user_id
            )
            if result == "DELETE 0":
                raise NotFoundError(f"No club set saved for user {user_id}")
