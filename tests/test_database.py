import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from database.connection import DatabasePool
from database.converters import (
    club_set_from_json,
    club_set_from_row,
    club_set_to_json,
    club_set_to_row,
)
from database.exceptions import NotFoundError
from database.repositories.club_set_repo import ClubSetRepositoryDB
from database.store import InMemoryClubSetStore, load_club_set_or_default
from models import Club, ClubSet


# ================================================================
# Fixtures
# ================================================================

@pytest.fixture
def mock_pool():
    pool = MagicMock()
    conn = AsyncMock()
    pool.acquire.return_value.__aenter__.return_value = conn
    return pool, conn


def _clubs() -> ClubSet:
    return ClubSet(clubs=[
        Club(name="Driver", min_distance=230, max_distance=240, average_distance=235),
        Club(name="7 Iron", min_distance=150, max_distance=160, average_distance=155),
        Club(name="PW", min_distance=110, max_distance=120, average_distance=115),
    ])


# ================================================================
# converters.py: pure function tests (no mocks needed)
# ================================================================

def test_club_set_to_json_uses_stored_field_names():
    records = json.loads(club_set_to_json(_clubs()))
    assert records[0] == {
        "name": "Driver", "minDistance": 230.0, "maxDistance": 240.0, "averageDistance": 235.0,
    }


def test_club_set_from_json_accepts_text_and_lists():
    text = club_set_to_json(_clubs())
    assert club_set_from_json(text) == _clubs()
    assert club_set_from_json(json.loads(text)) == _clubs()
    assert club_set_from_json("[]") == ClubSet()


@pytest.mark.parametrize("raw", [
    None,
    "",
    "{not json",
    '{"name": "Driver"}',                                # object, not a list
    '[{"minDistance": 10}]',                             # missing name
    '[{"name": "PW", "averageDistance": -20}]',          # negative distance
    '[1, 2, 3]',
])
def test_club_set_from_json_malformed_reads_as_absent(raw):
    assert club_set_from_json(raw) is None


def test_club_set_row_converters():
    row = club_set_to_row("player-1", _clubs())
    assert row["user_id"] == "player-1"
    assert json.loads(row["clubs"])[1]["name"] == "7 Iron"

    assert club_set_from_row({"user_id": "player-1", "clubs": row["clubs"]}) == _clubs()
    assert club_set_from_row({"user_id": "player-1", "clubs": "garbage"}) is None


# ================================================================
# ClubSetRepositoryDB
# ================================================================

@pytest.mark.asyncio
async def test_repo_load_clubs(mock_pool):
    pool, conn = mock_pool
    repo = ClubSetRepositoryDB(pool)
    conn.fetchrow.return_value = {"user_id": "player-1", "clubs": club_set_to_json(_clubs())}

    clubs = await repo.load_clubs("player-1")
    assert clubs == _clubs()
    assert conn.fetchrow.call_args.args[1] == "player-1"


@pytest.mark.asyncio
async def test_repo_load_clubs_not_found(mock_pool):
    pool, conn = mock_pool
    repo = ClubSetRepositoryDB(pool)
    conn.fetchrow.return_value = None

    assert await repo.load_clubs("nobody") is None


@pytest.mark.asyncio
async def test_repo_load_clubs_malformed(mock_pool):
    pool, conn = mock_pool
    repo = ClubSetRepositoryDB(pool)
    conn.fetchrow.return_value = {"user_id": "player-1", "clubs": '{"oops": true}'}

    assert await repo.load_clubs("player-1") is None


@pytest.mark.asyncio
async def test_repo_save_clubs_upserts(mock_pool):
    pool, conn = mock_pool
    repo = ClubSetRepositoryDB(pool)

    saved = await repo.save_clubs("player-1", _clubs())
    assert saved == _clubs()

    sql, user_id, payload = conn.execute.call_args.args
    assert "ON CONFLICT (user_id)" in sql
    assert user_id == "player-1"
    assert club_set_from_json(payload) == _clubs()


@pytest.mark.asyncio
async def test_repo_delete_clubs(mock_pool):
    pool, conn = mock_pool
    repo = ClubSetRepositoryDB(pool)

    conn.execute.return_value = "DELETE 1"
    await repo.delete_clubs("player-1")

    conn.execute.return_value = "DELETE 0"
    with pytest.raises(NotFoundError):
        await repo.delete_clubs("player-1")


# ================================================================
# InMemoryClubSetStore / defaults
# ================================================================

@pytest.mark.asyncio
async def test_in_memory_store_round_trip():
    store = InMemoryClubSetStore()
    assert await store.load_clubs("player-1") is None

    await store.save_clubs("player-1", _clubs())
    assert await store.load_clubs("player-1") == _clubs()

    await store.delete_clubs("player-1")
    assert await store.load_clubs("player-1") is None
    with pytest.raises(NotFoundError):
        await store.delete_clubs("player-1")


@pytest.mark.asyncio
async def test_load_or_default_falls_back():
    store = InMemoryClubSetStore({"broken": "not json at all"})

    clubs = await load_club_set_or_default(store, "broken")
    assert len(clubs) == 13
    assert clubs[0].name == "Driver"

    clubs = await load_club_set_or_default(store, "missing")
    assert len(clubs) == 13


@pytest.mark.asyncio
async def test_load_or_default_prefers_saved():
    store = InMemoryClubSetStore()
    await store.save_clubs("player-1", _clubs())
    assert await load_club_set_or_default(store, "player-1") == _clubs()


# ================================================================
# DatabasePool
# ================================================================

@pytest.mark.asyncio
async def test_pool_lifecycle(monkeypatch):
    fake_pool = MagicMock()
    fake_pool.close = AsyncMock()
    conn = AsyncMock()
    fake_pool.acquire.return_value.__aenter__.return_value = conn
    create_pool = AsyncMock(return_value=fake_pool)
    monkeypatch.setattr("database.connection.asyncpg.create_pool", create_pool)

    pool = DatabasePool()
    with pytest.raises(RuntimeError):
        pool.pool

    await pool.initialize("postgresql://localhost/ai_caddie")
    await pool.initialize("postgresql://localhost/ai_caddie")
    create_pool.assert_awaited_once()

    conn.fetchval.return_value = 1
    assert await pool.health_check() is True

    conn.fetchval.side_effect = OSError("connection refused")
    assert await pool.health_check() is False

    await pool.close()
    fake_pool.close.assert_awaited_once()
    assert not pool.is_initialized
