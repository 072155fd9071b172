"""Load a club set JSON file into the database for one user.
    python3 data/load_clubs.py data/my_clubs.json player@example.com

The file holds a list of {name, minDistance, maxDistance, averageDistance}.
"""

import asyncio
import json
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

from caddie.club_config import MIN_CONFIGURED_CLUBS, configured_count, is_usable, range_warnings
from database.connection import DatabasePool
from database.converters import club_set_from_json
from database.db_manager import DatabaseManager


async def load_clubs(clubs_path: str, user_id: str, dsn: str = None) -> bool:
    with open(clubs_path) as f:
        clubs = club_set_from_json(json.load(f))

    if clubs is None:
        print(f"Could not read a club list from {clubs_path}")
        return False

    print(f"Loaded {len(clubs)} clubs, {configured_count(clubs)} configured")
    for warning in range_warnings(clubs):
        print(f"  WARNING: {warning}")

    if not is_usable(clubs):
        print(f"Not saved: configure at least {MIN_CONFIGURED_CLUBS} clubs")
        return False

    pool = DatabasePool()
    await pool.initialize(dsn=dsn)
    try:
        await DatabaseManager(pool.pool).clubs.save_clubs(user_id, clubs)
        print(f"Saved clubs for {user_id}")
    finally:
        await pool.close()
    return True


def main():
    if len(sys.argv) < 3:
        print("Usage: python data/load_clubs.py <clubs.json> <user_id>")
        sys.exit(1)

    load_dotenv()
    dsn = os.environ.get("DATABASE_URL")

    saved = asyncio.run(load_clubs(sys.argv[1], sys.argv[2], dsn))
    sys.exit(0 if saved else 1)


if __name__ == "__main__":
    main()
