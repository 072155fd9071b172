import logging
from typing import Dict, Optional, Protocol

from caddie.club_config import default_club_set
from models import ClubSet
from database.converters import club_set_from_json, club_set_to_json
from database.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class ClubSetStore(Protocol):
    """Interface for persisting a user's club set.

    ClubSetRepositoryDB and InMemoryClubSetStore both satisfy it.
    """

    async def load_clubs(self, user_id: str) -> Optional[ClubSet]:
        """Return the saved set, or None if absent or unreadable."""
        ...

    async def save_clubs(self, user_id: str, clubs: ClubSet) -> ClubSet:
        ...

    async def delete_clubs(self, user_id: str) -> None:
        """Raise NotFoundError when nothing is saved."""
        ...


class InMemoryClubSetStore:
    """Keeps serialized club sets per user. Used when no database is configured."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def load_clubs(self, user_id: str) -> Optional[ClubSet]:
        return club_set_from_json(self._data.get(user_id))

    async def save_clubs(self, user_id: str, clubs: ClubSet) -> ClubSet:
        self._data[user_id] = club_set_to_json(clubs)
        return clubs

    async def delete_clubs(self, user_id: str) -> None:
        if self._data.pop(user_id, None) is None:
            raise NotFoundError(f"No club set saved for user {user_id}")


async def load_club_set_or_default(store: ClubSetStore, user_id: str) -> ClubSet:
    """Saved set for the user, falling back to the default bag."""
    clubs = await store.load_clubs(user_id)
    if clubs is None:
        logger.info("No usable saved clubs for %s, using defaults", user_id)
        return default_club_set()
    return clubs
