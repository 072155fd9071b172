from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import ClubSetRepositoryDB
from database.store import ClubSetStore, InMemoryClubSetStore, load_club_set_or_default
from database.exceptions import DatabaseError, NotFoundError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "ClubSetRepositoryDB",
    "ClubSetStore",
    "InMemoryClubSetStore",
    "load_club_set_or_default",
    "DatabaseError",
    "NotFoundError",
]
