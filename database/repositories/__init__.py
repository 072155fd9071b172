from .club_set_repo import ClubSetRepositoryDB

__all__ = ["ClubSetRepositoryDB"]
