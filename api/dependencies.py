from fastapi import Request

from api.sessions import RoundRegistry
from database.store import ClubSetStore


def get_club_store(request: Request) -> ClubSetStore:
    """FastAPI dependency that provides the club set store."""
    return request.app.state.club_store


def get_rounds(request: Request) -> RoundRegistry:
    """FastAPI dependency that provides the rounds in progress."""
    return request.app.state.rounds
