from typing import Iterable, Optional

from pydantic import BaseModel

from models.club import Club
from models.round_state import RoundState

from .distance import distance_yards


class Suggestion(BaseModel):
    """Distance to the flag from the ball and the club for it."""
    distance_yards: float
    club: Optional[Club] = None


def recommend_club(target_yards: float, clubs: Iterable[Club]) -> Optional[Club]:
    """Pick the club with the smallest average that still reaches the target.

    When nothing reaches, fall back to the longest club. Ties go to the
    first club in order. Returns None for an empty set.
    """
    shortest_reaching: Optional[Club] = None
    longest: Optional[Club] = None
    for club in clubs:
        avg = club.average_distance
        if avg >= target_yards:
            if shortest_reaching is None or avg < shortest_reaching.average_distance:
                shortest_reaching = club
        if longest is None or avg > longest.average_distance:
            longest = club
    return shortest_reaching if shortest_reaching is not None else longest


def suggest_for_state(state: RoundState, clubs: Iterable[Club]) -> Optional[Suggestion]:
    """Distance from the ball (last shot, else tee) to the flag, plus a club
    picked from the clubs that have a distance set.

    None until both tee and flag are placed.
    """
    origin = state.ball_position
    if origin is None or state.flag is None:
        return None
    yards = distance_yards(origin, state.flag)
    configured = [c for c in clubs if c.is_configured]
    return Suggestion(distance_yards=yards, club=recommend_club(yards, configured))
