from .base import BaseCaddieModel
from .club import Club, ClubSet
from .coordinate import Coordinate
from .exceptions import CaddieError, InvalidModeRequest
from .hole import Hole
from .round_state import PlacementMode, RoundState

__all__ = [
    "BaseCaddieModel",
    "CaddieError",
    "Club",
    "ClubSet",
    "Coordinate",
    "Hole",
    "InvalidModeRequest",
    "PlacementMode",
    "RoundState",
]
