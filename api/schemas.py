"""API-specific request and response models."""

from pydantic import BaseModel, Field
from typing import List, Optional

from caddie.session import ScorecardRow
from models import Club, Coordinate, Hole, PlacementMode


class ClubSetResponse(BaseModel):
    """A club set plus its save-gate status."""
    clubs: List[Club]
    usable: bool
    configured: int
    warnings: List[str] = Field(default_factory=list)


class DistanceBandResponse(BaseModel):
    label: str
    min_yards: int
    max_yards: int
    average_yards: int


class RoundStateResponse(BaseModel):
    tee: Optional[Coordinate] = None
    flag: Optional[Coordinate] = None
    shots: List[Coordinate]
    mode: PlacementMode
    can_add_shot: bool


class RoundResponse(BaseModel):
    """A round in progress, focused on the active hole."""
    id: str
    current_index: int
    hole: Hole
    state: RoundStateResponse
    score: str


class PlaceResponse(BaseModel):
    placed: bool
    round: RoundResponse


class RecommendationResponse(BaseModel):
    distance_yards: float
    club: Optional[Club] = None


class ScorecardResponse(BaseModel):
    rows: List[ScorecardRow]
    holes_played: int
    total_strokes: Optional[int] = None
    to_par: Optional[int] = None
