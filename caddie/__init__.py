from .catalog import DEFAULT_HOLES, load_holes
from .club_config import (
    MIN_CONFIGURED_CLUBS,
    DistanceBand,
    apply_band,
    apply_manual_entry,
    configured_count,
    default_club_set,
    distance_bands,
    is_usable,
    range_warnings,
)
from .distance import EARTH_RADIUS_M, YARDS_PER_METER, distance_yards, haversine_m
from .recommender import Suggestion, recommend_club, suggest_for_state
from .scorecard import score_label, to_par
from .session import RoundSession, ScorecardRow

__all__ = [
    "DEFAULT_HOLES",
    "EARTH_RADIUS_M",
    "MIN_CONFIGURED_CLUBS",
    "YARDS_PER_METER",
    "DistanceBand",
    "RoundSession",
    "ScorecardRow",
    "Suggestion",
    "apply_band",
    "apply_manual_entry",
    "configured_count",
    "default_club_set",
    "distance_bands",
    "distance_yards",
    "haversine_m",
    "is_usable",
    "load_holes",
    "range_warnings",
    "recommend_club",
    "score_label",
    "suggest_for_state",
    "to_par",
]
