from __future__ import annotations

from typing import Dict, List, Optional

from caddie.distance import distance_yards
from caddie.session import RoundSession
from models.round_state import RoundState


def shot_distances(state: RoundState) -> List[float]:
    """Yards covered by each shot: tee -> shot 1 -> shot 2 ...

    Empty until the tee is placed.
    """
    if state.tee is None:
        return []
    legs: List[float] = []
    previous = state.tee
    for shot in state.shots:
        legs.append(distance_yards(previous, shot))
        previous = shot
    return legs


def remaining_to_flag(state: RoundState) -> Optional[float]:
    """Yards from the ball to the flag, None until both are known."""
    origin = state.ball_position
    if origin is None or state.flag is None:
        return None
    return distance_yards(origin, state.flag)


def hole_summary(state: RoundState) -> Dict[str, Optional[float]]:
    """Compute shot metrics for the hole in progress."""
    legs = shot_distances(state)
    return {
        "shots": float(state.shot_count),
        "total_yards": sum(legs) if legs else None,
        "longest_shot": max(legs) if legs else None,
        "average_shot": sum(legs) / len(legs) if legs else None,
        "remaining_yards": remaining_to_flag(state),
    }


def round_summary(session: RoundSession) -> Dict[str, Optional[int]]:
    """Totals across holes with at least one shot."""
    played = [
        (hole, session.strokes_for(hole))
        for hole in session.holes
        if session.strokes_for(hole) > 0
    ]
    if not played:
        return {"holes_played": 0, "total_strokes": None, "total_par": None, "to_par": None}

    total_strokes = sum(strokes for _, strokes in played)
    total_par = sum(hole.par for hole, _ in played)
    return {
        "holes_played": len(played),
        "total_strokes": total_strokes,
        "total_par": total_par,
        "to_par": total_strokes - total_par,
    }
