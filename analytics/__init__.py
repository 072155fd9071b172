from .stats import (
    hole_summary,
    remaining_to_flag,
    round_summary,
    shot_distances,
)

__all__ = [
    "hole_summary",
    "remaining_to_flag",
    "round_summary",
    "shot_distances",
]
