from typing import Optional

NO_SCORE = "-"
EVEN = "E"


def to_par(shot_count: int, par: int) -> Optional[int]:
    """Signed differential against par, None before the first shot."""
    if shot_count == 0:
        return None
    return shot_count - par


def score_label(shot_count: int, par: int) -> str:
    """Scorecard text for a hole: "-", "E", "+2", "-1"."""
    if shot_count < 0:
        raise ValueError(f"Shot count cannot be negative, got {shot_count}")
    if par < 1:
        raise ValueError(f"Par must be positive, got {par}")

    relative = to_par(shot_count, par)
    if relative is None:
        return NO_SCORE
    if relative == 0:
        return EVEN
    if relative > 0:
        return f"+{relative}"
    return str(relative)
