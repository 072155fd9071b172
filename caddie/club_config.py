"""Club set configuration: the save gate, quick-select distance bands,
free-form entry, and the default bag.

A set is usable once at least MIN_CONFIGURED_CLUBS of its clubs carry an
average distance. Under-configured sets can still be edited; they just
can't be saved as the active set.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field

from models.club import Club, ClubSet

MIN_CONFIGURED_CLUBS = 3
BAND_WIDTH_YARDS = 10
MAX_BAND_YARDS = 300

DEFAULT_CLUB_NAMES = [
    "Driver",
    "3 Wood",
    "5 Wood",
    "4 Iron",
    "5 Iron",
    "6 Iron",
    "7 Iron",
    "8 Iron",
    "9 Iron",
    "PW",
    "GW",
    "SW",
    "LW",
]


class DistanceBand(BaseModel):
    """A quick-select range [min_yards, max_yards)."""
    min_yards: int = Field(..., ge=0)
    max_yards: int = Field(..., gt=0)

    @property
    def label(self) -> str:
        return f"{self.min_yards}-{self.max_yards} yards"

    @property
    def midpoint(self) -> int:
        # half-up
        return int((self.min_yards + self.max_yards) / 2 + 0.5)


def distance_bands() -> List[DistanceBand]:
    """All 10-yard bands from 0 to 300 yards."""
    return [
        DistanceBand(min_yards=low, max_yards=low + BAND_WIDTH_YARDS)
        for low in range(0, MAX_BAND_YARDS, BAND_WIDTH_YARDS)
    ]


def configured_count(clubs: Iterable[Club]) -> int:
    """Number of clubs in the set with an average distance."""
    return sum(1 for c in clubs if c.is_configured)


def is_usable(clubs: Iterable[Club]) -> bool:
    """Save gate: at least three configured clubs."""
    return configured_count(clubs) >= MIN_CONFIGURED_CLUBS


def apply_band(club: Club, band: DistanceBand) -> Club:
    """Set a club's range from a band, average at the rounded midpoint."""
    return club.validated_copy(
        min_distance=band.min_yards,
        max_distance=band.max_yards,
        average_distance=band.midpoint,
    )


def apply_manual_entry(
    club: Club,
    min_distance: float,
    max_distance: float,
    average_distance: float,
) -> Club:
    """Set the three distances as entered. Ordering is not enforced;
    see range_warnings() for what a UI should flag."""
    return club.validated_copy(
        min_distance=min_distance,
        max_distance=max_distance,
        average_distance=average_distance,
    )


def range_warnings(clubs: Iterable[Club]) -> List[str]:
    """Inconsistent ranges, reported for display but never rejected."""
    warnings: List[str] = []
    for club in clubs:
        if not club.is_configured:
            continue
        if club.min_distance > club.max_distance:
            warnings.append(
                f"{club.name}: min ({club.min_distance:g}) exceeds max ({club.max_distance:g})"
            )
        elif not club.min_distance <= club.average_distance <= club.max_distance:
            warnings.append(
                f"{club.name}: average ({club.average_distance:g}) outside "
                f"{club.min_distance:g}-{club.max_distance:g}"
            )
    return warnings


def default_club_set() -> ClubSet:
    """The standard 13-club bag, nothing configured yet."""
    return ClubSet(clubs=[Club(name=name) for name in DEFAULT_CLUB_NAMES])
