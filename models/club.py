from pydantic import Field
from typing import Any, Dict, Iterator, List, Optional

from .base import BaseCaddieModel


class Club(BaseCaddieModel):
    """A club in the bag with its carry range in yards.

    Aliases match the stored record format (minDistance, ...).
    """
    name: str = Field(..., min_length=1)
    min_distance: float = Field(0, ge=0, alias="minDistance")
    max_distance: float = Field(0, ge=0, alias="maxDistance")
    average_distance: float = Field(0, ge=0, alias="averageDistance")

    @property
    def is_configured(self) -> bool:
        return self.average_distance > 0

    def to_record(self) -> Dict[str, Any]:
        """Club -> persisted record with camelCase keys."""
        return self.model_dump(by_alias=True)


class ClubSet(BaseCaddieModel):
    """Ordered clubs. Order is insertion order and only matters for tie-breaks."""
    clubs: List[Club] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Club]:
        return iter(self.clubs)

    def __len__(self) -> int:
        return len(self.clubs)

    def __getitem__(self, index: int) -> Club:
        return self.clubs[index]

    def configured(self) -> List[Club]:
        """Clubs with an average distance set."""
        return [c for c in self.clubs if c.is_configured]

    def get(self, name: str) -> Optional[Club]:
        """Get a club by name (case-insensitive)."""
        for club in self.clubs:
            if club.name.lower() == name.lower():
                return club
        return None

    def replace(self, index: int, club: Club) -> "ClubSet":
        """Return a new set with the club at `index` swapped out."""
        if not 0 <= index < len(self.clubs):
            raise IndexError(f"Club index {index} out of range (0-{len(self.clubs) - 1})")
        clubs = list(self.clubs)
        clubs[index] = club
        return ClubSet(clubs=clubs)

    def to_records(self) -> List[Dict[str, Any]]:
        return [c.to_record() for c in self.clubs]

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "ClubSet":
        return cls(clubs=[Club.model_validate(r) for r in records])
