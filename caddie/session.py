from pydantic import Field, model_validator
from typing import Dict, List, Optional

from models.base import BaseCaddieModel
from models.hole import Hole
from models.round_state import RoundState

from .scorecard import score_label


class ScorecardRow(BaseCaddieModel):
    number: int
    par: int
    strokes: int
    label: str


class RoundSession(BaseCaddieModel):
    """A round across the catalog: the active hole and its RoundState,
    plus stroke counts for holes already left.

    Changing hole always starts a fresh RoundState.
    """
    id: Optional[str] = None
    holes: List[Hole] = Field(..., min_length=1)
    current_index: int = 0
    state: RoundState = Field(default_factory=RoundState)
    strokes: Dict[int, int] = Field(default_factory=dict)  # {hole number: shots}

    @model_validator(mode='after')
    def validate_current_index(self):
        if not 0 <= self.current_index < len(self.holes):
            raise ValueError(
                f"Hole index {self.current_index} out of range (0-{len(self.holes) - 1})"
            )
        return self

    @property
    def current_hole(self) -> Hole:
        return self.holes[self.current_index]

    def select_hole(self, index: int) -> Hole:
        """Leave the active hole (recording its shots) and start another."""
        if not 0 <= index < len(self.holes):
            raise IndexError(f"Hole index {index} out of range (0-{len(self.holes) - 1})")
        if self.state.shot_count:
            self.strokes = {**self.strokes, self.current_hole.number: self.state.shot_count}
        self.current_index = index
        self.state = RoundState()
        return self.current_hole

    def reset_hole(self) -> None:
        self.state.reset()

    def strokes_for(self, hole: Hole) -> int:
        """Live count for the active hole, recorded count for the rest."""
        if hole.number == self.current_hole.number and self.state.shot_count:
            return self.state.shot_count
        return self.strokes.get(hole.number, 0)

    def scorecard(self) -> List[ScorecardRow]:
        rows = []
        for hole in self.holes:
            strokes = self.strokes_for(hole)
            rows.append(ScorecardRow(
                number=hole.number,
                par=hole.par,
                strokes=strokes,
                label=score_label(strokes, hole.par),
            ))
        return rows
