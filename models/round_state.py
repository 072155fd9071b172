import logging
from enum import Enum
from pydantic import Field
from typing import Optional, Tuple

from .base import BaseCaddieModel
from .coordinate import Coordinate
from .exceptions import InvalidModeRequest

logger = logging.getLogger(__name__)


class PlacementMode(str, Enum):
    """What the next map tap places."""
    NONE = "none"   # taps are ignored
    TEE = "tee"
    FLAG = "flag"
    SHOT = "shot"


class RoundState(BaseCaddieModel):
    """Tee, flag, shots and placement mode for the hole being played.

    Mutate only through the transition methods. Every placement consumes
    the mode (back to NONE). `shots` is a tuple and only ever grows by
    append or is cleared by reset().
    """
    tee: Optional[Coordinate] = None
    flag: Optional[Coordinate] = None
    shots: Tuple[Coordinate, ...] = Field(default_factory=tuple)
    mode: PlacementMode = PlacementMode.NONE

    @property
    def can_add_shot(self) -> bool:
        return self.tee is not None and self.flag is not None

    @property
    def shot_count(self) -> int:
        return len(self.shots)

    @property
    def ball_position(self) -> Optional[Coordinate]:
        """Where the next shot is played from: last shot, else the tee."""
        if self.shots:
            return self.shots[-1]
        return self.tee

    def request_mode(self, mode: PlacementMode) -> None:
        """Arm the next tap. Shot mode needs both tee and flag."""
        mode = PlacementMode(mode)
        if mode is PlacementMode.SHOT and not self.can_add_shot:
            logger.info("Rejected shot mode: tee=%s flag=%s", self.tee, self.flag)
            raise InvalidModeRequest("Set the tee and flag before adding shots")
        self.mode = mode

    def toggle_shot_mode(self) -> PlacementMode:
        """Add Shot / Cancel Shot button."""
        if self.mode is PlacementMode.SHOT:
            self.mode = PlacementMode.NONE
        else:
            self.request_mode(PlacementMode.SHOT)
        return self.mode

    def set_tee(self, coordinate: Coordinate) -> None:
        self.tee = coordinate
        self.mode = PlacementMode.NONE

    def set_flag(self, coordinate: Coordinate) -> None:
        self.flag = coordinate
        self.mode = PlacementMode.NONE

    def add_shot(self, coordinate: Coordinate) -> None:
        """Append a shot. Callers only invoke this in SHOT mode; not re-checked."""
        self.shots = self.shots + (coordinate,)
        self.mode = PlacementMode.NONE

    def place(self, coordinate: Coordinate) -> bool:
        """Apply a map tap according to the current mode.

        Returns False (and changes nothing) when no mode is armed.
        """
        if self.mode is PlacementMode.TEE:
            self.set_tee(coordinate)
        elif self.mode is PlacementMode.FLAG:
            self.set_flag(coordinate)
        elif self.mode is PlacementMode.SHOT:
            self.add_shot(coordinate)
        else:
            return False
        return True

    def reset(self) -> None:
        self.tee = None
        self.flag = None
        self.shots = ()
        self.mode = PlacementMode.NONE
