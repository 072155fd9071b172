import json
from pathlib import Path
from typing import List, Union

from models.hole import Hole

DEFAULT_HOLES: List[Hole] = [
    Hole(number=1, name="Hole 1", par=4, distance=410,
         tips="Avoid the bunker on the right.", geojson="/hole1.geojson"),
    Hole(number=2, name="Hole 2", par=3, distance=180,
         tips="Watch for the water hazard on the left.", geojson="/hole2.geojson"),
    Hole(number=3, name="Hole 3", par=5, distance=520,
         tips="Long par 5, keep it in the fairway.", geojson="/hole3.geojson"),
    Hole(number=4, name="Hole 4", par=4, distance=390,
         tips="Dogleg left, favor the right side off the tee.", geojson="/hole4.geojson"),
    Hole(number=5, name="Hole 5", par=4, distance=420,
         tips="Narrow fairway, accuracy is key off the tee.", geojson="/hole5.geojson"),
    Hole(number=6, name="Hole 6", par=3, distance=175,
         tips="Short par 3, watch for the bunkers around the green.", geojson="/hole6.geojson"),
]


def load_holes(path: Union[str, Path]) -> List[Hole]:
    """Read a hole catalog from a JSON list of hole objects."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [Hole.model_validate(h) for h in raw]
