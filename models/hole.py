from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Hole(BaseModel):
    """A hole from the course catalog. Read-only to the engine."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    name: str
    par: int = Field(..., gt=0)
    distance: float = Field(..., gt=0)  # yards
    tips: str = ""
    geojson: Optional[str] = None  # boundary file, drawn by the map client
