from pydantic import BaseModel, ConfigDict, model_validator
from typing import Any, Tuple


class Coordinate(BaseModel):
    """A map position in decimal degrees, (longitude, latitude) order.

    Not range-checked: positions come straight from map clicks.
    """
    model_config = ConfigDict(frozen=True)

    lng: float
    lat: float

    @model_validator(mode='before')
    @classmethod
    def accept_pair(cls, data: Any) -> Any:
        # Map clients send [lng, lat]
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"Coordinate pair needs 2 values, got {len(data)}")
            return {"lng": data[0], "lat": data[1]}
        return data

    @classmethod
    def of(cls, lng: float, lat: float) -> "Coordinate":
        return cls(lng=lng, lat=lat)

    def as_pair(self) -> Tuple[float, float]:
        return (self.lng, self.lat)
