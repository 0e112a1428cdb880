import math
from dataclasses import dataclass

from nearest_point.core.fwd import Array3


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_array(self) -> Array3:
        # width-1 array, broadcasts against a store's points
        return Array3(self.x, self.y, self.z)
