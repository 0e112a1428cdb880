"""Point value type and point storage."""

from .point import Point
from .store import PointStore

__all__ = [
    "Point",
    "PointStore",
]
