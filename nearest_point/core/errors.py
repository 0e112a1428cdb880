"""Exception types raised by the point store and the reduction."""

from typing import Optional


class NearestPointError(Exception):
    """Base class for all nearest_point errors."""


class IndexOutOfRange(NearestPointError, IndexError):
    """An index outside ``[0, N)`` was passed to a PointStore."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"index {index} out of range for store of size {size}")
        self.index = index
        self.size = size


class InvalidCoordinate(NearestPointError, ValueError):
    """A NaN or infinite coordinate reached the distance computation.

    Attributes:
        index: Index of the offending stored point, or None for the query.
        coords: The offending coordinates.
    """

    def __init__(self, index: Optional[int], coords: tuple) -> None:
        where = "query point" if index is None else f"point {index}"
        super().__init__(f"non-finite coordinate in {where}: {coords}")
        self.index = index
        self.coords = coords
