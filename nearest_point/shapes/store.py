"""Immutable container of 3D points.

The store keeps two views of the same coordinates: a Dr.Jit ``Array3`` used by
the vectorized distance kernel, and a read-only numpy host mirror of shape
``(N, 3)`` used for scalar access and finiteness checks. Neither is modified
after construction, so any number of workers may read the store without
locking.
"""

from typing import Optional, Sequence

from nearest_point.core.errors import IndexOutOfRange, InvalidCoordinate
from nearest_point.core.fwd import Array3, UInt, dr, np
from nearest_point.shapes.point import Point


class PointStore:
    """A fixed-size, read-only array of 3D points indexed ``0..N-1``.

    Attributes:
        points: Device coordinates, or None for an empty store.
    """

    points: Optional[Array3]

    def __init__(self, points: Sequence[Point] = ()) -> None:
        host = np.array([p.as_tuple() for p in points], dtype=np.float64)
        self._init(host.reshape(-1, 3))

    @classmethod
    def from_numpy(cls, coords: np.ndarray) -> "PointStore":
        """Build a store from an ``(N, 3)`` array of coordinates."""
        coords = np.asarray(coords, dtype=np.float64)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError(f"expected an (N, 3) array, got shape {coords.shape}")
        store = cls.__new__(cls)
        store._init(coords.copy())
        return store

    @classmethod
    def from_array(cls, points: Array3) -> "PointStore":
        """Build a store from a Dr.Jit ``Array3``."""
        return cls.from_numpy(points.numpy().T)

    def _init(self, host: np.ndarray) -> None:
        host.setflags(write=False)
        self._host = host
        self._size = host.shape[0]
        self.points = Array3(np.ascontiguousarray(host.T)) if self._size else None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def get(self, i: int) -> Point:
        """Return the point at index ``i``.

        Raises:
            IndexOutOfRange: If ``i`` is not in ``[0, N)``. Negative indices
                do not wrap around.
        """
        if not 0 <= i < self._size:
            raise IndexOutOfRange(i, self._size)
        x, y, z = self._host[i]
        return Point(float(x), float(y), float(z))

    def numpy(self) -> np.ndarray:
        """Read-only ``(N, 3)`` host mirror of the coordinates."""
        return self._host

    def gather(self, start: int, stop: int) -> Array3:
        """Gather the device coordinates of indices ``[start, stop)``."""
        return dr.gather(Array3, self.points, dr.arange(UInt, start, stop))

    def check_finite(self, start: int = 0, stop: Optional[int] = None) -> None:
        """Raise ``InvalidCoordinate`` for the first non-finite point in range."""
        stop = self._size if stop is None else stop
        finite = np.isfinite(self._host[start:stop]).all(axis=1)
        if not finite.all():
            i = start + int(np.argmin(finite))
            raise InvalidCoordinate(i, tuple(float(c) for c in self._host[i]))

    def __repr__(self) -> str:
        return f"PointStore(size={self._size})"
