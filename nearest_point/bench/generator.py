"""Random point generation on an integer grid.

Points are drawn uniformly from ``[0, grid)`` in each dimension using one
PCG32 stream per point. Streams are decorrelated by hashing ``(seed, index)``
with TEA, so the same seed always yields the same store regardless of the
number of points requested afterwards.
"""

from nearest_point.core.fwd import DEFAULT_SEED, GRID_SIZE, PCG32, Array3, Float, UInt, dr
from nearest_point.core.math import sample_tea_32
from nearest_point.shapes.point import Point
from nearest_point.shapes.store import PointStore


def _sample_grid(sampler: PCG32, grid: int) -> Array3:
    x = Float(sampler.next_uint32_bounded(grid))
    y = Float(sampler.next_uint32_bounded(grid))
    z = Float(sampler.next_uint32_bounded(grid))
    return Array3(x, y, z)


def generate_points(n: int, seed: int = DEFAULT_SEED, grid: int = GRID_SIZE) -> PointStore:
    """Generate a store of ``n`` points with integer coordinates in ``[0, grid)``."""
    if n == 0:
        return PointStore()
    v0, v1 = sample_tea_32(seed, dr.arange(UInt, n))
    dr.eval(v0, v1)
    sampler = PCG32(size=n, initstate=v0, initseq=v1)
    p = _sample_grid(sampler, grid)
    dr.eval(p)
    return PointStore.from_array(p)


def generate_query(seed: int = DEFAULT_SEED, grid: int = GRID_SIZE) -> Point:
    """Generate a single query point on the same grid as ``generate_points``."""
    # stream index 0xFFFFFFFF is never used by a stored point
    v0, v1 = sample_tea_32(seed, UInt(0xFFFFFFFF))
    sampler = PCG32(size=1, initstate=v0, initseq=v1)
    p = _sample_grid(sampler, grid).numpy()
    return Point(float(p[0][0]), float(p[1][0]), float(p[2][0]))
