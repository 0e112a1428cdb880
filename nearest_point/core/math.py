"""Distance kernels and random seeding helpers.

This module provides the vectorized operations used by the reduction and the
point generator: squared Euclidean distance between Dr.Jit arrays, the scalar
version used by the per-index fold, and TEA hashing for decorrelated PCG32
streams.
"""

from nearest_point.core.fwd import Array3, Float, UInt, dr


def squared_distance(p: Array3, q: Array3) -> Float:
    """Compute the squared Euclidean distance between points.

    Args:
        p: Array of points.
        q: Query point (broadcast against ``p``).

    Returns:
        Array of dx² + dy² + dz², one entry per point in ``p``, rounded
        exactly like ``squared_distance_scalar`` (no fused multiply-add).
    """
    d = q - p
    return d.x * d.x + d.y * d.y + d.z * d.z


def squared_distance_scalar(p: tuple, q: tuple) -> float:
    """Scalar squared distance between two (x, y, z) tuples."""
    dx = q[0] - p[0]
    dy = q[1] - p[1]
    dz = q[2] - p[2]
    return dx * dx + dy * dy + dz * dz


def sample_tea_32(v0: UInt, v1: UInt, rounds: int = 4) -> tuple:
    """Generate decorrelated random seeds using TEA (Tiny Encryption Algorithm).

    Args:
        v0: First input value (typically seed).
        v1: Second input value (typically lane index).
        rounds: Number of TEA rounds.

    Returns:
        Tuple of two hashed 32-bit unsigned integers.
    """
    v0, v1 = UInt(v0), UInt(v1)
    s = UInt(0)
    for _ in range(rounds):
        s += UInt(0x9E3779B9)  # Golden ratio constant
        v0 += ((v1 << 4) + UInt(0xA341316C)) ^ (v1 + s) ^ ((v1 >> 5) + UInt(0xC8013EA4))
        v1 += ((v0 << 4) + UInt(0xAD90777D)) ^ (v0 + s) ^ ((v0 >> 5) + UInt(0x7E95761E))
    return v0, v1
