"""Core types and utilities for nearest_point."""

from .errors import IndexOutOfRange, InvalidCoordinate, NearestPointError
from .fwd import (
    BYTES_PER_POINT,
    DEFAULT_SEED,
    GRID_SIZE,
    PCG32,
    Array3,
    Bool,
    Float,
    Int,
    UInt,
    dr,
)
from .math import sample_tea_32, squared_distance, squared_distance_scalar

__all__ = [
    # drjit
    "dr",
    # Types
    "Float",
    "Int",
    "UInt",
    "Bool",
    "Array3",
    "PCG32",
    # Constants
    "BYTES_PER_POINT",
    "GRID_SIZE",
    "DEFAULT_SEED",
    # Errors
    "NearestPointError",
    "IndexOutOfRange",
    "InvalidCoordinate",
    # Math utilities
    "squared_distance",
    "squared_distance_scalar",
    "sample_tea_32",
]
