import drjit as dr
import numpy as np
from drjit.auto.ad import PCG32, Bool
from drjit.auto.ad import Array3f64 as Array3
from drjit.auto.ad import Float64 as Float
from drjit.auto.ad import Int32 as Int
from drjit.auto.ad import UInt32 as UInt

# Coordinates are stored as 3 x float64
BYTES_PER_POINT = 3 * 8

GRID_SIZE = 1024 * 1024
DEFAULT_SEED = 90391

__all__ = [
    "dr",
    "np",
    "PCG32",
    "Bool",
    "Array3",
    "Float",
    "Int",
    "UInt",
    "BYTES_PER_POINT",
    "GRID_SIZE",
    "DEFAULT_SEED",
]
