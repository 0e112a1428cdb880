"""nearest_point - Brute-force nearest point search as a parallel min-with-index reduction."""

__version__ = "0.1.0"

from . import bench
from . import core
from . import reduce
from . import shapes
from . import utils

__all__ = [
    "bench",
    "core",
    "reduce",
    "shapes",
    "utils",
    "__version__",
]
