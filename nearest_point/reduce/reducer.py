"""Brute-force nearest point search as a parallel min-with-index reduction.

The ``MinReducer`` hands the index range of a ``PointStore`` to an executor.
Each chunk computes the squared distances of its points to the query in one
vectorized Dr.Jit pass and keeps the first strict minimum as its partial
``Candidate``. Partials are merged with ``combine``. No square root is taken:
squared distance preserves the ordering of distances.
"""

from dataclasses import dataclass, field

from nearest_point.core.errors import InvalidCoordinate
from nearest_point.core.fwd import np
from nearest_point.core.math import squared_distance, squared_distance_scalar
from nearest_point.reduce.candidate import (
    IDENTITY,
    Candidate,
    ReductionResult,
    combine,
    to_result,
)
from nearest_point.reduce.executor import Executor, SequentialExecutor
from nearest_point.shapes.point import Point
from nearest_point.shapes.store import PointStore


def candidate_at(store: PointStore, query: Point, i: int) -> Candidate:
    """Candidate for a single index (per-element work of the reduction)."""
    p = store.get(i)
    if not p.is_finite():
        raise InvalidCoordinate(i, p.as_tuple())
    return Candidate(squared_distance_scalar(p.as_tuple(), query.as_tuple()), i)


def _check_query(query: Point) -> None:
    if not query.is_finite():
        raise InvalidCoordinate(None, query.as_tuple())


@dataclass
class MinReducer:
    """Find the stored point nearest to a query point.

    Attributes:
        executor: Decides partitioning and merge order. Defaults to a single
            sequential fold.
    """

    executor: Executor = field(default_factory=SequentialExecutor)

    def reduce(self, store: PointStore, query: Point) -> ReductionResult:
        """Return ``Found(distance_squared, index)`` or ``Empty`` if N = 0.

        If several points tie on the minimum distance, any one of them may be
        returned depending on how the executor merged the partials.

        Raises:
            InvalidCoordinate: If the query or a stored point has a NaN or
                infinite coordinate.
        """
        _check_query(query)
        n = store.size()
        if n == 0:
            return to_result(IDENTITY)
        q = query.to_array()

        def chunk_func(start: int, stop: int) -> Candidate:
            store.check_finite(start, stop)
            d2 = squared_distance(store.gather(start, stop), q).numpy()
            k = int(np.argmin(d2))
            return Candidate(float(d2[k]), start + k)

        return to_result(self.executor.reduce_chunks(n, chunk_func, combine, IDENTITY))

    def reduce_indices(self, store: PointStore, query: Point) -> ReductionResult:
        """Same as ``reduce`` but folds one scalar candidate per index."""
        _check_query(query)
        candidate = self.executor.reduce(
            store.size(), lambda i: candidate_at(store, query, i), combine, IDENTITY
        )
        return to_result(candidate)


def brute_force(store: PointStore, query: Point) -> ReductionResult:
    """Sequential scalar scan, used as a reference."""
    return MinReducer(SequentialExecutor()).reduce_indices(store, query)
