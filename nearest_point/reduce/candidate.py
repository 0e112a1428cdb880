"""Candidate values and the min-with-index combine rule.

A ``Candidate`` pairs a squared distance with the index of the point that
produced it. Candidates are ordered by value only; the index is carried as
payload. ``combine`` is associative and commutative over values, so partial
candidates computed on any partition of the index range may be merged in any
order. Only the winner of an exact tie depends on the merge order.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Candidate:
    """Working value of the reduction.

    Attributes:
        value: Squared distance (``+inf`` for the identity).
        index: Index of the point, or None for the identity.
    """

    value: float
    index: Optional[int] = None

    @property
    def is_identity(self) -> bool:
        return self.index is None


IDENTITY = Candidate(math.inf, None)


def combine(a: Candidate, b: Candidate) -> Candidate:
    """Return the candidate with the smaller value.

    On equal values ``a`` is kept. The identity loses against any real
    candidate, even one whose value overflowed to ``+inf``.
    """
    if a.index is None:
        return b
    if b.index is None:
        return a
    if b.value < a.value:
        return b
    return a


@dataclass(frozen=True)
class Found:
    distance_squared: float
    index: int

    @property
    def distance(self) -> float:
        return math.sqrt(self.distance_squared)


class _Empty:
    """Result of a reduction over an empty store."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False


Empty = _Empty()

ReductionResult = Union[Found, _Empty]


def to_result(candidate: Candidate) -> ReductionResult:
    if candidate.is_identity:
        return Empty
    return Found(candidate.value, candidate.index)
