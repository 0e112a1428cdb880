"""Associative min-with-index reduction and its executors."""

from .candidate import (
    IDENTITY,
    Candidate,
    Empty,
    Found,
    ReductionResult,
    combine,
    to_result,
)
from .executor import (
    Executor,
    PartitionExecutor,
    SequentialExecutor,
    ThreadedExecutor,
    chunked,
    fold_indices,
    partition,
    random_partition,
)
from .reducer import MinReducer, brute_force, candidate_at

__all__ = [
    # Candidates
    "Candidate",
    "IDENTITY",
    "combine",
    "Found",
    "Empty",
    "ReductionResult",
    "to_result",
    # Executors
    "Executor",
    "SequentialExecutor",
    "PartitionExecutor",
    "ThreadedExecutor",
    "partition",
    "chunked",
    "random_partition",
    "fold_indices",
    # Reduction
    "MinReducer",
    "brute_force",
    "candidate_at",
]
