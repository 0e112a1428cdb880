"""Parallel executors for associative reductions over an index range.

An executor is given the size ``n`` of an index range together with a
function producing a partial value, a combine function and its identity.
It decides how ``[0, n)`` is partitioned into contiguous chunks and how the
partials are merged. Each chunk folds its indices privately starting from the
identity, and each partial is merged into the result exactly once.
"""

import functools
import os
import random
from abc import ABC, abstractmethod
from concurrent import futures
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

Chunk = Tuple[int, int]
ChunkFunc = Callable[[int, int], T]
IndexFunc = Callable[[int], T]
CombineFunc = Callable[[T, T], T]


def partition(n: int, num_chunks: int) -> List[Chunk]:
    """Split ``[0, n)`` into at most ``num_chunks`` nearly equal chunks.

    Empty chunks are never produced, so ``n == 0`` yields an empty list.
    """
    if num_chunks < 1:
        raise ValueError(f"num_chunks must be positive, got {num_chunks}")
    num_chunks = min(num_chunks, n)
    chunks = []
    start = 0
    for k in range(num_chunks):
        stop = start + n // num_chunks + (1 if k < n % num_chunks else 0)
        chunks.append((start, stop))
        start = stop
    return chunks


def chunked(n: int, chunk_size: int) -> List[Chunk]:
    """Split ``[0, n)`` into chunks of ``chunk_size`` (the last may be shorter)."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    return [(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]


def random_partition(n: int, rng: random.Random) -> List[Chunk]:
    """Split ``[0, n)`` at randomly chosen boundaries."""
    if n == 0:
        return []
    cuts = sorted(rng.sample(range(1, n), rng.randint(0, n - 1))) if n > 1 else []
    bounds = [0] + cuts + [n]
    return list(zip(bounds[:-1], bounds[1:]))


def fold_indices(func: IndexFunc, combine: CombineFunc, identity: T) -> ChunkFunc:
    """Turn a per-index function into a per-chunk sequential fold."""

    def chunk_func(start: int, stop: int) -> T:
        return functools.reduce(combine, (func(i) for i in range(start, stop)), identity)

    return chunk_func


class Executor(ABC):
    """Base class for reduction executors."""

    @abstractmethod
    def chunks(self, n: int) -> List[Chunk]:
        """Partition ``[0, n)`` into the chunks processed by workers."""

    @abstractmethod
    def reduce_chunks(
        self, n: int, chunk_func: ChunkFunc, combine: CombineFunc, identity: T
    ) -> T:
        """Reduce ``[0, n)`` given a function computing one chunk's partial."""

    def reduce(self, n: int, func: IndexFunc, combine: CombineFunc, identity: T) -> T:
        """Reduce ``[0, n)`` given a function producing one value per index."""
        return self.reduce_chunks(n, fold_indices(func, combine, identity), combine, identity)


class SequentialExecutor(Executor):
    """Single fold over the whole range, no worker threads."""

    def chunks(self, n: int) -> List[Chunk]:
        return [(0, n)] if n > 0 else []

    def reduce_chunks(self, n, chunk_func, combine, identity):
        result = identity
        for start, stop in self.chunks(n):
            result = combine(result, chunk_func(start, stop))
        return result


class PartitionExecutor(Executor):
    """Executor with explicit chunk boundaries and merge order.

    Args:
        partitioner: Maps ``n`` to the list of chunks to process.
        shuffle: If given, partials are merged in an order drawn from it.
    """

    def __init__(
        self,
        partitioner: Callable[[int], Sequence[Chunk]],
        shuffle: Optional[random.Random] = None,
    ) -> None:
        self.partitioner = partitioner
        self.shuffle = shuffle

    def chunks(self, n: int) -> List[Chunk]:
        return list(self.partitioner(n))

    def reduce_chunks(self, n, chunk_func, combine, identity):
        partials = [chunk_func(start, stop) for start, stop in self.chunks(n)]
        if self.shuffle is not None:
            self.shuffle.shuffle(partials)
        return functools.reduce(combine, partials, identity)


class ThreadedExecutor(Executor):
    """Fan-out/fan-in over a thread pool.

    Chunks are submitted to a ``ThreadPoolExecutor``; each worker produces a
    private partial and partials are merged in completion order on the calling
    thread. A worker exception propagates out of ``reduce_chunks``.

    Args:
        num_workers: Number of threads (defaults to ``os.cpu_count()``).
        chunk_size: Points per chunk. Defaults to one chunk per worker.
    """

    def __init__(self, num_workers: Optional[int] = None, chunk_size: Optional[int] = None):
        if num_workers is not None and num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {num_workers}")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.num_workers = num_workers or os.cpu_count() or 1
        self.chunk_size = chunk_size

    def chunks(self, n: int) -> List[Chunk]:
        if self.chunk_size is not None:
            return chunked(n, self.chunk_size)
        return partition(n, self.num_workers)

    def reduce_chunks(self, n, chunk_func, combine, identity):
        chunks = self.chunks(n)
        if len(chunks) <= 1:
            return SequentialExecutor().reduce_chunks(n, chunk_func, combine, identity)
        result = identity
        with futures.ThreadPoolExecutor(max_workers=self.num_workers) as pool:
            pending = [pool.submit(chunk_func, start, stop) for start, stop in chunks]
            for future in futures.as_completed(pending):
                result = combine(result, future.result())
        return result

    def __repr__(self) -> str:
        return f"ThreadedExecutor(num_workers={self.num_workers}, chunk_size={self.chunk_size})"
