"""
Test suite for reduction executors.

Tests cover:
- Partition helpers
- Sequential, explicit-partition and threaded executors
- Per-index and per-chunk reduction paths
- Worker error propagation
"""

import random

import pytest

from nearest_point.reduce import (
    IDENTITY,
    Candidate,
    PartitionExecutor,
    SequentialExecutor,
    ThreadedExecutor,
    chunked,
    combine,
    partition,
    random_partition,
)

VALUES = [7.0, 3.0, 9.0, 1.0, 4.0, 1.0, 8.0, 6.0, 2.0, 5.0, 3.0]


def value_at(i):
    return Candidate(VALUES[i], i)


def covers(chunks, n):
    """Chunks are contiguous, non-empty and cover [0, n) exactly once."""
    expected = 0
    for start, stop in chunks:
        if start != expected or stop <= start:
            return False
        expected = stop
    return expected == n


class TestPartition:
    """Test partition helpers."""

    def test_partition_balances(self):
        chunks = partition(10, 3)
        assert chunks == [(0, 4), (4, 7), (7, 10)]

    def test_partition_more_chunks_than_items(self):
        assert partition(2, 8) == [(0, 1), (1, 2)]

    def test_partition_empty(self):
        assert partition(0, 4) == []

    def test_partition_rejects_zero_chunks(self):
        with pytest.raises(ValueError):
            partition(10, 0)

    def test_chunked(self):
        assert chunked(7, 3) == [(0, 3), (3, 6), (6, 7)]
        assert chunked(0, 3) == []

    def test_random_partition_covers_range(self):
        rng = random.Random(1)
        for n in [1, 2, 5, 50]:
            assert covers(random_partition(n, rng), n)
        assert random_partition(0, rng) == []


class TestExecutors:
    """Test that all executors agree on the reduced value."""

    @pytest.mark.parametrize(
        "executor",
        [
            SequentialExecutor(),
            PartitionExecutor(lambda n: chunked(n, 1)),
            PartitionExecutor(lambda n: [(0, n)]),
            PartitionExecutor(lambda n: random_partition(n, random.Random(3)), random.Random(4)),
            ThreadedExecutor(num_workers=4),
            ThreadedExecutor(num_workers=3, chunk_size=2),
        ],
    )
    def test_reduce_finds_minimum(self, executor):
        result = executor.reduce(len(VALUES), value_at, combine, IDENTITY)
        assert result.value == 1.0
        assert result.index in (3, 5)

    def test_reduce_chunks_matches_reduce(self):
        def chunk_func(start, stop):
            best = min(range(start, stop), key=lambda i: VALUES[i])
            return Candidate(VALUES[best], best)

        executor = ThreadedExecutor(num_workers=2, chunk_size=4)
        result = executor.reduce_chunks(len(VALUES), chunk_func, combine, IDENTITY)
        assert result.value == 1.0

    def test_empty_range_returns_identity(self):
        for executor in [SequentialExecutor(), ThreadedExecutor(num_workers=2)]:
            assert executor.reduce(0, value_at, combine, IDENTITY) is IDENTITY

    def test_threaded_chunks(self):
        assert ThreadedExecutor(num_workers=2).chunks(5) == [(0, 3), (3, 5)]
        assert ThreadedExecutor(num_workers=2, chunk_size=2).chunks(5) == [(0, 2), (2, 4), (4, 5)]

    def test_threaded_rejects_bad_arguments(self):
        with pytest.raises(ValueError):
            ThreadedExecutor(num_workers=0)
        with pytest.raises(ValueError):
            ThreadedExecutor(chunk_size=0)

    def test_worker_error_propagates(self):
        def failing(i):
            if i == 6:
                raise RuntimeError("boom")
            return value_at(i)

        with pytest.raises(RuntimeError, match="boom"):
            ThreadedExecutor(num_workers=3).reduce(len(VALUES), failing, combine, IDENTITY)
