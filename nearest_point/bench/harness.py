"""Benchmark loop for the nearest point reduction.

Builds a random point store and query, runs the reduction ``nrepeat`` times
against them and reports total time, time per iteration, problem size and
achieved bandwidth.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from tqdm import tqdm

from nearest_point.bench.generator import generate_points, generate_query
from nearest_point.core.fwd import BYTES_PER_POINT, DEFAULT_SEED, GRID_SIZE
from nearest_point.reduce.candidate import ReductionResult
from nearest_point.reduce.executor import Executor, SequentialExecutor, ThreadedExecutor
from nearest_point.reduce.reducer import MinReducer
from nearest_point.utils.stats import TimingStatistics

logger = logging.getLogger(__name__)

REPORT_HEADER = "#NumPoints Time(s) TimePerIter(s) ProblemSize(MB) Bandwidth(GB/s)"


@dataclass
class BenchmarkConfig:
    """Benchmark parameters.

    Attributes:
        num_points: Number of points in the store.
        nrepeat: Number of times the reduction is repeated.
        seed: Seed for point and query generation.
        grid: Coordinates are drawn from ``[0, grid)``.
        num_workers: Worker threads; None or 1 runs a single sequential fold.
        chunk_size: Points per worker chunk (defaults to one chunk per worker).
        progress: Show a progress bar over the repeat loop.
    """

    num_points: int = 100000
    nrepeat: int = 10
    seed: int = DEFAULT_SEED
    grid: int = GRID_SIZE
    num_workers: Optional[int] = None
    chunk_size: Optional[int] = None
    progress: bool = False

    def __post_init__(self):
        if self.num_points < 0:
            raise ValueError(f"num_points must be non-negative, got {self.num_points}")
        if self.nrepeat < 1:
            raise ValueError(f"nrepeat must be positive, got {self.nrepeat}")
        if self.grid < 1:
            raise ValueError(f"grid must be positive, got {self.grid}")
        if self.num_workers is not None and self.num_workers < 1:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    def make_executor(self) -> Executor:
        if (self.num_workers or 1) == 1 and self.chunk_size is None:
            return SequentialExecutor()
        return ThreadedExecutor(num_workers=self.num_workers, chunk_size=self.chunk_size)


@dataclass
class BenchmarkReport:
    num_points: int
    nrepeat: int
    time: float
    result: ReductionResult
    times: List[float] = field(default_factory=list)

    @property
    def time_per_iter(self) -> float:
        return self.time / self.nrepeat

    @property
    def problem_size_mb(self) -> float:
        return 1.0e-6 * self.num_points * BYTES_PER_POINT

    @property
    def bandwidth_gbs(self) -> float:
        if self.time <= 0.0:
            return float("inf")
        return 1.0e-9 * self.num_points * BYTES_PER_POINT * self.nrepeat / self.time

    @property
    def timing(self) -> TimingStatistics:
        """Running mean and 95% CI of the per-iteration times."""
        return TimingStatistics.from_times(self.times)


def format_report(report: BenchmarkReport) -> str:
    """Header line and data line of the benchmark report."""
    data = (
        f"{report.num_points} {report.time:f} {report.time_per_iter:e} "
        f"{report.problem_size_mb:f} {report.bandwidth_gbs:f}"
    )
    return f"{REPORT_HEADER}\n{data}"


def format_result(result: ReductionResult) -> str:
    if not result:
        return "Min indx: none (empty store)"
    return f"Min indx: {result.index} with dist2 {result.distance_squared:f}"


def run_benchmark(config: BenchmarkConfig) -> BenchmarkReport:
    """Run the reduction ``config.nrepeat`` times and time it."""
    store = generate_points(config.num_points, seed=config.seed, grid=config.grid)
    query = generate_query(seed=config.seed, grid=config.grid)
    reducer = MinReducer(config.make_executor())
    logger.info(
        "Reducing %d points against query %s with %r",
        store.size(),
        query.as_tuple(),
        reducer.executor,
    )

    times = []
    result = None
    start_time = time.time()
    for _ in tqdm(range(config.nrepeat), desc="Reducing", disable=not config.progress):
        t0 = time.time()
        result = reducer.reduce(store, query)
        times.append(time.time() - t0)
        logger.info(format_result(result))
    elapsed = time.time() - start_time

    report = BenchmarkReport(
        num_points=config.num_points,
        nrepeat=config.nrepeat,
        time=elapsed,
        result=result,
        times=times,
    )
    timing = report.timing
    logger.info(
        "Time per iteration: %e s +/- %e s (95%% CI)", timing.final_mean, timing.final_ci
    )
    return report
