"""Per-iteration timing statistics for the benchmark loop."""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

import numpy as np

# two-sided 95% normal quantile
Z_95 = 1.96


@dataclass
class TimingStatistics:
    """Running mean and 95% confidence half-width of iteration times.

    Both arrays hold one entry per iteration: entry ``k`` summarizes the
    first ``k + 1`` times, accumulated with Welford's update.

    Attributes:
        mean: Running mean in seconds.
        ci: Running 95% confidence half-width in seconds.
    """

    mean: np.ndarray
    ci: np.ndarray

    @classmethod
    def from_times(cls, times: Sequence[float]) -> "TimingStatistics":
        n = len(times)
        means = np.zeros(n)
        m2s = np.zeros(n)
        _mean = 0.0
        m2 = 0.0
        for i, t in enumerate(times):
            delta = t - _mean
            _mean += delta / (i + 1)
            m2 += delta * (t - _mean)
            means[i] = _mean
            m2s[i] = m2
        count = np.arange(n) + 1
        ci = Z_95 * np.sqrt(m2s / count) / np.sqrt(count)
        return cls(mean=means, ci=ci)

    @property
    def final_mean(self) -> float:
        return float(self.mean[-1]) if len(self.mean) else float("nan")

    @property
    def final_ci(self) -> float:
        return float(self.ci[-1]) if len(self.ci) else float("nan")


def save_timing_plot(times: Sequence[float], path: Union[str, Path]) -> Path:
    """Plot the running mean of iteration times with its 95% CI band.

    Args:
        times: Per-iteration wall times in seconds.
        path: Output image path; parent directories are created.

    Returns:
        The path written.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    stats = TimingStatistics.from_times(times)
    iterations = np.arange(1, len(times) + 1)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots()
    ax.plot(iterations, stats.mean, label="mean time per iteration")
    ax.fill_between(iterations, stats.mean - stats.ci, stats.mean + stats.ci, alpha=0.3)
    ax.set_xlabel("iteration")
    ax.set_ylabel("seconds")
    ax.legend()
    fig.savefig(path)
    plt.close(fig)
    return path
