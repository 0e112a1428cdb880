"""Timing statistics and plotting."""

from .stats import TimingStatistics, save_timing_plot

__all__ = [
    "TimingStatistics",
    "save_timing_plot",
]
