"""Point generation and the benchmark harness."""

from .generator import generate_points, generate_query
from .harness import (
    REPORT_HEADER,
    BenchmarkConfig,
    BenchmarkReport,
    format_report,
    format_result,
    run_benchmark,
)

__all__ = [
    "generate_points",
    "generate_query",
    "BenchmarkConfig",
    "BenchmarkReport",
    "REPORT_HEADER",
    "format_report",
    "format_result",
    "run_benchmark",
]
