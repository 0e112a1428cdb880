import argparse
import logging
from typing import List, Optional

from nearest_point.bench.harness import BenchmarkConfig, format_report, run_benchmark
from nearest_point.core.fwd import DEFAULT_SEED
from nearest_point.utils.stats import save_timing_plot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nearest-point",
        description="Nearest point brute-force reduction benchmark",
        add_help=False,
    )
    parser.add_argument(
        "-num_points", "-p", type=int, default=100000,
        help="number of points (default: 100000)",
    )
    parser.add_argument(
        "-nrepeat", type=int, default=10,
        help="number of test invocations (default: 10)",
    )
    parser.add_argument(
        "-num_workers", type=int, default=None,
        help="worker threads (default: single sequential fold)",
    )
    parser.add_argument(
        "-chunk_size", type=int, default=None,
        help="points per worker chunk (default: one chunk per worker)",
    )
    parser.add_argument("-seed", type=int, default=DEFAULT_SEED, help="random seed")
    parser.add_argument("-progress", action="store_true", help="show a progress bar")
    parser.add_argument("-plot", default=None, help="write a per-iteration timing plot")
    parser.add_argument(
        "-log_level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("-help", "-h", action="help", help="print this message")
    return parser


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    return BenchmarkConfig(
        num_points=args.num_points,
        nrepeat=args.nrepeat,
        seed=args.seed,
        num_workers=args.num_workers,
        chunk_size=args.chunk_size,
        progress=args.progress,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    report = run_benchmark(config)
    print(format_report(report))

    if args.plot:
        path = save_timing_plot(report.times, args.plot)
        logger.info("Saved timing plot to %s", path)


if __name__ == "__main__":
    main()
