"""Command-line interface for running the flag containment benchmarks.

Usage:
    flagbench
    flagbench --filter '*custom*' --iterations 30
    flagbench --config my_benchmark.yaml --output-dir artifacts
    flagbench --list
    python -m flagbench
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flagbench.cases import ALL_CASE_CLASSES, collect_cases, filter_cases
from flagbench.cases.registry import BenchmarkError
from flagbench.config import (
    ConfigurationError,
    TimeUnit,
    create_default_config,
    load_config,
    warn_if_unreliable,
)
from flagbench.harness import BenchmarkRunner

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flagbench",
        description="Benchmark native enum flag containment against a direct bitwise check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every case with the default configuration
  flagbench

  # Only the custom bitwise cases, more iterations
  flagbench --filter '*custom*' --iterations 30

  # Timing only, JSON results written to ./artifacts
  flagbench --no-memory --output-dir artifacts
        """,
    )
    parser.add_argument(
        "--filter",
        nargs="+",
        metavar="PATTERN",
        default=None,
        help="Glob patterns on case names, e.g. '*false' (default: all cases)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file overlaying the default configuration",
    )
    parser.add_argument(
        "--no-memory",
        action="store_true",
        help="Disable memory diagnostics",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Warmup iterations per case",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Measured iterations per case",
    )
    parser.add_argument(
        "--invocations",
        type=int,
        default=None,
        help="Calls per iteration",
    )
    parser.add_argument(
        "--time-unit",
        choices=[unit.value for unit in TimeUnit],
        default=None,
        help="Time unit of the summary table (default: auto)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write JSON results to this directory",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available cases and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    return parser


def cmd_list(patterns: Optional[List[str]]) -> None:
    """Print the selected cases, one per line."""
    for case_class in ALL_CASE_CLASSES:
        for case in filter_cases(collect_cases(case_class), patterns):
            marker = " (baseline)" if case.baseline else ""
            print(f"{case.full_name} [{case.category}]{marker}: {case.description or ''}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code: 0 on completion, 1 if the harness cannot start
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    if args.list:
        cmd_list(args.filter)
        return 0

    try:
        config = load_config(args.config) if args.config else create_default_config()
        config = config.with_overrides(
            warmup_iterations=args.warmup,
            target_iterations=args.iterations,
            invocations_per_iteration=args.invocations,
            memory=False if args.no_memory else None,
            time_unit=TimeUnit(args.time_unit) if args.time_unit else None,
            artifacts_dir=args.output_dir,
            export_json=True if args.output_dir else None,
        )
        runner = BenchmarkRunner(config)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        return 1
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    warn_if_unreliable(config)

    try:
        summary = runner.run_all(ALL_CASE_CLASSES, filters=args.filter)
    except BenchmarkError as e:
        logger.error(f"Cannot run benchmarks: {e}")
        return 1

    print(summary.format_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
