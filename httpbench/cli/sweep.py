"""CLI for concurrency sweeps."""

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Optional

from ..core.models import ConfigError, LoadConfig, SummaryStatistics
from ..core.load_tester import LoadTester
from ..results.aggregator import ResultAggregator
from .load_test import add_request_arguments, config_from_args

DEFAULT_LEVELS = [1, 2, 4, 8, 16, 32]


def parse_levels(value: str) -> List[int]:
    """Parse a comma-separated list of positive concurrency levels."""
    try:
        levels = [int(v) for v in value.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid concurrency levels: {value!r}")
    if not levels or any(level <= 0 for level in levels):
        raise argparse.ArgumentTypeError("concurrency levels must be positive integers")
    return levels


async def run_sweep(
    base_config: LoadConfig,
    levels: List[int],
    log_level: int = logging.INFO,
) -> List[SummaryStatistics]:
    """Run the same workload once per concurrency level."""
    aggregator = ResultAggregator()

    print(f"\nStarting concurrency sweep with {len(levels)} levels: {levels}")

    for i, level in enumerate(levels):
        print(f"\n{'='*60}")
        print(f"Running test {i+1}/{len(levels)}: concurrency {level}")
        print(f"{'='*60}")

        config = dataclasses.replace(base_config, concurrency=level)
        tester = LoadTester(config, log_level=log_level)
        result = await tester.run()
        aggregator.add_result(result)
        aggregator.print_single_result(result)

    return aggregator.results


def main(argv: Optional[List[str]] = None):
    """Main entry point for sweep CLI."""
    parser = argparse.ArgumentParser(
        prog="httpbench sweep",
        description="Run one load test per concurrency level and compare them",
    )
    add_request_arguments(parser)
    parser.add_argument(
        "--levels",
        type=parse_levels,
        default=DEFAULT_LEVELS,
        help="Comma-separated concurrency levels (default: 1,2,4,8,16,32)",
    )
    parser.add_argument("--csv", type=str, default=None, help="Write the table to a CSV file")
    parser.add_argument("--tsv", type=str, default=None, help="Write the table to a TSV file")
    parser.add_argument("--chart", type=str, default=None, help="Save sweep charts to this path")
    args = parser.parse_args(argv)

    # -c is optional for sweeps; the levels drive concurrency
    if not args.concurrency:
        args.concurrency = args.levels[0]

    try:
        config = config_from_args(args)
    except ConfigError as e:
        print(f"Error: {e}")
        parser.print_help()
        sys.exit(1)

    try:
        results = asyncio.run(
            run_sweep(config, args.levels, log_level=getattr(logging, args.log_level))
        )
    except KeyboardInterrupt:
        print("\nSweep interrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"Error running sweep: {e}")
        sys.exit(1)

    aggregator = ResultAggregator()
    aggregator.add_results(results)
    aggregator.print_summary_table(
        title="CONCURRENCY SWEEP RESULTS",
        description=f"{config.method} {config.url} ({config.mode}-bounded)",
    )
    if args.csv:
        aggregator.to_csv(args.csv)
    if args.tsv:
        aggregator.to_tsv(args.tsv)
    if args.chart:
        from ..results.charts import generate_sweep_charts

        generate_sweep_charts(results, output_path=args.chart, show=False)

    return results


if __name__ == "__main__":
    main()
