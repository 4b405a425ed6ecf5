"""Console report for a single run."""

import json

from ..core.models import SummaryStatistics


def format_percentile(step: float) -> str:
    return f"{step * 100:.2f}%"


def print_results(stats: SummaryStatistics) -> None:
    """Print run results in a formatted way."""
    print("\n" + "=" * 60)
    print("LOAD TEST RESULTS")
    print("=" * 60)
    print(f"Successful Requests: {stats.success_count}")
    print(f"Failed Requests:     {stats.failure_count}")
    print(f"Total Requests:      {stats.total_requests}")
    print(f"Elapsed:             {stats.elapsed_seconds:.6f}s")
    print()
    print("THROUGHPUT")
    print("-" * 30)
    print(f"QPS:                 {stats.qps:.6f}")
    print(f"Transfer Rate:       {stats.throughput_kbps:.6f} KB/s")
    print(f"Avg Success Latency: {stats.avg_success_latency_ms:.6f} ms")
    print()
    print("STATUS CODES")
    print("-" * 30)
    for code, count in sorted(stats.status_histogram.items()):
        print(f"HTTP {code}:            {count}")
    print()
    print("LATENCY DISTRIBUTION (ms)")
    print("-" * 30)
    for step, value in stats.percentiles.items():
        print(f"{format_percentile(step):>7}:            {value:.6f}")
    print("=" * 60)


def write_json(stats: SummaryStatistics, path: str) -> None:
    """Dump a summary to a JSON file."""
    with open(path, "w") as f:
        json.dump(stats.to_dict(), f, indent=2)
