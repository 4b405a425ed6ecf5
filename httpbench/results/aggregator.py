"""Result aggregation and reporting."""

import pandas as pd
from pathlib import Path
from typing import List, Optional

from ..core.models import SummaryStatistics


def status_dataframe(stats: SummaryStatistics) -> pd.DataFrame:
    """Status-code breakdown of a single run."""
    rows = [
        {
            "Status": code,
            "Count": count,
            "Share%": count / stats.total_requests * 100 if stats.total_requests else 0.0,
        }
        for code, count in sorted(stats.status_histogram.items())
    ]
    return pd.DataFrame(rows, columns=["Status", "Count", "Share%"])


def percentile_dataframe(stats: SummaryStatistics) -> pd.DataFrame:
    """Percentile table of a single run."""
    rows = [
        {"Percentile": f"{step * 100:.2f}%", "Latency_ms": value}
        for step, value in stats.percentiles.items()
    ]
    return pd.DataFrame(rows, columns=["Percentile", "Latency_ms"])


def export_breakdowns(stats: SummaryStatistics, csv_path: str) -> List[str]:
    """
    Write the status and percentile tables next to a run's CSV export.

    Returns:
        Paths of the written files (<stem>_status.csv, <stem>_percentiles.csv)
    """
    base = Path(csv_path)
    status_path = base.with_name(f"{base.stem}_status.csv")
    percentile_path = base.with_name(f"{base.stem}_percentiles.csv")
    status_dataframe(stats).to_csv(status_path, index=False)
    percentile_dataframe(stats).to_csv(percentile_path, index=False)
    return [str(status_path), str(percentile_path)]


class ResultAggregator:
    """Aggregates and formats run summaries for export."""

    def __init__(self):
        self.results: List[SummaryStatistics] = []

    def add_result(self, result: SummaryStatistics) -> None:
        """Add a single run summary."""
        self.results.append(result)

    def add_results(self, results: List[SummaryStatistics]) -> None:
        """Add multiple run summaries."""
        self.results.extend(results)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to pandas DataFrame."""
        data = []
        for result in self.results:
            data.append({
                "Concurrency": result.concurrency,
                "Mode": result.mode,
                "Total": result.total_requests,
                "Success": result.success_count,
                "Failed": result.failure_count,
                "Elapsed_s": f"{result.elapsed_seconds:.2f}",
                "QPS": f"{result.qps:.2f}",
                "KB/s": f"{result.throughput_kbps:.2f}",
                "Avg_ms": f"{result.avg_success_latency_ms:.2f}",
                "P50_ms": result.percentiles.get(0.5),
                "P90_ms": result.percentiles.get(0.9),
                "P95_ms": result.percentiles.get(0.95),
                "P99_ms": result.percentiles.get(0.99),
                "P99.99_ms": result.percentiles.get(0.9999),
            })
        return pd.DataFrame(data)

    def to_csv(self, path: str) -> None:
        """Export to CSV file."""
        df = self.to_dataframe()
        df.to_csv(path, index=False)

    def to_tsv(self, path: str) -> None:
        """Export to TSV file."""
        df = self.to_dataframe()
        df.to_csv(path, sep="\t", index=False)

    def get_tsv_string(self) -> str:
        """Get results as TSV string for easy copy/paste to spreadsheet."""
        df = self.to_dataframe()
        return df.to_csv(sep="\t", index=False)

    def print_summary_table(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        """Print formatted summary table to console."""
        if not self.results:
            print("No results to display.")
            return

        print()
        print("=" * 100)
        if title:
            print(title.center(100))
        else:
            print("LOAD TEST SUMMARY".center(100))
        print("=" * 100)

        if description:
            print(description)
            print("-" * 100)

        df = self.to_dataframe()
        print(df.to_string(index=False))

        print()
        print("=" * 100)
        print("TSV OUTPUT (copy to spreadsheet):")
        print("=" * 100)
        print(self.get_tsv_string())
        print("=" * 100)

    def print_single_result(self, result: SummaryStatistics) -> None:
        """Print a single run summary during a sweep."""
        print(f"\nResults for concurrency={result.concurrency}:")
        print(f"  QPS: {result.qps:.2f} req/s")
        print(f"  Avg Latency: {result.avg_success_latency_ms:.2f}ms")
        print(f"  P99 Latency: {result.percentiles.get(0.99)}ms")
        print(f"  Failed: {result.failure_count}/{result.total_requests}")
