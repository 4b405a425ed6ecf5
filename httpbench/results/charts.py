"""Chart generation for load test results."""

import matplotlib.pyplot as plt
from datetime import datetime
from typing import List, Optional

from ..core.models import SummaryStatistics


def _save(prefix: str, output_path: Optional[str], show: bool) -> str:
    if output_path:
        saved_path = output_path
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        saved_path = f"{prefix}_{timestamp}.png"

    plt.savefig(saved_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved as: {saved_path}")

    if show:
        plt.show()
    plt.close()
    return saved_path


def generate_latency_chart(
    stats: SummaryStatistics,
    output_path: Optional[str] = None,
    show: bool = True,
) -> Optional[str]:
    """
    Plot the latency distribution of a single run.

    Args:
        stats: Summary of the run to plot
        output_path: Path to save the chart (auto-generated if None)
        show: Whether to display the chart

    Returns:
        Path to saved chart file, or None if there was nothing to plot
    """
    if not stats.latencies_ms:
        print("No results to chart.")
        return None

    fig, (ax1, ax2, ax3) = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle(
        f"Load Test: {stats.total_requests} requests, concurrency {stats.concurrency}",
        fontsize=14,
        fontweight="bold",
    )

    # Latency histogram
    ax1.hist(stats.latencies_ms, bins=min(50, max(1, len(set(stats.latencies_ms)))))
    ax1.set_xlabel("Latency (ms)")
    ax1.set_ylabel("Requests")
    ax1.set_title("Latency Histogram")
    ax1.grid(True, alpha=0.3)

    # Percentiles
    labels = [f"{step * 100:g}%" for step in stats.percentiles]
    values = list(stats.percentiles.values())
    ax2.bar(labels, values, color="tab:orange")
    ax2.set_xlabel("Percentile")
    ax2.set_ylabel("Latency (ms)")
    ax2.set_title("Latency Percentiles")
    ax2.grid(True, alpha=0.3)

    # Status codes
    codes = sorted(stats.status_histogram)
    colors = ["tab:green" if code == 200 else "tab:red" for code in codes]
    ax3.bar([str(code) for code in codes], [stats.status_histogram[c] for c in codes], color=colors)
    ax3.set_xlabel("Status Code")
    ax3.set_ylabel("Requests")
    ax3.set_title("Status Codes")
    ax3.grid(True, alpha=0.3)

    plt.tight_layout()
    return _save("latency", output_path, show)


def generate_sweep_charts(
    results: List[SummaryStatistics],
    output_path: Optional[str] = None,
    show: bool = True,
) -> Optional[str]:
    """
    Plot throughput and latency against concurrency for a sweep.

    Returns:
        Path to saved chart file, or None if not saved
    """
    if not results:
        print("No results to chart.")
        return None

    x_values = [r.concurrency or 0 for r in results]
    qps = [r.qps for r in results]
    throughput = [r.throughput_kbps for r in results]
    avg_latency = [r.avg_success_latency_ms for r in results]
    p99_latency = [r.percentiles.get(0.99) for r in results]
    failures = [r.failure_count for r in results]

    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 12))
    fig.suptitle("Concurrency Sweep", fontsize=16, fontweight="bold")

    ax1.plot(x_values, qps, "b-o", linewidth=2, markersize=6)
    ax1.set_xlabel("Concurrency")
    ax1.set_ylabel("QPS")
    ax1.set_title("QPS vs Concurrency")
    ax1.grid(True, alpha=0.3)

    ax2.plot(x_values, avg_latency, "g-o", label="Average", linewidth=2, markersize=6)
    ax2.plot(x_values, p99_latency, "r-o", label="99th Percentile", linewidth=2, markersize=6)
    ax2.set_xlabel("Concurrency")
    ax2.set_ylabel("Latency (ms)")
    ax2.set_title("Latency vs Concurrency")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    ax3.plot(x_values, throughput, "purple", marker="o", linewidth=2, markersize=6)
    ax3.set_xlabel("Concurrency")
    ax3.set_ylabel("Throughput (KB/s)")
    ax3.set_title("Throughput vs Concurrency")
    ax3.grid(True, alpha=0.3)

    ax4.plot(x_values, failures, "r-o", linewidth=2, markersize=6)
    ax4.set_xlabel("Concurrency")
    ax4.set_ylabel("Failed Requests")
    ax4.set_title("Failures vs Concurrency")
    ax4.grid(True, alpha=0.3)

    plt.tight_layout()
    return _save("sweep", output_path, show)
