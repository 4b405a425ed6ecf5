"""Summary statistics for a finished run."""

import math
from typing import Dict, List, Optional

from .models import (
    PERCENTILE_STEPS,
    ResultSet,
    SummaryStatistics,
)

HTTP_OK = 200


def _ratio(numerator: float, denominator: float) -> float:
    """Divide, yielding NaN instead of raising when the denominator is zero."""
    if denominator == 0:
        return math.nan
    return numerator / denominator


def percentile(sorted_values: List[float], p: float) -> float:
    """
    Nearest-rank percentile of an ascending list, no interpolation.

    The index is floor(len * p), clamped to the last element so high
    percentiles on small samples stay in range. An empty list gives NaN.
    """
    if not sorted_values:
        return math.nan
    index = min(int(len(sorted_values) * p), len(sorted_values) - 1)
    return sorted_values[index]


def summarize(
    result_set: ResultSet,
    mode: Optional[str] = None,
    concurrency: Optional[int] = None,
) -> SummaryStatistics:
    """Compute counts, histogram, percentiles and rates from a ResultSet."""
    success_count = 0
    failure_count = 0
    success_total_ms = 0
    success_bytes = 0
    status_histogram: Dict[int, int] = {}
    latencies_ms: List[int] = []

    for outcome in result_set.outcomes:
        latency_ms = int(outcome.latency * 1000)
        if outcome.status_code == HTTP_OK:
            success_count += 1
            success_total_ms += latency_ms
            success_bytes += outcome.byte_length
        else:
            failure_count += 1

        status_histogram[outcome.status_code] = (
            status_histogram.get(outcome.status_code, 0) + 1
        )
        latencies_ms.append(latency_ms)

    latencies_ms.sort()
    percentiles = {step: percentile(latencies_ms, step) for step in PERCENTILE_STEPS}

    elapsed = result_set.elapsed_seconds

    return SummaryStatistics(
        success_count=success_count,
        failure_count=failure_count,
        total_requests=len(result_set.outcomes),
        status_histogram=status_histogram,
        latencies_ms=latencies_ms,
        percentiles=percentiles,
        success_bytes=success_bytes,
        elapsed_seconds=elapsed,
        qps=_ratio(success_count, elapsed),
        throughput_kbps=_ratio(success_bytes / 1024, elapsed),
        avg_success_latency_ms=_ratio(success_total_ms, success_count),
        mode=mode,
        concurrency=concurrency,
        started_at=result_set.started_at,
        ended_at=result_set.ended_at,
    )
