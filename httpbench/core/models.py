"""Data models for load runs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

# Status recorded for requests that never got a response.
BAD_REQUEST_SENTINEL = 400

# Percentile steps reported for every run.
PERCENTILE_STEPS = (0.5, 0.9, 0.95, 0.99, 0.9999)

SUPPORTED_METHODS = ("GET", "POST")


class ConfigError(ValueError):
    """Raised when a load configuration cannot be run."""


@dataclass
class LoadConfig:
    """Configuration for a single load run."""

    concurrency: int = 0
    url: str = ""
    method: str = "GET"

    # Count-bounded mode
    total_number: Optional[int] = None

    # Duration-bounded mode (seconds)
    duration: Optional[int] = None

    post_data: str = ""
    timeout: float = 1.0
    file_path: Optional[str] = None

    def __post_init__(self):
        self.method = (self.method or "GET").upper()

    @property
    def is_count_bounded(self) -> bool:
        """Count mode wins when both a count and a duration are set."""
        return bool(self.total_number)

    @property
    def is_duration_bounded(self) -> bool:
        return not self.is_count_bounded and bool(self.duration)

    @property
    def mode(self) -> str:
        return "count" if self.is_count_bounded else "duration"

    def validate(self) -> None:
        """
        Check the configuration before any request is issued.

        Raises:
            ConfigError: If the configuration cannot be run
        """
        if not self.url and not self.file_path:
            raise ConfigError("-u and -f cannot both be empty")
        if self.concurrency is None or self.concurrency <= 0:
            raise ConfigError("-c is required and must be positive")
        if self.total_number is not None and self.total_number < 0:
            raise ConfigError("-n must not be negative")
        if self.duration is not None and self.duration < 0:
            raise ConfigError("-a must not be negative")
        if not self.total_number and not self.duration:
            raise ConfigError("one of -n or -a is required")
        if self.method not in SUPPORTED_METHODS:
            raise ConfigError("-m must be get or post")
        if self.timeout is None or self.timeout <= 0:
            raise ConfigError("-t must be positive")


@dataclass(frozen=True)
class RequestDescriptor:
    """A single planned request."""

    url: str
    method: str = "GET"
    body: str = ""
    timeout: float = 1.0


@dataclass(frozen=True)
class RequestOutcome:
    """Latency (seconds), status and body size of one attempted request."""

    latency: float
    status_code: int
    byte_length: int = 0

    @classmethod
    def failure(cls, latency: float) -> "RequestOutcome":
        """Outcome for a request that failed at the transport level."""
        return cls(latency=latency, status_code=BAD_REQUEST_SENTINEL, byte_length=0)


@dataclass
class ResultSet:
    """All outcomes of a run, bounded by its start and end timestamps."""

    start_time: float
    end_time: float
    outcomes: List[RequestOutcome] = field(default_factory=list)
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @property
    def elapsed_seconds(self) -> float:
        return self.end_time - self.start_time

    def __len__(self) -> int:
        return len(self.outcomes)


@dataclass(frozen=True)
class SummaryStatistics:
    """Aggregate statistics computed once from a finished ResultSet."""

    success_count: int
    failure_count: int
    total_requests: int
    status_histogram: Dict[int, int]

    # Sorted ascending, whole milliseconds
    latencies_ms: List[int] = field(repr=False)
    percentiles: Dict[float, float]

    success_bytes: int
    elapsed_seconds: float
    qps: float
    throughput_kbps: float
    avg_success_latency_ms: float

    # Optional run metadata
    mode: Optional[str] = None
    concurrency: Optional[int] = None
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "mode": self.mode,
            "concurrency": self.concurrency,
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "total_requests": self.total_requests,
            "status_histogram": {str(k): v for k, v in self.status_histogram.items()},
            "percentiles_ms": {f"{p * 100:.2f}": v for p, v in self.percentiles.items()},
            "success_bytes": self.success_bytes,
            "elapsed_seconds": self.elapsed_seconds,
            "qps": self.qps,
            "throughput_kbps": self.throughput_kbps,
            "avg_success_latency_ms": self.avg_success_latency_ms,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
        }
