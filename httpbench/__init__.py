"""HTTP load generation and latency statistics."""

__version__ = "0.1.0"
