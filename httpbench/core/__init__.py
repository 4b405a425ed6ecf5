"""Core load generation components."""

from .models import (
    LoadConfig,
    RequestDescriptor,
    RequestOutcome,
    ResultSet,
    SummaryStatistics,
    ConfigError,
)
from .load_tester import LoadTester, Dispatcher
from .param_loader import ParamLoader
from .planner import plan
from .summary import summarize, percentile

__all__ = [
    "LoadConfig",
    "RequestDescriptor",
    "RequestOutcome",
    "ResultSet",
    "SummaryStatistics",
    "ConfigError",
    "LoadTester",
    "Dispatcher",
    "ParamLoader",
    "plan",
    "summarize",
    "percentile",
]
