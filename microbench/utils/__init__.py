"""Shared utilities: errors, statistics and result comparison."""

from .errors import ConfigError, MicrobenchError, ProfileValidationError, WorkerError
from .stats import stats_from_values, summarize_rounds

__all__ = [
    "MicrobenchError",
    "ConfigError",
    "ProfileValidationError",
    "WorkerError",
    "stats_from_values",
    "summarize_rounds",
]
