"""Execution engine and batch runner.

Provides run_benchmark()/arun_benchmark() for a single benchmark and
run_all()/arun_all() for a sequential batch.
"""

from .batch_runner import arun_all, run_all, shuffled
from .benchmark_runner import (
    SETTLE_DELAY_SECONDS,
    arun_benchmark,
    resolve_counts,
    run_benchmark,
)

__all__ = [
    "SETTLE_DELAY_SECONDS",
    "arun_benchmark",
    "run_benchmark",
    "resolve_counts",
    "arun_all",
    "run_all",
    "shuffled",
]
