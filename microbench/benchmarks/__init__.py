"""Benchmark capability: the unit of work driven by the engine."""

from .base import Benchmark, SetupResult, as_setup_result

__all__ = ["Benchmark", "SetupResult", "as_setup_result"]
