"""Result aggregation and ranking."""

from .ranking import (
    SpeedComparison,
    best_result,
    best_round,
    compare_benchmark_results,
    compare_results,
    compare_rounds,
    rank_results,
)

__all__ = [
    "SpeedComparison",
    "best_round",
    "best_result",
    "compare_rounds",
    "compare_benchmark_results",
    "rank_results",
    "compare_results",
]
