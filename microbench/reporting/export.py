"""Tabular and JSON export of benchmark results."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from microbench.configs.config_io import save_json_file
from microbench.schema import BenchmarkResult
from microbench.utils.compare import best_result
from microbench.utils.stats import summarize_rounds

COLUMNS = [
    "benchmark",
    "round",
    "interactions",
    "duration_ms",
    "hertz",
    "interaction_time_ms",
    "is_best_round",
]


def results_to_dataframe(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
    """One row per round, in execution order.

    Args:
        results: Benchmark results as returned by run_benchmark()/run_all()

    Returns:
        DataFrame with COLUMNS; empty (but with columns) when there are no rounds
    """
    rows: list[dict[str, Any]] = []
    for result in results:
        best = result.best_round.round if result.rounds else None
        for round_result in result.rounds:
            row = round_result.to_dict()
            row["benchmark"] = result.title
            row["is_best_round"] = round_result.round == best
            rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def save_results_csv(results: Sequence[BenchmarkResult], path: str) -> bool:
    """Write per-round rows to CSV. Returns False when there was nothing to write."""
    df = results_to_dataframe(results)
    if df.empty:
        return False
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)
    return True


def results_to_dict(results: Sequence[BenchmarkResult]) -> dict[str, Any]:
    """JSON-friendly payload: every result with its round summary, plus the winner."""
    with_rounds = [r for r in results if r.rounds]
    return {
        "winner": best_result(with_rounds).title if with_rounds else None,
        "results": [
            {**result.to_dict(), "summary": summarize_rounds(result.rounds)}
            for result in results
        ],
    }


def save_results_json(results: Sequence[BenchmarkResult], path: str) -> None:
    """Write results_to_dict() to a JSON file."""
    save_json_file(path, results_to_dict(results))
