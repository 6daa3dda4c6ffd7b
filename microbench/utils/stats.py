"""Numeric summaries over round results."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from microbench.schema import RoundResult


def stats_from_values(values: Sequence[float]) -> dict[str, float]:
    """Calculate mean, median, std, min and max for a list of values.

    Args:
        values: Numeric values (None entries are skipped)

    Returns:
        Dict with keys mean, median, std, min, max; or empty dict if no valid values
    """
    valid = [float(v) for v in values if v is not None]
    if not valid:
        return {}
    arr = np.asarray(valid, dtype=float)
    return {
        "mean": float(np.mean(arr)),
        "median": float(np.median(arr)),
        "std": float(np.std(arr)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
    }


def summarize_rounds(rounds: Sequence["RoundResult"]) -> dict[str, dict[str, float]]:
    """Summarize hertz, per-interaction time and duration across rounds.

    Descriptive only: no outlier rejection and no confidence intervals.

    Args:
        rounds: Round results of one benchmark run

    Returns:
        Mapping of metric name to its stats_from_values() summary
    """
    return {
        "hertz": stats_from_values([r.hertz for r in rounds]),
        "interaction_time_ms": stats_from_values([r.interaction_time_ms for r in rounds]),
        "duration_ms": stats_from_values([r.duration_ms for r in rounds]),
    }
