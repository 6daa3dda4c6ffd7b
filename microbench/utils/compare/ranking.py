"""Best-of selection, ranking and speed ratios for benchmark results.

Every "best" here is a left fold that only replaces the current best when the
challenger is strictly faster, so the first of equally fast entries wins.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key, reduce

from microbench.schema import BenchmarkResult, RoundResult


@dataclass
class SpeedComparison:
    """How a non-winning benchmark compares to the batch winner.

    Attributes:
        result: The compared benchmark result
        best_round: Its best round
        ratio: best_round.hertz / winner hertz (<= 1)
        slower_factor: 1 / ratio, i.e. how many times slower than the winner
    """

    result: BenchmarkResult
    best_round: RoundResult
    ratio: float
    slower_factor: float


def best_round(rounds: Iterable[RoundResult]) -> RoundResult:
    """Return the round with the highest hertz (earliest on ties)."""
    rounds = list(rounds)
    if not rounds:
        raise ValueError("Cannot pick a best round from an empty sequence")
    return reduce(RoundResult.best, rounds)


def best_result(results: Iterable[BenchmarkResult]) -> BenchmarkResult:
    """Return the benchmark result whose best round is fastest (earliest on ties)."""
    results = list(results)
    if not results:
        raise ValueError("Cannot pick a best result from an empty sequence")
    return reduce(BenchmarkResult.best, results)


def compare_rounds(a: RoundResult, b: RoundResult) -> int:
    """Comparator placing the higher-hertz round first."""
    if a.hertz > b.hertz:
        return -1
    if a.hertz < b.hertz:
        return 1
    return 0


def compare_benchmark_results(a: BenchmarkResult, b: BenchmarkResult) -> int:
    """Comparator on each result's best round, fastest first."""
    return compare_rounds(a.best_round, b.best_round)


def rank_results(results: Iterable[BenchmarkResult]) -> list[BenchmarkResult]:
    """Sort results fastest to slowest; equally fast results keep input order."""
    return sorted(results, key=cmp_to_key(compare_benchmark_results))


def compare_results(results: Sequence[BenchmarkResult]) -> list[SpeedComparison]:
    """Compare every non-winning result against the batch winner, in ranked order."""
    if not results:
        return []
    winner = best_result(results)
    winner_hertz = winner.best_round.hertz

    comparisons = []
    for result in rank_results(results):
        if result is winner:
            continue
        best = result.best_round
        ratio = best.hertz / winner_hertz if winner_hertz else 0.0
        comparisons.append(
            SpeedComparison(
                result=result,
                best_round=best,
                ratio=ratio,
                slower_factor=1 / ratio if ratio else float("inf"),
            )
        )
    return comparisons
