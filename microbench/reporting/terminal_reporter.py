"""Terminal reporter for verbose benchmark runs.

Lines are printed as each lifecycle stage completes, so a run that fails
midway leaves the lines of its completed stages as the only output.
"""

import sys
from collections.abc import Sequence
from typing import TextIO

from microbench.benchmarks import SetupResult
from microbench.configs.profiles import Profile
from microbench.schema import BenchmarkResult, RoundResult
from microbench.utils.compare import best_result, compare_results


class TerminalReporter:
    """Render the framed per-benchmark report and the batch summary."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream
        self._separator = "╠─"

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)

    def _metrics(self, round_result: RoundResult) -> None:
        self._print(f"║ »» Duration: {round_result.duration}")
        self._print(f"║ »» Speed: {round_result.hertz_formatted}")
        self._print(f"║ »» Interaction Time: {round_result.interaction_time_formatted}")

    def title(self, title: str) -> None:
        """Boxed title line; also sizes the separators of this block."""
        width = len(title)
        self._separator = f"╠─{'─' * width}──"
        self._print(f"╔═{'═' * width}═╗")
        self._print(f"║ {title} ║")
        self._print(f"╠═{'═' * width}═╝")

    def profile(self, profile: Profile) -> None:
        self._print(f"║ {profile}")

    def counts(self, warmup: int, interactions: int, rounds: int) -> None:
        self._print(f"║ warmup: {warmup}")
        self._print(f"║ interactions: {interactions}")
        self._print(f"║ rounds: {rounds}")

    def setup_started(self, isolated: bool = False) -> None:
        self._print(self._separator)
        self._print("║ Setup (on worker)..." if isolated else "║ Setup...")

    def setup_done(self, setup_result: SetupResult) -> None:
        self._print(f"║ ─ {setup_result}")

    def warmup(self, warmup: int) -> None:
        self._print(f"║ Warmup ({warmup})...")

    def round_started(self, round_index: int, rounds: int) -> None:
        self._print(self._separator)
        self._print(f"║ ROUND: {round_index}/{rounds}")
        self._print("║")

    def running(self, interactions: int) -> None:
        self._print(f"║ ─ Running ({interactions})...")

    def teardown(self) -> None:
        self._print("║ ─ Teardown...")

    def round_metrics(self, round_result: RoundResult) -> None:
        self._print("║")
        self._metrics(round_result)

    def best_round(self, round_result: RoundResult) -> None:
        self._print(self._separator)
        self._print(f"║ BEST ROUND: {round_result.round}")
        self._print("║")
        self._metrics(round_result)

    def shutdown(self) -> None:
        self._print(self._separator)
        self._print("║ Shutdown...")

    def close(self, title: str) -> None:
        self._print(f"╚═{'═' * len(title)}══")
        self._print()

    def batch_summary(self, results: Sequence[BenchmarkResult]) -> None:
        """Fastest benchmark first, then one comparison per remaining benchmark."""
        winner = best_result(results)
        best = winner.best_round
        width = len(winner.title)
        separator = f"╠─{'─' * width}──"

        self._print(f"╔═{'═' * width}══")
        self._print(f"║ BEST BENCHMARK: {winner.title} (round: {best.round})")
        self._print("║")
        self._metrics(best)

        for comparison in compare_results(results):
            self._print(separator)
            self._print(f"║ BENCHMARK: {comparison.result.title} (round: {comparison.best_round.round})")
            self._metrics(comparison.best_round)
            self._print(
                f"║ »» Speed ratio: {comparison.ratio:.4f} ({comparison.slower_factor:.4f} x)"
            )

        self._print(f"╚═{'═' * width}══")
        self._print()
