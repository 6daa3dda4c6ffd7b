"""Result schema for microbench runs.

RoundResult holds the timestamp pair of one timed round and derives every
metric from it. BenchmarkResult ties the rounds of one run to the benchmark
that produced them.
"""

import math
from dataclasses import dataclass, field
from datetime import timedelta
from functools import reduce
from typing import Any

from microbench.benchmarks import Benchmark
from microbench.utils.formatting import format_hertz, format_interaction_time


@dataclass(frozen=True)
class RoundResult:
    """One timed round.

    Attributes:
        round: 1-based round index
        start_time: time.perf_counter() value taken before the first job call
        end_time: time.perf_counter() value taken after the last job call
        interactions: Number of job calls inside the timed window
    """

    round: int
    start_time: float
    end_time: float
    interactions: int

    @property
    def duration_seconds(self) -> float:
        return self.end_time - self.start_time

    @property
    def duration_ms(self) -> float:
        return self.duration_seconds * 1000.0

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.duration_seconds)

    @property
    def hertz(self) -> float:
        """Interactions per second (inf for a zero-length round)."""
        seconds = self.duration_seconds
        if seconds == 0:
            return math.inf if self.interactions else math.nan
        return self.interactions / seconds

    @property
    def interaction_time_ms(self) -> float:
        """Milliseconds per interaction."""
        if self.interactions == 0:
            return math.inf if self.duration_ms else math.nan
        return self.duration_ms / self.interactions

    @property
    def hertz_formatted(self) -> str:
        return format_hertz(self.hertz)

    @property
    def interaction_time_formatted(self) -> str:
        return format_interaction_time(self.interaction_time_ms)

    def best(self, other: "RoundResult") -> "RoundResult":
        """Return the faster of the two rounds; self wins exact ties."""
        return other if other.hertz > self.hertz else self

    def to_dict(self) -> dict[str, Any]:
        """Convert round result to dictionary format."""
        return {
            "round": self.round,
            "interactions": self.interactions,
            "duration_ms": self.duration_ms,
            "hertz": self.hertz,
            "interaction_time_ms": self.interaction_time_ms,
        }

    def __str__(self) -> str:
        return (
            f"RoundResult{{round: {self.round}, interactions: {self.interactions}, "
            f"hertz: {self.hertz_formatted}, interactionTime: {self.interaction_time_formatted}}}"
        )


@dataclass
class BenchmarkResult:
    """Rounds of one benchmark run, in execution order.

    Attributes:
        benchmark: The benchmark that was run (never an isolation wrapper)
        rounds: Round results for rounds 1..N
    """

    benchmark: Benchmark
    rounds: list[RoundResult] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.benchmark.title

    @property
    def best_round(self) -> RoundResult:
        """Fastest round; the earliest one on exact ties."""
        if not self.rounds:
            raise ValueError(f"{self.title}: no rounds to pick a best from")
        return reduce(RoundResult.best, self.rounds)

    def best(self, other: "BenchmarkResult") -> "BenchmarkResult":
        """Return the result with the faster best round; self wins exact ties."""
        return other if other.best_round.hertz > self.best_round.hertz else self

    def to_dict(self) -> dict[str, Any]:
        """Convert benchmark result to dictionary format."""
        return {
            "title": self.title,
            "rounds": [r.to_dict() for r in self.rounds],
            "best_round": self.best_round.round if self.rounds else None,
        }

    def __str__(self) -> str:
        return f"BenchmarkResult{{benchmark: {self.benchmark!r}, rounds: {len(self.rounds)}}}"
