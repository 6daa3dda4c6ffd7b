"""Base benchmark interface for microbench.

A benchmark is a unit of work driven by the execution engine through
setup, warmup, timed rounds, teardown and shutdown. Only job() is mandatory;
the other hooks default to neutral behavior.

Any hook may be a plain method or a coroutine; the engine awaits whatever
awaitable a hook returns before moving on.

Example usage:
    class SortBenchmark(Benchmark[list, None]):
        def __init__(self):
            super().__init__("sorted(10k)")

        def setup(self):
            return SetupResult(list(range(10_000, 0, -1)), None)

        def job(self, setup, service):
            sorted(setup)
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any, Generic, NamedTuple, TypeVar

S = TypeVar("S")
O = TypeVar("O")


class SetupResult(NamedTuple, Generic[S, O]):
    """Value pair produced by Benchmark.setup().

    Attributes:
        setup: Setup value handed to every job/teardown/shutdown call. Must be
            picklable when the benchmark runs with isolation.
        service: Optional helper object owned by a single run. It is never
            sent across an isolation boundary.
    """

    setup: S
    service: O | None = None

    def __str__(self) -> str:
        return f"(setup: {self.setup}, service: {self.service})"


class Benchmark(ABC, Generic[S, O]):
    """Abstract base class for benchmarks."""

    def __init__(self, title: str):
        self.title = title

    def setup(self) -> "SetupResult[S, O] | Awaitable[SetupResult[S, O]]":
        """Prepare the setup value and optional service; runs once per run."""
        return SetupResult(None, None)

    @abstractmethod
    def job(self, setup: S, service: O | None) -> Any:
        """One interaction: the unit of work being measured."""

    def teardown(self, setup: S, service: O | None) -> Any:
        """Runs after every round, outside the timed window."""
        return None

    def shutdown(self, setup: S, service: O | None) -> Any:
        """Runs once after the last round."""
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.title!r})"


def as_setup_result(value: Any) -> SetupResult:
    """Normalize what setup() returned: a SetupResult or a plain (setup, service) pair."""
    if isinstance(value, SetupResult):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return SetupResult(*value)
    raise TypeError(f"setup() must return SetupResult or a (setup, service) tuple, got {value!r}")
