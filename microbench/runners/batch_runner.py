"""Batch runner: several benchmarks, one after another, then ranked."""

import asyncio
import logging
import random
from collections.abc import Iterable
from typing import Any

from microbench.benchmarks import Benchmark
from microbench.configs.profiles import Profile
from microbench.reporting.terminal_reporter import TerminalReporter
from microbench.runners.benchmark_runner import SETTLE_DELAY_SECONDS, arun_benchmark
from microbench.schema import BenchmarkResult

LOGGER = logging.getLogger(__name__)


def shuffled(benchmarks: Iterable[Benchmark], seed: int | None = None) -> list[Benchmark]:
    """Return a shuffled copy; the same seed always gives the same permutation."""
    ordered = list(benchmarks)
    random.Random(seed).shuffle(ordered)
    return ordered


async def arun_all(
    benchmarks: Iterable[Benchmark],
    profile: Profile | None = None,
    warmup: int | None = None,
    interactions: int | None = None,
    rounds: int | None = None,
    setup_on_isolate: bool = False,
    shutdown_isolate_delay: float | None = None,
    shuffle: bool = False,
    shuffle_seed: int | None = None,
    interaction_delay: float | None = None,
    verbose: bool = False,
    reporter: TerminalReporter | None = None,
    settle_delay: float = SETTLE_DELAY_SECONDS,
) -> list[BenchmarkResult]:
    """Run benchmarks sequentially and report how they rank.

    A benchmark starts only after the previous one finished its shutdown. A
    failure in any benchmark aborts the whole batch.

    Args:
        benchmarks: Benchmarks to run, in order
        profile, warmup, interactions, rounds, setup_on_isolate,
            shutdown_isolate_delay, verbose, settle_delay: As for arun_benchmark()
        shuffle: Run the benchmarks in a shuffled order
        shuffle_seed: Seed making the shuffle deterministic
        interaction_delay: Seconds to pause between two benchmarks
        reporter: Reporter used when verbose (a stdout TerminalReporter by default)

    Returns:
        Results in execution order (shuffled order when shuffle is set)
    """
    order = shuffled(benchmarks, shuffle_seed) if shuffle else list(benchmarks)
    if shuffle:
        LOGGER.info("Shuffled %d benchmarks (seed=%s)", len(order), shuffle_seed)
    LOGGER.info("Batch order: %s", ", ".join(b.title for b in order))

    report = (reporter or TerminalReporter()) if verbose else None

    results: list[BenchmarkResult] = []
    for i, benchmark in enumerate(order):
        if i > 0 and interaction_delay:
            await asyncio.sleep(interaction_delay)
        result = await arun_benchmark(
            benchmark,
            profile=profile,
            warmup=warmup,
            interactions=interactions,
            rounds=rounds,
            setup_on_isolate=setup_on_isolate,
            shutdown_isolate_delay=shutdown_isolate_delay,
            verbose=verbose,
            reporter=report,
            settle_delay=settle_delay,
        )
        results.append(result)

    if report and len(results) > 1:
        report.batch_summary(results)

    return results


def run_all(benchmarks: Iterable[Benchmark], **kwargs: Any) -> list[BenchmarkResult]:
    """Synchronous wrapper around arun_all(); see it for the arguments."""
    return asyncio.run(arun_all(benchmarks, **kwargs))
