"""Execution engine for microbench.

Drives one benchmark through its lifecycle:

    SETUP -> SETTLE -> WARMUP -> (SETTLE -> ROUND -> TEARDOWN) x rounds -> SHUTDOWN

Every hook call is awaited before the next one starts. A failure in setup,
job or teardown propagates to the caller straight away and shutdown is not
run: callers that need cleanup on failure must wrap the run themselves. An
isolated run that fails after setup aborts its worker process, which is
terminated and reaped without running shutdown.
"""

import asyncio
import inspect
import logging
import time
from typing import Any

from microbench.benchmarks import Benchmark, as_setup_result
from microbench.configs.profiles import DEFAULT_PROFILE, Profile
from microbench.isolation import IsolatedBenchmark
from microbench.reporting.terminal_reporter import TerminalReporter
from microbench.schema import BenchmarkResult, RoundResult

LOGGER = logging.getLogger(__name__)

# Pause after setup and before each timed round so background work started
# by setup can drain before measuring.
SETTLE_DELAY_SECONDS = 0.01


async def _resolve(value: Any) -> Any:
    """Await hook results that are awaitable; pass plain values through."""
    if inspect.isawaitable(value):
        return await value
    return value


def resolve_counts(
    profile: Profile | None,
    warmup: int | None = None,
    interactions: int | None = None,
    rounds: int | None = None,
) -> tuple[int, int, int]:
    """Merge explicit overrides with the profile (or the default profile).

    Returns:
        (warmup, interactions, rounds)
    """
    base = profile or DEFAULT_PROFILE
    return (
        base.warmup if warmup is None else warmup,
        base.interactions if interactions is None else interactions,
        base.rounds if rounds is None else rounds,
    )


async def arun_benchmark(
    benchmark: Benchmark,
    profile: Profile | None = None,
    warmup: int | None = None,
    interactions: int | None = None,
    rounds: int | None = None,
    setup_on_isolate: bool = False,
    shutdown_isolate_delay: float | None = None,
    verbose: bool = False,
    reporter: TerminalReporter | None = None,
    settle_delay: float = SETTLE_DELAY_SECONDS,
) -> BenchmarkResult:
    """Run one benchmark through its full lifecycle.

    Args:
        benchmark: Benchmark to run
        profile: Supplies warmup/interactions/rounds (defaults to the normal profile)
        warmup: Override of the profile's warmup count
        interactions: Override of the profile's interactions per round
        rounds: Override of the profile's round count
        setup_on_isolate: Run setup() and shutdown() on a worker process
        shutdown_isolate_delay: Seconds to pause after the worker terminates
        verbose: Emit the textual report while the run progresses
        reporter: Reporter used when verbose (a stdout TerminalReporter by default)
        settle_delay: Seconds to pause after setup and before every round

    Returns:
        BenchmarkResult referencing ``benchmark`` with one RoundResult per round
    """
    target = benchmark
    if setup_on_isolate:
        target = IsolatedBenchmark(benchmark, shutdown_delay=shutdown_isolate_delay)

    warmup, interactions, rounds = resolve_counts(profile, warmup, interactions, rounds)
    report = (reporter or TerminalReporter()) if verbose else None

    if report:
        report.title(benchmark.title)
        if profile is not None:
            report.profile(profile)
        else:
            report.counts(warmup, interactions, rounds)
        report.setup_started(isolated=setup_on_isolate)

    LOGGER.debug("%s: setup (isolated=%s)", benchmark.title, setup_on_isolate)
    setup_result = as_setup_result(await _resolve(target.setup()))
    setup, service = setup_result.setup, setup_result.service

    if report:
        report.setup_done(setup_result)

    try:
        round_results = await _measure(
            target, benchmark, setup, service, warmup, interactions, rounds, report, settle_delay
        )
    except BaseException:
        if isinstance(target, IsolatedBenchmark):
            target.abort(setup)
        raise

    if report:
        report.shutdown()
    LOGGER.debug("%s: shutdown", benchmark.title)
    await _resolve(target.shutdown(setup, service))

    if report:
        report.close(benchmark.title)

    return BenchmarkResult(benchmark, round_results)


async def _measure(
    target: Benchmark,
    benchmark: Benchmark,
    setup: Any,
    service: Any,
    warmup: int,
    interactions: int,
    rounds: int,
    report: TerminalReporter | None,
    settle_delay: float,
) -> list[RoundResult]:
    """SETTLE, WARMUP and the timed rounds with their teardowns."""
    await asyncio.sleep(settle_delay)

    if report:
        report.warmup(warmup)
    LOGGER.debug("%s: warmup x%d", benchmark.title, warmup)
    for _ in range(warmup):
        await _resolve(target.job(setup, service))

    round_results: list[RoundResult] = []
    for r in range(1, rounds + 1):
        if report:
            report.round_started(r, rounds)

        await asyncio.sleep(settle_delay)

        if report:
            report.running(interactions)

        start_time = time.perf_counter()
        for _ in range(interactions):
            await _resolve(target.job(setup, service))
        end_time = time.perf_counter()

        round_result = RoundResult(r, start_time, end_time, interactions)
        round_results.append(round_result)

        if report:
            report.teardown()
        await _resolve(target.teardown(setup, service))

        LOGGER.debug("%s: round %d/%d %s", benchmark.title, r, rounds, round_result.hertz_formatted)
        if report:
            report.round_metrics(round_result)

    if rounds > 1 and report:
        report.best_round(BenchmarkResult(benchmark, round_results).best_round)

    return round_results


def run_benchmark(benchmark: Benchmark, **kwargs: Any) -> BenchmarkResult:
    """Synchronous wrapper around arun_benchmark(); see it for the arguments.

    Must not be called from inside a running event loop; await
    arun_benchmark() there instead.
    """
    return asyncio.run(arun_benchmark(benchmark, **kwargs))
