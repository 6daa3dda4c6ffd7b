"""Run a benchmark's setup and shutdown on an isolated worker process.

The host spawns one worker per run and talks to it over two queues:

    worker -> host   ("ready", pid)         handshake, sent first
    worker -> host   ("setup", value)       setup value once setup() returned
    host -> worker   "shutdown"             sent when the run reaches SHUTDOWN
    worker -> host   ("stopped", None)      after shutdown() returned
    worker -> host   ("failed", traceback)  instead of "setup"/"stopped"

Only the setup value crosses the process boundary; the service stays with the
worker, which passes it to the benchmark's own shutdown(). The worker runs
setup() and shutdown() on a single event loop that lives until shutdown, so
tasks started by setup() are still running when shutdown() gets the service.

There are no timeouts: a worker that never answers blocks the host. A run that
fails on the host side aborts the worker instead: it is terminated and
reaped, and the benchmark's shutdown() never runs.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import multiprocessing
import os
import traceback
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from microbench.benchmarks import Benchmark, SetupResult, as_setup_result
from microbench.utils.errors import WorkerError

LOGGER = logging.getLogger(__name__)

MSG_READY = "ready"
MSG_SETUP = "setup"
MSG_STOPPED = "stopped"
MSG_FAILED = "failed"
CMD_SHUTDOWN = "shutdown"


@dataclass(frozen=True)
class IsolateSetupHandle:
    """Setup value received from a worker plus the callback that stops it.

    Attributes:
        setup: Setup value produced by setup() on the worker
        shutdown: Coroutine function running the worker's shutdown sequence
        abort: Terminates the worker without running shutdown()
        pid: Worker process id
    """

    setup: Any
    shutdown: Callable[[], Awaitable[None]]
    abort: Callable[[], None]
    pid: int | None = None

    def __str__(self) -> str:
        return f"(setup: {self.setup}, worker: {self.pid})"


async def _resolve(value: Any) -> Any:
    """Await hook results that are awaitable; pass plain values through."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _worker_loop(benchmark: Benchmark, inbox: Any, outbox: Any) -> None:
    """Everything the worker does after the handshake, on one event loop.

    Tasks started by setup() keep running while the worker waits for the
    shutdown command, so shutdown() sees the service exactly as setup() left it.
    """
    try:
        setup_result = as_setup_result(await _resolve(benchmark.setup()))
    except Exception:
        outbox.put((MSG_FAILED, traceback.format_exc()))
        return
    outbox.put((MSG_SETUP, setup_result.setup))

    while await asyncio.to_thread(inbox.get) != CMD_SHUTDOWN:
        pass

    try:
        await _resolve(benchmark.shutdown(setup_result.setup, setup_result.service))
    except Exception:
        outbox.put((MSG_FAILED, traceback.format_exc()))
        return
    outbox.put((MSG_STOPPED, None))


def _worker_main(benchmark: Benchmark, inbox: Any, outbox: Any) -> None:
    """Worker process entry point."""
    outbox.put((MSG_READY, os.getpid()))
    asyncio.run(_worker_loop(benchmark, inbox, outbox))


class _WorkerChannel:
    """Host side of one worker: the process and both queues."""

    def __init__(self, benchmark: Benchmark):
        ctx = multiprocessing.get_context("spawn")
        self.inbox = ctx.Queue()
        self.outbox = ctx.Queue()
        self.process = ctx.Process(
            target=_worker_main,
            args=(benchmark, self.inbox, self.outbox),
            name=f"{type(benchmark).__name__}[{benchmark.title}]",
            daemon=True,
        )
        self.pid: int | None = None

    def start(self) -> None:
        self.process.start()

    async def receive(self, stage: str, expected: str) -> Any:
        """Wait for the next message; raise WorkerError if the worker reports a failure."""
        tag, payload = await asyncio.to_thread(self.outbox.get)
        LOGGER.debug("Worker %s -> host: %s", self.pid, tag)
        if tag == MSG_FAILED:
            self.close()
            raise WorkerError(stage, payload)
        if tag != expected:
            self.close()
            raise WorkerError(stage, f"unexpected message {tag!r} (expected {expected!r})")
        return payload

    def send(self, command: str) -> None:
        LOGGER.debug("Host -> worker %s: %s", self.pid, command)
        self.inbox.put(command)

    def close(self) -> None:
        """Terminate the worker process and release its queues."""
        if self.process.is_alive():
            self.process.terminate()
        self.process.join()
        for queue in (self.inbox, self.outbox):
            queue.close()
            queue.join_thread()


async def run_setup_on_worker(
    benchmark: Benchmark,
    shutdown_delay: float | None = None,
) -> IsolateSetupHandle:
    """Spawn a worker, run benchmark.setup() there and return its setup value.

    Args:
        benchmark: Picklable benchmark; rebuilt in the worker by unpickling
        shutdown_delay: Seconds to pause after the worker is terminated, for
            resources released outside the interpreter's control

    Returns:
        Handle with the setup value and the shutdown callback
    """
    channel = _WorkerChannel(benchmark)
    channel.start()

    channel.pid = await channel.receive("setup", MSG_READY)
    LOGGER.debug("Worker %s ready for %r", channel.pid, benchmark.title)
    setup = await channel.receive("setup", MSG_SETUP)

    async def shutdown() -> None:
        channel.send(CMD_SHUTDOWN)
        await channel.receive("shutdown", MSG_STOPPED)
        channel.close()
        LOGGER.debug("Worker %s stopped", channel.pid)
        if shutdown_delay:
            await asyncio.sleep(shutdown_delay)

    def abort() -> None:
        channel.close()
        LOGGER.debug("Worker %s terminated without shutdown", channel.pid)

    return IsolateSetupHandle(setup=setup, shutdown=shutdown, abort=abort, pid=channel.pid)


class IsolatedBenchmark(Benchmark[IsolateSetupHandle, Any]):
    """Wraps a benchmark so setup/shutdown run on a worker process.

    job() and teardown() still run in the caller with the worker's setup value
    and no service.
    """

    def __init__(self, benchmark: Benchmark, shutdown_delay: float | None = None):
        super().__init__(benchmark.title)
        self.benchmark = benchmark
        self.shutdown_delay = shutdown_delay

    async def setup(self) -> SetupResult[IsolateSetupHandle, Any]:
        handle = await run_setup_on_worker(self.benchmark, shutdown_delay=self.shutdown_delay)
        return SetupResult(handle, None)

    def job(self, setup: IsolateSetupHandle, service: Any) -> Any:
        return self.benchmark.job(setup.setup, None)

    def teardown(self, setup: IsolateSetupHandle, service: Any) -> Any:
        return self.benchmark.teardown(setup.setup, None)

    async def shutdown(self, setup: IsolateSetupHandle, service: Any) -> None:
        await setup.shutdown()

    def abort(self, setup: IsolateSetupHandle) -> None:
        """Reap the worker after a failed run; the benchmark's shutdown() is not run."""
        setup.abort()
