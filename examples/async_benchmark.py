#!/usr/bin/env python3
"""
Example: Benchmark a coroutine job with setup on an isolated worker.

setup() and shutdown() run on a separate process; job() and teardown() run
here with the worker's setup value and no service.
"""

import asyncio

from microbench import Benchmark, FAST, arun_benchmark


class AsyncQueueBenchmark(Benchmark):
    def __init__(self, batch_size=64):
        super().__init__(f"AsyncQueue(batch: {batch_size})")
        self.batch_size = batch_size

    async def setup(self):
        await asyncio.sleep(0.01)
        return self.batch_size, None

    async def job(self, setup, service):
        queue = asyncio.Queue()
        for i in range(setup):
            queue.put_nowait(i)
        while not queue.empty():
            await queue.get()


async def main():
    """Run the async benchmark on the fast profile."""
    result = await arun_benchmark(
        AsyncQueueBenchmark(),
        profile=FAST,
        setup_on_isolate=True,
        shutdown_isolate_delay=0.1,
        verbose=True,
    )
    print(f"Best round: {result.best_round}")


if __name__ == "__main__":
    asyncio.run(main())
