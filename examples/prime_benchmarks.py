#!/usr/bin/env python3
"""
Example: Compare a cached and an uncached prime counter.

Runs both benchmarks as a batch and prints the per-round report followed by
the ranking of the two.
"""

import math
import random

from microbench import Benchmark, Profile, SetupResult, run_all, save_results_csv


class Prime:
    """Counts primes by trial division."""

    def count_primes(self, limit):
        return sum(1 for n in range(2, limit + 1) if self.is_prime(n))

    def is_prime(self, n):
        if n <= 1:
            return False
        if n == 2:
            return True
        if n % 2 == 0:
            return False
        for b in range(3, math.isqrt(n) + 1, 2):
            if n % b == 0:
                return False
        return True

    def __str__(self):
        return "Prime{}"


class PrimeCached(Prime):
    """Remembers every prime it has already proven."""

    def __init__(self):
        self.cache = set()

    def clear_cache(self):
        self.cache.clear()

    def is_prime(self, n):
        if n in self.cache:
            return True
        if super().is_prime(n):
            self.cache.add(n)
            return True
        return False

    def __str__(self):
        return f"PrimeCached{{cache: {len(self.cache)}}}"


class PrimeBenchmark(Benchmark):
    def __init__(self, seed=None):
        super().__init__(f"PrimeCounter(seed: {seed if seed is not None else '*'})")
        self.seed = seed

    def setup(self):
        limit = random.Random(self.seed).randrange(20000)
        return SetupResult(limit, Prime())

    def job(self, setup, service):
        (service or Prime()).count_primes(setup)


class PrimeCachedBenchmark(Benchmark):
    def __init__(self, seed=None):
        super().__init__(f"PrimeCounterCached(seed: {seed if seed is not None else '*'})")
        self.seed = seed

    def setup(self):
        limit = random.Random(self.seed).randrange(20000)
        return SetupResult(limit, PrimeCached())

    def job(self, setup, service):
        (service or PrimeCached()).count_primes(setup)

    def teardown(self, setup, service):
        # Each round starts cold
        if service is not None:
            service.clear_cache()


def main():
    """Run the prime counter batch."""
    profile = Profile("custom", warmup=10, interactions=100, rounds=3)
    seed = 123

    results = run_all(
        [PrimeCachedBenchmark(seed), PrimeBenchmark(seed)],
        profile=profile,
        shuffle=True,
        shuffle_seed=seed,
        verbose=True,
    )

    if save_results_csv(results, "output/prime_benchmarks.csv"):
        print("Results written to output/prime_benchmarks.csv")


if __name__ == "__main__":
    main()
