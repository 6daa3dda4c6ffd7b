"""Tests for the sequential batch runner."""

import pytest

from microbench import Profile, run_all
from microbench.runners import batch_runner, shuffled
from microbench.utils.compare import rank_results

from doubles import FailingSetupBenchmark, NoopBenchmark, RecordingBenchmark, SleepingBenchmark


class OrderLog:
    """Shared log proving benchmarks never overlap."""

    def __init__(self):
        self.entries = []


class LoggedBenchmark(RecordingBenchmark):
    def __init__(self, title, log):
        super().__init__(title)
        self.log = log

    def setup(self):
        self.log.entries.append((self.title, "setup"))
        return super().setup()

    def shutdown(self, setup, service):
        self.log.entries.append((self.title, "shutdown"))


PROFILE = Profile("tiny", warmup=0, interactions=2, rounds=1)


class TestSequencing:
    def test_returns_results_in_execution_order(self):
        benches = [NoopBenchmark("a"), NoopBenchmark("b"), NoopBenchmark("c")]
        results = run_all(benches, profile=PROFILE, settle_delay=0)
        assert [r.title for r in results] == ["a", "b", "c"]

    def test_each_benchmark_finishes_before_next_starts(self):
        log = OrderLog()
        benches = [LoggedBenchmark("a", log), LoggedBenchmark("b", log)]
        run_all(benches, profile=PROFILE, settle_delay=0)
        assert log.entries == [("a", "setup"), ("a", "shutdown"), ("b", "setup"), ("b", "shutdown")]

    def test_failure_aborts_batch(self):
        after = RecordingBenchmark("after")
        with pytest.raises(RuntimeError):
            run_all([NoopBenchmark("before"), FailingSetupBenchmark(), after], profile=PROFILE, settle_delay=0)
        assert after.events == []

    def test_empty_batch(self):
        assert run_all([], profile=PROFILE) == []

    def test_interaction_delay_between_benchmarks_only(self, mocker):
        sleep = mocker.patch.object(batch_runner.asyncio, "sleep", wraps=batch_runner.asyncio.sleep)
        run_all(
            [NoopBenchmark("a"), NoopBenchmark("b"), NoopBenchmark("c")],
            profile=PROFILE,
            interaction_delay=0.002,
            settle_delay=0,
        )
        delays = [c.args[0] for c in sleep.call_args_list]
        assert delays.count(0.002) == 2


class TestShuffle:
    def test_same_seed_same_permutation(self):
        benches = [NoopBenchmark(str(i)) for i in range(10)]
        first = [b.title for b in shuffled(benches, seed=42)]
        second = [b.title for b in shuffled(benches, seed=42)]
        assert first == second
        assert sorted(first) == sorted(b.title for b in benches)

    def test_input_not_mutated(self):
        benches = [NoopBenchmark(str(i)) for i in range(5)]
        shuffled(benches, seed=1)
        assert [b.title for b in benches] == ["0", "1", "2", "3", "4"]

    def test_run_all_uses_seeded_order(self):
        benches = [NoopBenchmark(str(i)) for i in range(6)]
        expected = [b.title for b in shuffled(benches, seed=7)]
        results = run_all(benches, profile=PROFILE, shuffle=True, shuffle_seed=7, settle_delay=0)
        assert [r.title for r in results] == expected

    def test_no_shuffle_without_flag(self):
        benches = [NoopBenchmark(str(i)) for i in range(6)]
        results = run_all(benches, profile=PROFILE, shuffle_seed=7, settle_delay=0)
        assert [r.title for r in results] == [str(i) for i in range(6)]


class TestBatchReport:
    def test_summary_ranks_faster_first(self, reporter, report_stream):
        fast = SleepingBenchmark("Fast", 0.001)
        slow = SleepingBenchmark("Slow", 0.02)
        results = run_all(
            [slow, fast],
            profile=Profile("p", warmup=0, interactions=3, rounds=1),
            verbose=True,
            reporter=reporter,
            settle_delay=0,
        )
        assert [r.title for r in results] == ["Slow", "Fast"]
        assert rank_results(results)[0].title == "Fast"

        text = report_stream.getvalue()
        assert "║ BEST BENCHMARK: Fast (round: 1)" in text
        assert "║ BENCHMARK: Slow (round: 1)" in text
        assert "║ »» Speed ratio: 0." in text
        assert text.index("BEST BENCHMARK") > text.index("║ Slow ║")

    def test_no_summary_for_single_benchmark(self, reporter, report_stream):
        run_all([NoopBenchmark("only")], profile=PROFILE, verbose=True, reporter=reporter, settle_delay=0)
        assert "BEST BENCHMARK" not in report_stream.getvalue()
