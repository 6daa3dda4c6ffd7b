"""Tests for RoundResult metrics and formatting."""

import math
from datetime import timedelta

import pytest

from microbench.schema import BenchmarkResult, RoundResult
from microbench.utils.formatting import format_hertz, format_interaction_time

from doubles import NoopBenchmark


class TestRoundResultMetrics:
    def test_hertz_and_interaction_time(self, make_round):
        r = make_round(seconds=0.5, interactions=100)
        assert r.hertz == pytest.approx(200.0)
        assert r.interaction_time_ms == pytest.approx(5.0)

    def test_formulas_exact(self):
        r = RoundResult(1, 2.0, 2.25, 7)
        assert r.hertz == 7 / (2.25 - 2.0)
        assert r.interaction_time_ms == ((2.25 - 2.0) * 1000.0) / 7

    def test_duration_is_timedelta(self, make_round):
        r = make_round(seconds=6.366585)
        assert isinstance(r.duration, timedelta)
        assert str(r.duration) == "0:00:06.366585"
        assert r.duration_ms == pytest.approx(6366.585)

    def test_zero_duration_is_degenerate_not_an_error(self):
        r = RoundResult(1, 5.0, 5.0, 10)
        assert math.isinf(r.hertz)
        assert r.interaction_time_ms == 0.0

    def test_zero_interactions_is_degenerate(self):
        r = RoundResult(1, 5.0, 6.0, 0)
        assert r.hertz == 0.0
        assert math.isinf(r.interaction_time_ms)

    def test_immutable(self, make_round):
        r = make_round()
        with pytest.raises(AttributeError):
            r.round = 2

    def test_best_keeps_self_on_tie(self, make_round):
        a = make_round(round_index=1, seconds=1.0)
        b = make_round(round_index=2, seconds=1.0, start=50.0)
        assert a.best(b) is a
        assert b.best(a) is b

    def test_best_picks_faster(self, make_round):
        slow = make_round(round_index=1, seconds=2.0)
        fast = make_round(round_index=2, seconds=1.0)
        assert slow.best(fast) is fast

    def test_to_dict(self, make_round):
        d = make_round(round_index=3, seconds=0.25, interactions=50).to_dict()
        assert d["round"] == 3
        assert d["interactions"] == 50
        assert d["hertz"] == pytest.approx(200.0)


class TestFormatting:
    @pytest.mark.parametrize(
        "hertz,expected",
        [
            (15.707, "15.7070 Hz"),
            (1.5, "1.5000 Hz"),
            (1.0, "1.00000000 Hz"),
            (0.5, "0.50000000 Hz"),
            (0.00001, "1e-05 Hz"),
            (0.0, "0.0 Hz"),
        ],
    )
    def test_hertz(self, hertz, expected):
        assert format_hertz(hertz) == expected

    @pytest.mark.parametrize(
        "ms,expected",
        [
            (2500.0, "2.500 sec"),
            (2000.0, "2.000 sec"),
            (1500.0, "1.500000 sec"),
            (1000.0, "1000.000 ms"),
            (63.666, "63.666 ms"),
            (1.0, "1.000 ms"),
            (0.5, "500.000 µs"),
            (0.1, "100.000 µs"),
            (0.05, "50.000000 µs"),
        ],
    )
    def test_interaction_time(self, ms, expected):
        assert format_interaction_time(ms) == expected

    def test_round_properties_use_formatters(self, make_round):
        r = make_round(seconds=6.3666, interactions=100)
        assert r.hertz_formatted == format_hertz(r.hertz)
        assert r.interaction_time_formatted == "63.666 ms"


class TestBenchmarkResult:
    def test_best_round_tie_prefers_earliest(self, make_round):
        rounds = [
            make_round(1, seconds=2.0),
            make_round(2, seconds=1.0),
            make_round(3, seconds=1.0),
        ]
        result = BenchmarkResult(NoopBenchmark(), rounds)
        assert result.best_round.round == 2

    def test_best_round_of_empty_raises(self):
        with pytest.raises(ValueError):
            BenchmarkResult(NoopBenchmark()).best_round

    def test_title_and_to_dict(self, make_round):
        result = BenchmarkResult(NoopBenchmark("b"), [make_round(1), make_round(2, seconds=0.5)])
        assert result.title == "b"
        d = result.to_dict()
        assert d["best_round"] == 2
        assert len(d["rounds"]) == 2
