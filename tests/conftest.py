"""Pytest configuration and fixtures."""

import io

import pytest

from microbench import Profile, RoundResult, TerminalReporter


@pytest.fixture
def report_stream():
    """In-memory stream capturing verbose report lines."""
    return io.StringIO()


@pytest.fixture
def reporter(report_stream):
    """TerminalReporter writing into report_stream."""
    return TerminalReporter(stream=report_stream)


@pytest.fixture
def quick_profile():
    """Small profile keeping engine tests fast."""
    return Profile("quick", warmup=2, interactions=5, rounds=3)


@pytest.fixture
def make_round():
    """Build a RoundResult lasting ``seconds`` for ``interactions`` interactions."""

    def _make(round_index=1, seconds=1.0, interactions=100, start=10.0):
        return RoundResult(round_index, start, start + seconds, interactions)

    return _make
