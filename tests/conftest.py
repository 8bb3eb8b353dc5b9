"""Shared fixtures for debug logger tests"""

import io

import pytest

from debug_module import Debugger, reset_default

NS_PER_MS = 1_000_000


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms * NS_PER_MS


class Exploding:
    """Fails on any conversion to text."""

    def __str__(self):
        raise AssertionError("formatted a disabled logger argument")

    __repr__ = __str__

    def __format__(self, spec):
        raise AssertionError("formatted a disabled logger argument")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def debugger(stream, clock):
    return Debugger(
        spec="test:other,test:child*,-test:child2",
        stream=stream,
        clock=clock,
    )


@pytest.fixture(autouse=True)
def fresh_default():
    reset_default()
    yield
    reset_default()
