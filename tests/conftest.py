"""Shared test fixtures for the speedread test suite.

WHY: The Reader sleeps, reads the clock, and polls a terminal. Tests
must not wait in real time or need a real terminal, so every test that
drives the loop uses the same deterministic stand-ins.

HOW: FakeClock advances only when its sleep() is called (or when a test
advances it). FakeKeyboard replays scripted keys, each becoming pending
once the fake clock reaches its timestamp; a blocking read() while
nothing is due jumps the clock forward to the next key, which is what a
real blocking read looks like from the outside. Renderer output goes to
an in-memory stream.

RULES:
- No test touches /dev/tty or sleeps for real
- Key scripts are lists of (time_s, key) pairs, sorted by time
"""

import io
from typing import Callable, List, Optional, Tuple

import pytest

from speedread.reader import Reader
from speedread.terminal.render import Renderer


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeKeyboard:
    """Scripted control channel driven by a FakeClock.

    Args:
        clock: The clock the Reader uses.
        keys: (time_s, key) pairs relative to the clock's start.
        on_read: Optional hook called with each key as it is read.
    """

    def __init__(
        self,
        clock: FakeClock,
        keys: List[Tuple[float, str]],
        on_read: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.clock = clock
        self.origin = clock.now
        self.keys = list(keys)
        self.on_read = on_read
        self.reads: List[str] = []
        self.closed = False

    def pending(self) -> bool:
        return bool(self.keys) and self.origin + self.keys[0][0] <= self.clock.now

    def read(self) -> str:
        if not self.keys:
            return ""
        due, key = self.keys.pop(0)
        if self.origin + due > self.clock.now:
            self.clock.now = self.origin + due
        self.reads.append(key)
        if self.on_read is not None:
            self.on_read(key)
        return key

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def screen():
    return io.StringIO()


@pytest.fixture
def renderer(screen):
    return Renderer(screen)


@pytest.fixture
def make_reader(clock, renderer):
    """Factory for a Reader wired to the fake clock and in-memory screen."""

    def _make(keyboard=None, **kwargs):
        return Reader(
            renderer,
            keyboard=keyboard,
            clock=clock,
            sleep=clock.sleep,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_keyboard(clock):
    """Factory for a FakeKeyboard on the shared fake clock."""

    def _make(keys, on_read=None):
        return FakeKeyboard(clock, keys, on_read=on_read)

    return _make
