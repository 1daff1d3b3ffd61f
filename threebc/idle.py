"""Timed pauses of the virtual machine."""

from __future__ import annotations

import time
from enum import Enum

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


class SleepMode(Enum):
    """Kinds of pause a program can request."""

    NONE = 0
    REAL_TICK = 1
    FAKE_TICK = 2
    MICROSECONDS = 3
    MILLISECONDS = 4
    SECONDS = 5


_STEP_NS = {
    SleepMode.MICROSECONDS: _NS_PER_US,
    SleepMode.MILLISECONDS: _NS_PER_MS,
    SleepMode.SECONDS: _NS_PER_S,
}


class Sleeper:
    """Tracks an ongoing pause; ``idle`` is polled until it returns False.

    *clock* is a callable returning a monotonic time in nanoseconds.
    Real ticks are counted in microseconds of that clock.
    """

    def __init__(self, clock=None):
        self.clock = clock if clock is not None else time.monotonic_ns
        self.mode = SleepMode.NONE
        self.period = 0
        self.called = None

    def start(self, mode, period):
        """Begin a pause of *period* units of *mode*."""
        self.mode = SleepMode(mode)
        self.period = period
        self.called = None

    def reset(self):
        """Cancel any pause."""
        self.mode = SleepMode.NONE
        self.period = 0
        self.called = None

    def idle(self):
        """Advance the pause; return True while it is still going on."""
        if self.mode is SleepMode.NONE:
            return False

        if self.mode is SleepMode.FAKE_TICK:
            remaining = self.period
            self.period -= 1
            return bool(remaining)

        now = self.clock()

        if self.mode is SleepMode.REAL_TICK:
            ticks = now // _NS_PER_US
            if self.called is None:
                self.called = ticks
            elif self.period <= ticks - self.called:
                return False
            return True

        step = _STEP_NS[self.mode]
        if self.called is None:
            self.called = now
        elif now - self.called >= step:
            self.called = now
            self.period -= 1
        return bool(self.period)