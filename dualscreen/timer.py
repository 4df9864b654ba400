"""Millisecond stopwatch and periodic timers."""

from __future__ import annotations

import time
from typing import Callable

_UINT32 = 0xFFFFFFFF

Clock = Callable[[], int]


def monotonic_millis() -> int:
    """Milliseconds from a monotonic clock, wrapping at 32 bits."""
    return (time.monotonic_ns() // 1_000_000) & _UINT32


def _since(now: int, then: int) -> int:
    return (now - then) & _UINT32


class Timer:
    """A stopwatch that measures elapsed milliseconds."""

    def __init__(self, clock: Clock = monotonic_millis) -> None:
        self._clock = clock
        self._start_time = 0
        self._elapsed_time = 0
        self._running = False

    def start(self) -> None:
        """Start timing unless already running."""
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    def stop(self) -> None:
        """Stop timing and keep the elapsed time."""
        if self._running:
            self._elapsed_time = _since(self._clock(), self._start_time)
            self._running = False

    def reset(self) -> None:
        """Restart the measurement from now without changing the running state."""
        self._start_time = self._clock()
        self._elapsed_time = 0

    def elapsed(self) -> int:
        """Milliseconds measured so far."""
        if self._running:
            return _since(self._clock(), self._start_time)
        return self._elapsed_time

    def is_running(self) -> bool:
        return self._running


class PeriodicTimer:
    """Reports once each time a period has passed."""

    def __init__(self, period: int, clock: Clock = monotonic_millis) -> None:
        self.period = period
        self._clock = clock
        self._last_time = clock()

    def check(self) -> bool:
        """Return True, and start a new period, if the current one has passed."""
        now = self._clock()
        if _since(now, self._last_time) >= self.period:
            self._last_time = now
            return True
        return False

    def reset(self) -> None:
        """Start a new period from now."""
        self._last_time = self._clock()