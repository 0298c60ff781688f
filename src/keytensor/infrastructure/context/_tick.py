"""
Monotonic tick counter.

Ticks are generation stamps: a mutable object records `next_tick()` each time
it changes, and any holder can compare stamps to detect staleness cheaply.

Unlike the default-context registers, the process-wide counter is shared by
every thread and task so that ticks stay globally unique; increments are
serialized by a lock.
"""

from __future__ import annotations

import threading


class TickCounter:
    """
    Issuer of strictly increasing integers.

    Parameters
    ----------
    start : int
        Value reported by `current()` before the first `next()`; the first
        issued tick is ``start + 1``.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def current(self) -> int:
        """Return the most recently issued tick without incrementing."""
        return self._value

    def __repr__(self) -> str:
        return f"TickCounter(current={self._value})"


_GLOBAL_TICKS = TickCounter()


def next_tick() -> int:
    """Issue the next process-wide tick (1 on the first call)."""
    return _GLOBAL_TICKS.next()


def current_tick() -> int:
    """Return the last process-wide tick issued, or 0 if none was."""
    return _GLOBAL_TICKS.current()
