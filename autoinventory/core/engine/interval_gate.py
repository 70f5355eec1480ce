"""Tick gate deciding when a new sampling cycle may start.

The gate never reads a clock itself; callers pass the current millisecond
counter. Elapsed time is taken modulo 2**32 so a wrapping counter keeps working.
"""

from __future__ import annotations

from typing import Optional

_COUNTER_MODULUS = 2**32


class IntervalGate:
    def __init__(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        self._interval_ms = interval_ms
        self._last_start: Optional[int] = None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def ready(self, now_ms: int) -> bool:
        if self._last_start is None:
            return True
        elapsed = (now_ms - self._last_start) % _COUNTER_MODULUS
        return elapsed >= self._interval_ms

    def mark(self, now_ms: int) -> None:
        self._last_start = now_ms

    def reset(self) -> None:
        self._last_start = None
