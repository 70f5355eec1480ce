from __future__ import annotations


class SteppingClock:
    """Millisecond counter that advances a fixed step on every read, wrapping at 2**32."""

    def __init__(self, step_ms: int, start_ms: int = 0) -> None:
        self._step_ms = step_ms
        self._now = start_ms

    def now_ms(self) -> int:
        current = self._now
        self._now = (self._now + self._step_ms) % 2**32
        return current
