from __future__ import annotations

import pytest

from autoinventory.app_api.providers.stepping_clock import SteppingClock
from autoinventory.core.engine.interval_gate import IntervalGate


def test_first_call_ready_then_waits_interval() -> None:
    gate = IntervalGate(500)

    assert gate.ready(1234)
    gate.mark(1234)
    assert not gate.ready(1733)
    assert gate.ready(1734)


def test_counter_wraparound() -> None:
    gate = IntervalGate(500)
    gate.mark(2**32 - 100)

    assert not gate.ready(300)
    assert gate.ready(400)


def test_reset_makes_gate_ready() -> None:
    gate = IntervalGate(500)
    gate.mark(0)
    gate.reset()

    assert gate.ready(1)


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        IntervalGate(0)


def test_stepping_clock_wraps() -> None:
    clock = SteppingClock(step_ms=100, start_ms=2**32 - 100)

    assert clock.now_ms() == 2**32 - 100
    assert clock.now_ms() == 0
    assert clock.now_ms() == 100
