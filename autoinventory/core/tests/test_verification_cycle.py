"""Tests for the verification retry/escalation cycle."""

from __future__ import annotations

import pytest

from autoinventory.core.domain.enums import CycleState, OutcomeKind, ReasonCode, SourceStatus
from autoinventory.core.domain.models import ResolutionResult
from autoinventory.core.domain.transition_graph import check_transition
from autoinventory.core.domain.unit_weights import UnitWeightTable
from autoinventory.core.engine.verification import run_cycle, set_verification_debug
from autoinventory.core.resolvers.factory import build_resolver

_SINGLE = build_resolver(UnitWeightTable(resolver="single_class", unit_weights=(70,), tolerance=3))


class _Reads:
    def __init__(self, *samples: int | SourceStatus) -> None:
        self._samples = list(samples)
        self.calls = 0

    def __call__(self) -> int | SourceStatus:
        sample = self._samples[self.calls]
        self.calls += 1
        return sample


class _CountingResolver:
    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, reading: int) -> ResolutionResult:
        self.calls.append(reading)
        return _SINGLE(reading)


def test_first_attempt_accepted() -> None:
    reads = _Reads(210)

    result = run_cycle(reads, _SINGLE)

    assert result.outcome == OutcomeKind.RESOLVED
    assert result.counts == (3,)
    assert result.escalation is False
    assert result.states == [CycleState.IDLE, CycleState.FIRST_ATTEMPT, CycleState.ACCEPTED]
    assert result.reasons == [ReasonCode.RESOLVED_FIRST_ATTEMPT]
    assert reads.calls == 1


def test_retry_accepted_clears_escalation() -> None:
    reads = _Reads(34, 140)

    result = run_cycle(reads, _SINGLE, escalation=True)

    assert result.outcome == OutcomeKind.RESOLVED
    assert result.counts == (2,)
    assert result.escalation is False
    assert result.readings == [34, 140]
    assert result.states == [
        CycleState.IDLE,
        CycleState.FIRST_ATTEMPT,
        CycleState.RETRY,
        CycleState.ACCEPTED,
    ]
    assert result.reasons == [
        ReasonCode.RETRY_REQUESTED,
        ReasonCode.RESOLVED_ON_RETRY,
        ReasonCode.ESCALATION_CLEARED,
    ]


def test_retry_takes_fresh_reading() -> None:
    reads = _Reads(34, 34, 999)
    resolver = _CountingResolver()

    run_cycle(reads, resolver)

    assert reads.calls == 2
    assert resolver.calls == [34, 34]


def test_confirmed_failure_raises_escalation() -> None:
    result = run_cycle(_Reads(34, 33), _SINGLE)

    assert result.outcome == OutcomeKind.UNRESOLVED
    assert result.escalation is True
    assert result.final_state == CycleState.CONFIRMED_FAILURE
    assert result.resolution is not None
    assert result.resolution.counts is None
    assert result.reasons == [
        ReasonCode.RETRY_REQUESTED,
        ReasonCode.CONFIRMED_FAILURE,
        ReasonCode.ESCALATION_RAISED,
    ]


def test_confirmed_failure_when_already_escalated() -> None:
    result = run_cycle(_Reads(34, 33), _SINGLE, escalation=True)

    assert result.escalation is True
    assert ReasonCode.ESCALATION_RAISED not in result.reasons


def test_escalation_sticks_until_accepted() -> None:
    escalation = run_cycle(_Reads(34, 34), _SINGLE).escalation
    assert escalation is True

    escalation = run_cycle(_Reads(-4), _SINGLE, escalation=escalation).escalation
    assert escalation is True

    escalation = run_cycle(_Reads(SourceStatus.NOT_READY), _SINGLE, escalation=escalation).escalation
    assert escalation is True

    escalation = run_cycle(_Reads(34, 34), _SINGLE, escalation=escalation).escalation
    assert escalation is True

    escalation = run_cycle(_Reads(70), _SINGLE, escalation=escalation).escalation
    assert escalation is False


def test_negative_first_reading_aborts_without_resolving() -> None:
    resolver = _CountingResolver()

    result = run_cycle(_Reads(-5), resolver)

    assert result.outcome == OutcomeKind.NEGATIVE_READING
    assert result.rezero_required
    assert result.states == [CycleState.IDLE, CycleState.IDLE]
    assert result.reasons == [ReasonCode.NEGATIVE_READING]
    assert result.resolution is None
    assert resolver.calls == []


def test_negative_retry_reading_takes_precedence() -> None:
    result = run_cycle(_Reads(34, -2), _SINGLE, escalation=False)

    assert result.outcome == OutcomeKind.NEGATIVE_READING
    assert result.escalation is False
    assert result.states == [
        CycleState.IDLE,
        CycleState.FIRST_ATTEMPT,
        CycleState.RETRY,
        CycleState.IDLE,
    ]
    assert result.readings == [34, -2]


def test_unavailable_source_surfaces_status() -> None:
    result = run_cycle(_Reads(SourceStatus.NOT_READY), _SINGLE)

    assert result.outcome == OutcomeKind.UNAVAILABLE
    assert result.source_status == SourceStatus.NOT_READY
    assert result.reasons == [ReasonCode.SOURCE_NOT_READY]
    assert result.readings == []


def test_absent_source_on_retry() -> None:
    result = run_cycle(_Reads(34, SourceStatus.ABSENT), _SINGLE, escalation=True)

    assert result.outcome == OutcomeKind.UNAVAILABLE
    assert result.source_status == SourceStatus.ABSENT
    assert result.escalation is True
    assert result.reasons == [ReasonCode.RETRY_REQUESTED, ReasonCode.SOURCE_ABSENT]


def test_manual_zero_aborts_before_reading() -> None:
    reads = _Reads(70)

    result = run_cycle(reads, _SINGLE, zero_requested=lambda: True)

    assert result.outcome == OutcomeKind.ZEROED
    assert result.reasons == [ReasonCode.MANUAL_ZERO]
    assert reads.calls == 0


def test_manual_zero_before_retry() -> None:
    flags = iter([False, True])

    result = run_cycle(_Reads(34, 70), _SINGLE, zero_requested=lambda: next(flags))

    assert result.outcome == OutcomeKind.ZEROED
    assert result.final_state == CycleState.IDLE
    assert result.readings == [34]


def test_debug_hook_reports_retry_and_failure() -> None:
    messages: list[str] = []
    set_verification_debug(messages.append)
    try:
        run_cycle(_Reads(34, 34), _SINGLE)
    finally:
        set_verification_debug(None)

    assert any(m.startswith("CYCLE_RETRY") for m in messages)
    assert any(m.startswith("CYCLE_FAILURE") for m in messages)


def test_disallowed_transition_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        check_transition(CycleState.ACCEPTED, CycleState.RETRY)
    with pytest.raises(RuntimeError):
        check_transition(CycleState.IDLE, CycleState.ACCEPTED)
