"""Verification cycle: resolve, re-measure once on failure, escalate.

Responsibilities:
  - Walk IDLE -> FIRST_ATTEMPT -> (ACCEPTED | RETRY) -> (ACCEPTED | CONFIRMED_FAILURE).
  - Abort to IDLE on a negative reading, an unavailable source or a manual zero.
  - Compute the sticky escalation flag from the flag passed in.

Inputs/Outputs:
  - Inputs: read_fn returning int or SourceStatus, a resolver callable, the
    current escalation flag and an optional zero-request check.
  - Outputs: CycleResult.

Invariants:
  - At most two readings per cycle; the retry always takes a fresh reading.
  - Escalation changes only on ACCEPTED (cleared) or CONFIRMED_FAILURE (raised).
  - Every state change is checked against ALLOWED_TRANSITIONS.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from ..domain.enums import SOURCE_STATUS_REASON, CycleState, OutcomeKind, ReasonCode, SourceStatus
from ..domain.models import ResolutionResult
from ..domain.transition_graph import check_transition
from .result import CycleResult

ReadFn = Callable[[], Union[int, SourceStatus]]
ResolverFn = Callable[[int], ResolutionResult]

_DEBUG_FN: Callable[[str], None] | None = None


def set_verification_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def _debug(msg: str) -> None:
    if _DEBUG_FN is not None:
        _DEBUG_FN(msg)


class _Cycle:
    def __init__(self, escalation: bool) -> None:
        self.escalation_in = escalation
        self.states: list[CycleState] = [CycleState.IDLE]
        self.readings: list[int] = []
        self.reasons: list[ReasonCode] = []

    def advance(self, to_state: CycleState) -> None:
        check_transition(self.states[-1], to_state)
        self.states.append(to_state)

    def finish(
        self,
        outcome: OutcomeKind,
        resolution: Optional[ResolutionResult],
        escalation: bool,
        source_status: Optional[SourceStatus] = None,
    ) -> CycleResult:
        return CycleResult(
            outcome=outcome,
            resolution=resolution,
            escalation=escalation,
            states=self.states,
            readings=self.readings,
            reasons=self.reasons,
            source_status=source_status,
        )

    def abort(
        self,
        outcome: OutcomeKind,
        reason: ReasonCode,
        source_status: Optional[SourceStatus] = None,
    ) -> CycleResult:
        self.advance(CycleState.IDLE)
        self.reasons.append(reason)
        _debug(f"CYCLE_ABORT outcome={outcome.value} reason={reason.value} states={self._path()}")
        return self.finish(outcome, None, self.escalation_in, source_status)

    def _path(self) -> str:
        return ">".join(s.value for s in self.states)


def run_cycle(
    read_fn: ReadFn,
    resolver: ResolverFn,
    escalation: bool = False,
    zero_requested: Callable[[], bool] | None = None,
) -> CycleResult:
    cycle = _Cycle(escalation)
    result: Optional[ResolutionResult] = None

    for attempt_state in (CycleState.FIRST_ATTEMPT, CycleState.RETRY):
        if attempt_state == CycleState.RETRY:
            cycle.reasons.append(ReasonCode.RETRY_REQUESTED)
            cycle.advance(CycleState.RETRY)
            _debug(f"CYCLE_RETRY first_reading={cycle.readings[0]}")

        if zero_requested is not None and zero_requested():
            return cycle.abort(OutcomeKind.ZEROED, ReasonCode.MANUAL_ZERO)

        sample = read_fn()
        if isinstance(sample, SourceStatus):
            return cycle.abort(OutcomeKind.UNAVAILABLE, SOURCE_STATUS_REASON[sample], sample)
        cycle.readings.append(sample)
        if sample < 0:
            return cycle.abort(OutcomeKind.NEGATIVE_READING, ReasonCode.NEGATIVE_READING)

        if attempt_state == CycleState.FIRST_ATTEMPT:
            cycle.advance(CycleState.FIRST_ATTEMPT)

        result = resolver(sample)
        if result.resolved:
            cycle.advance(CycleState.ACCEPTED)
            if attempt_state == CycleState.FIRST_ATTEMPT:
                cycle.reasons.append(ReasonCode.RESOLVED_FIRST_ATTEMPT)
            else:
                cycle.reasons.append(ReasonCode.RESOLVED_ON_RETRY)
            if escalation:
                cycle.reasons.append(ReasonCode.ESCALATION_CLEARED)
            return cycle.finish(OutcomeKind.RESOLVED, result, escalation=False)

    cycle.advance(CycleState.CONFIRMED_FAILURE)
    cycle.reasons.append(ReasonCode.CONFIRMED_FAILURE)
    if not escalation:
        cycle.reasons.append(ReasonCode.ESCALATION_RAISED)
    _debug(f"CYCLE_FAILURE readings={cycle.readings} escalation_was={escalation}")
    return cycle.finish(OutcomeKind.UNRESOLVED, result, escalation=True)
