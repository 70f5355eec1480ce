from __future__ import annotations

from typing import Optional

from autoinventory.core.domain.enums import OutcomeKind
from autoinventory.core.engine.interval_gate import IntervalGate
from autoinventory.core.engine.result import CycleResult
from autoinventory.core.engine.verification import run_cycle
from autoinventory.core.resolvers.factory import Resolver
from .ports import Alarm, Clock, DisplaySink, ReadingSource, Tare


class InventoryApplication:
    """Runs one verification cycle per tick and routes the outcome to the ports.

    Owns the only cross-cycle state: the sticky escalation flag and a pending
    manual-zero request.
    """

    def __init__(
        self,
        resolver: Resolver,
        source: ReadingSource,
        display: DisplaySink,
        alarm: Alarm,
        tare: Tare,
        clock: Clock,
        gate: IntervalGate,
        labels: tuple[str, ...],
    ) -> None:
        self._resolver = resolver
        self._source = source
        self._display = display
        self._alarm = alarm
        self._tare = tare
        self._clock = clock
        self._gate = gate
        self._labels = labels
        self._escalation = False
        self._zero_pending = False

    @property
    def escalation(self) -> bool:
        return self._escalation

    def request_zero(self) -> None:
        self._zero_pending = True

    def reset_escalation(self) -> None:
        if self._escalation:
            self._escalation = False
            self._alarm.set_active(False)

    def tick(self) -> Optional[CycleResult]:
        if self._zero_pending:
            self._apply_zero()
            self._gate.reset()
            return None
        now = self._clock.now_ms()
        if not self._gate.ready(now):
            return None
        self._gate.mark(now)
        return self.run_once()

    def run_once(self) -> CycleResult:
        result = run_cycle(
            self._source.read,
            self._resolver,
            escalation=self._escalation,
            zero_requested=self._is_zero_pending,
        )
        self._route(result)
        return result

    def _is_zero_pending(self) -> bool:
        return self._zero_pending

    def _apply_zero(self) -> None:
        self._zero_pending = False
        self._tare.tare()

    def _route(self, result: CycleResult) -> None:
        was_escalated = self._escalation
        self._escalation = result.escalation

        if result.outcome == OutcomeKind.RESOLVED:
            assert result.counts is not None
            self._display.show_counts(result.counts, self._labels)
        elif result.outcome == OutcomeKind.UNRESOLVED:
            last = result.readings[-1] if result.readings else None
            self._display.show_error(last)
        elif result.outcome == OutcomeKind.UNAVAILABLE:
            assert result.source_status is not None
            self._display.show_unavailable(result.source_status)
        elif result.outcome == OutcomeKind.NEGATIVE_READING:
            self._tare.tare()
        elif result.outcome == OutcomeKind.ZEROED:
            self._apply_zero()

        if self._escalation != was_escalated:
            self._alarm.set_active(self._escalation)
