"""Result payload for a single verification cycle.

Responsibilities:
  - Capture outcome, resolution, escalation flag and the visited states.

Inputs/Outputs:
  - Inputs: produced by verification.run_cycle.
  - Outputs: consumed by the application facade and CLIs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.enums import CycleState, OutcomeKind, ReasonCode, SourceStatus
from ..domain.models import ResolutionResult


@dataclass
class CycleResult:
    outcome: OutcomeKind
    resolution: Optional[ResolutionResult]
    escalation: bool
    states: list[CycleState]
    readings: list[int]
    reasons: list[ReasonCode]
    source_status: Optional[SourceStatus] = None

    @property
    def final_state(self) -> CycleState:
        return self.states[-1]

    @property
    def counts(self) -> Optional[tuple[int, ...]]:
        if self.resolution is None:
            return None
        return self.resolution.counts

    @property
    def rezero_required(self) -> bool:
        return self.outcome == OutcomeKind.NEGATIVE_READING
