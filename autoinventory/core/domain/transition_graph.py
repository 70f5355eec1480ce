"""Allowed state transitions for the verification cycle.

Responsibilities:
  - Define legal next states per current cycle state.
  - The verification engine must respect this graph.

Invariants:
  - ACCEPTED and CONFIRMED_FAILURE are terminal within a cycle; IDLE is
    reachable from every state (negative reading, unavailable source, manual zero).
"""

from __future__ import annotations

from .enums import CycleState

ALLOWED_TRANSITIONS: dict[CycleState, set[CycleState]] = {
    CycleState.IDLE: {CycleState.FIRST_ATTEMPT, CycleState.IDLE},
    CycleState.FIRST_ATTEMPT: {CycleState.ACCEPTED, CycleState.RETRY, CycleState.IDLE},
    CycleState.RETRY: {CycleState.ACCEPTED, CycleState.CONFIRMED_FAILURE, CycleState.IDLE},
    CycleState.ACCEPTED: {CycleState.IDLE},
    CycleState.CONFIRMED_FAILURE: {CycleState.IDLE},
}

TERMINAL_STATES: frozenset[CycleState] = frozenset(
    {CycleState.ACCEPTED, CycleState.CONFIRMED_FAILURE}
)


def check_transition(from_state: CycleState, to_state: CycleState) -> None:
    if to_state not in ALLOWED_TRANSITIONS[from_state]:
        raise RuntimeError(
            f"Disallowed cycle transition: {from_state.value} -> {to_state.value}"
        )
