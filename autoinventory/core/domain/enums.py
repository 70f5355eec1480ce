"""Domain enums for the verification cycle and its reasoning.

Responsibilities:
  - Define CycleState, OutcomeKind and ReasonCode identifiers.
  - Provide stable reason categories and display/audit metadata.

Invariants:
  - Enum values must remain stable; sinks and CLIs print them verbatim.
  - ReasonCode metadata must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class CycleState(Enum):
    IDLE = "IDLE"
    FIRST_ATTEMPT = "FIRST_ATTEMPT"
    RETRY = "RETRY"
    ACCEPTED = "ACCEPTED"
    CONFIRMED_FAILURE = "CONFIRMED_FAILURE"


class OutcomeKind(Enum):
    RESOLVED = "RESOLVED"
    UNRESOLVED = "UNRESOLVED"
    UNAVAILABLE = "UNAVAILABLE"
    NEGATIVE_READING = "NEGATIVE_READING"
    ZEROED = "ZEROED"


class SourceStatus(Enum):
    """Sentinel returned by a reading source instead of a sample."""

    NOT_READY = "NOT_READY"
    ABSENT = "ABSENT"


class ReasonCategory(Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    PRECONDITION = "PRECONDITION"
    INFO = "INFO"


# Stable identifiers for cycle reasoning; value is the printed code.
class ReasonCode(Enum):
    RESOLVED_FIRST_ATTEMPT = "RESOLVED_FIRST_ATTEMPT"
    RESOLVED_ON_RETRY = "RESOLVED_ON_RETRY"
    RETRY_REQUESTED = "RETRY_REQUESTED"
    CONFIRMED_FAILURE = "CONFIRMED_FAILURE"
    NEGATIVE_READING = "NEGATIVE_READING"
    SOURCE_NOT_READY = "SOURCE_NOT_READY"
    SOURCE_ABSENT = "SOURCE_ABSENT"
    MANUAL_ZERO = "MANUAL_ZERO"
    ESCALATION_RAISED = "ESCALATION_RAISED"
    ESCALATION_CLEARED = "ESCALATION_CLEARED"


# Display/audit metadata keyed by reason code.
REASON_METADATA: dict[ReasonCode, dict[str, object]] = {
    ReasonCode.RESOLVED_FIRST_ATTEMPT: {
        "category": ReasonCategory.SUCCESS,
        "message": "Reading resolved to a count on the first attempt.",
    },
    ReasonCode.RESOLVED_ON_RETRY: {
        "category": ReasonCategory.SUCCESS,
        "message": "Reading resolved to a count after one re-measurement.",
    },
    ReasonCode.RETRY_REQUESTED: {
        "category": ReasonCategory.INFO,
        "message": "First reading did not resolve; a fresh reading was taken.",
    },
    ReasonCode.CONFIRMED_FAILURE: {
        "category": ReasonCategory.FAILURE,
        "message": "Neither reading matched any count within tolerance.",
    },
    ReasonCode.NEGATIVE_READING: {
        "category": ReasonCategory.PRECONDITION,
        "message": "Reading was negative; scale re-zeroed and cycle aborted.",
    },
    ReasonCode.SOURCE_NOT_READY: {
        "category": ReasonCategory.PRECONDITION,
        "message": "Reading source had no sample ready.",
    },
    ReasonCode.SOURCE_ABSENT: {
        "category": ReasonCategory.PRECONDITION,
        "message": "Reading source device is not present.",
    },
    ReasonCode.MANUAL_ZERO: {
        "category": ReasonCategory.PRECONDITION,
        "message": "Manual zero requested; cycle aborted.",
    },
    ReasonCode.ESCALATION_RAISED: {
        "category": ReasonCategory.FAILURE,
        "message": "Error alarm activated.",
    },
    ReasonCode.ESCALATION_CLEARED: {
        "category": ReasonCategory.INFO,
        "message": "Error alarm cleared.",
    },
}

SOURCE_STATUS_REASON: dict[SourceStatus, ReasonCode] = {
    SourceStatus.NOT_READY: ReasonCode.SOURCE_NOT_READY,
    SourceStatus.ABSENT: ReasonCode.SOURCE_ABSENT,
}


def reason_message(reason: ReasonCode) -> str:
    return str(REASON_METADATA[reason]["message"])


_missing = [rc for rc in ReasonCode if rc not in REASON_METADATA]
if _missing:
    raise RuntimeError(f"Missing REASON_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in REASON_METADATA.keys() if k not in set(ReasonCode)]
if _extra:
    raise RuntimeError(f"Extra REASON_METADATA keys: {[e.value for e in _extra]}")
