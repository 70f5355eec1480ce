"""Single-class resolver: nearest multiple of one unit weight.

Responsibilities:
  - Map a non-negative reading to round_half_up(reading / unit_weight).
  - Accept the count only if the deviation fits tolerance_multiplier * count.

Invariants:
  - Pure; integer arithmetic only, no float rounding.
  - A count of 0 allows zero deviation, so any non-zero reading below half a
    unit weight is rejected instead of resolving to 0.
"""

from __future__ import annotations

from ..domain.models import NegativeReadingError, ResolutionResult


def round_half_up(numerator: int, denominator: int) -> int:
    """Nearest integer to numerator/denominator, ties upward (numerator >= 0, denominator > 0)."""
    return (2 * numerator + denominator) // (2 * denominator)


def resolve_single(reading: int, unit_weight: int, tolerance_multiplier: int) -> ResolutionResult:
    if unit_weight <= 0:
        raise ValueError("unit_weight must be > 0")
    if tolerance_multiplier < 0:
        raise ValueError("tolerance_multiplier must be >= 0")
    if reading < 0:
        raise NegativeReadingError(f"reading must be >= 0, got {reading}")

    count = round_half_up(reading, unit_weight)
    total = count * unit_weight
    if abs(reading - total) <= tolerance_multiplier * count:
        return ResolutionResult.resolved_with((count,), reading=reading, total=total)
    return ResolutionResult.unresolved(reading)
