"""Dual-class resolver: bounded two-variable composition search.

Responsibilities:
  - Find non-negative (m, n) with |m*w1 + n*w2 - reading| <= tolerance.

Tie-break (observable contract):
  - Outer loop on m ascending from 0, inner loop on n ascending from 0; the first
    match wins. Among all matches the one with the fewest class-1 units is
    returned, then the fewest class-2 units.

Invariants:
  - Bounds: m in 0..reading//w1, n in 0..(reading - m*w1)//w2. Both come from
    non-negative floor division so the search always terminates.
"""

from __future__ import annotations

from ..domain.models import NegativeReadingError, ResolutionResult


def resolve_dual(reading: int, w1: int, w2: int, tolerance: int) -> ResolutionResult:
    if w1 <= 0 or w2 <= 0:
        raise ValueError("unit weights must be > 0")
    if tolerance < 0:
        raise ValueError("tolerance must be >= 0")
    if reading < 0:
        raise NegativeReadingError(f"reading must be >= 0, got {reading}")

    for m in range(reading // w1 + 1):
        base = m * w1
        for n in range((reading - base) // w2 + 1):
            total = base + n * w2
            if abs(total - reading) <= tolerance:
                return ResolutionResult.resolved_with((m, n), reading=reading, total=total)
    return ResolutionResult.unresolved(reading)
