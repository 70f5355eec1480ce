"""Domain models for resolution results.

Responsibilities:
  - Define the immutable all-or-nothing ResolutionResult carrier.

Invariants:
  - A resolved result always carries one non-negative count per class.
  - An unresolved result carries no counts at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class NegativeReadingError(ValueError):
    pass


@dataclass(frozen=True)
class ResolutionResult:
    counts: Optional[tuple[int, ...]]
    reading: int
    total: Optional[int] = None

    def __post_init__(self) -> None:
        if self.counts is None:
            if self.total is not None:
                raise ValueError("Unresolved result must not carry a total")
            return
        if not self.counts:
            raise ValueError("Resolved result needs at least one count")
        if any(c < 0 for c in self.counts):
            raise ValueError("counts must be >= 0")

    @property
    def resolved(self) -> bool:
        return self.counts is not None

    @property
    def deviation(self) -> Optional[int]:
        if self.total is None:
            return None
        return abs(self.total - self.reading)

    @classmethod
    def resolved_with(cls, counts: tuple[int, ...], reading: int, total: int) -> "ResolutionResult":
        return cls(counts=tuple(counts), reading=reading, total=total)

    @classmethod
    def unresolved(cls, reading: int) -> "ResolutionResult":
        return cls(counts=None, reading=reading)
