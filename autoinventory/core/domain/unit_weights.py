"""Unit weight table for one deployment.

Responsibilities:
  - Hold the one or two reference unit weights and the tolerance parameter.
  - Validate weights and tolerance before any resolver is built from them.

Tolerance meaning depends on the resolver:
  - single_class: per-count multiplier (allowed deviation = tolerance * count).
  - dual_class: fixed absolute bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ResolverId = Literal["single_class", "dual_class"]

EXPECTED_CLASS_COUNT: dict[str, int] = {
    "single_class": 1,
    "dual_class": 2,
}


@dataclass(frozen=True)
class UnitWeightTable:
    resolver: ResolverId
    unit_weights: tuple[int, ...]
    tolerance: int
    class_labels: tuple[str, ...] = ()

    def validate(self) -> None:
        if self.resolver not in EXPECTED_CLASS_COUNT:
            raise ValueError(f"unsupported resolver: {self.resolver}")
        expected = EXPECTED_CLASS_COUNT[self.resolver]
        if len(self.unit_weights) != expected:
            raise ValueError(
                f"resolver '{self.resolver}' needs {expected} unit weight(s), got {len(self.unit_weights)}"
            )
        for w in self.unit_weights:
            if not isinstance(w, int) or isinstance(w, bool):
                raise ValueError("unit weights must be integers")
            if w <= 0:
                raise ValueError("unit weights must be > 0")
        if not isinstance(self.tolerance, int) or isinstance(self.tolerance, bool):
            raise ValueError("tolerance must be an integer")
        if self.tolerance < 0:
            raise ValueError("tolerance must be >= 0")
        if self.class_labels and len(self.class_labels) != expected:
            raise ValueError("class_labels must have one label per unit weight")

    def labels(self) -> tuple[str, ...]:
        if self.class_labels:
            return self.class_labels
        return tuple(f"class{i + 1}" for i in range(len(self.unit_weights)))
