"""Simulated load cell producing noisy integer readings.

Responsibilities:
  - Stand in for hardware: true load from configured counts, gaussian noise,
    optional per-read drift of the zero offset, tare support.
Must not:
  - Filter or smooth readings; callers see raw samples.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from autoinventory.core.domain.enums import SourceStatus


class SimulatedScale:
    def __init__(
        self,
        unit_weights: Sequence[int],
        counts: Sequence[int],
        noise_std: float = 0.0,
        drift_per_read: float = 0.0,
        seed: int = 1,
        present: bool = True,
    ) -> None:
        if len(unit_weights) != len(counts):
            raise ValueError("counts must have one entry per unit weight")
        if noise_std < 0:
            raise ValueError("noise_std must be >= 0")
        self._weights = np.asarray(unit_weights, dtype=np.int64)
        self._counts = np.asarray(counts, dtype=np.int64)
        self._noise_std = noise_std
        self._drift_per_read = drift_per_read
        self._rng = np.random.default_rng(seed)
        self._offset = 0.0
        self.present = present
        self.tare_calls = 0

    @property
    def true_load(self) -> int:
        return int(np.dot(self._weights, self._counts))

    def set_counts(self, counts: Sequence[int]) -> None:
        if len(counts) != len(self._weights):
            raise ValueError("counts must have one entry per unit weight")
        self._counts = np.asarray(counts, dtype=np.int64)

    def read(self) -> Union[int, SourceStatus]:
        if not self.present:
            return SourceStatus.ABSENT
        self._offset += self._drift_per_read
        noise = float(self._rng.normal(0.0, self._noise_std)) if self._noise_std > 0 else 0.0
        return int(np.rint(self.true_load + self._offset + noise))

    def tare(self) -> None:
        self.tare_calls += 1
        self._offset = 0.0
