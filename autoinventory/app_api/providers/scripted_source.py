from __future__ import annotations

from typing import Iterable, Union

from autoinventory.core.domain.enums import SourceStatus


class ScriptedReadingSource:
    """Replays a fixed sequence of samples; NOT_READY once exhausted."""

    def __init__(self, samples: Iterable[Union[int, SourceStatus]]) -> None:
        self._samples = list(samples)
        self._pos = 0
        self.tare_calls = 0

    @property
    def consumed(self) -> int:
        return self._pos

    def read(self) -> Union[int, SourceStatus]:
        if self._pos >= len(self._samples):
            return SourceStatus.NOT_READY
        sample = self._samples[self._pos]
        self._pos += 1
        return sample

    def tare(self) -> None:
        self.tare_calls += 1
