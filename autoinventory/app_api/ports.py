"""Port definitions for app-level collaborators.

Responsibilities:
  - Define interface contracts for the scale, display, alarm, tare and clock.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Protocol, Union

from autoinventory.core.domain.enums import SourceStatus


class ReadingSource(Protocol):
    def read(self) -> Union[int, SourceStatus]:
        ...


class DisplaySink(Protocol):
    def show_counts(self, counts: tuple[int, ...], labels: tuple[str, ...]) -> None:
        ...

    def show_error(self, reading: int | None) -> None:
        ...

    def show_unavailable(self, status: SourceStatus) -> None:
        ...


class Alarm(Protocol):
    def set_active(self, active: bool) -> None:
        ...


class Tare(Protocol):
    def tare(self) -> None:
        ...


class Clock(Protocol):
    def now_ms(self) -> int:
        ...
