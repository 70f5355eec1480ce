from __future__ import annotations

from autoinventory.core.domain.enums import SourceStatus


class ConsoleDisplay:
    def show_counts(self, counts: tuple[int, ...], labels: tuple[str, ...]) -> None:
        parts = " ".join(f"{label}={count}" for label, count in zip(labels, counts))
        print(f"DISPLAY counts {parts}")

    def show_error(self, reading: int | None) -> None:
        print(f"DISPLAY ERROR reading={reading}")

    def show_unavailable(self, status: SourceStatus) -> None:
        print(f"DISPLAY UNAVAILABLE status={status.value}")


class ConsoleAlarm:
    def __init__(self) -> None:
        self.active = False

    def set_active(self, active: bool) -> None:
        self.active = active
        print(f"ALARM {'ON' if active else 'OFF'}")
