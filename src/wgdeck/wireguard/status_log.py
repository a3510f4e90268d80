"""Status messages shown on the dashboard and appended to a log file."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from wgdeck.runtime import telemetry

EMPTY_STATUS = "No actions yet"


class StatusLog:
    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._entries: list[str] = []

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def latest(self) -> str:
        return self._entries[-1] if self._entries else EMPTY_STATUS

    def append(self, message: str) -> None:
        """Record ``message``; a failed file write is logged, never raised."""

        self._entries.append(message)
        telemetry.record_event("status", data={"message": message})
        if self.path is None:
            return
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(f"{message}\n")
        except OSError as exc:
            telemetry.record_event(
                "status.persist_failed",
                level="warning",
                data={"path": str(self.path), "error": str(exc)},
            )


__all__ = ["EMPTY_STATUS", "StatusLog"]
