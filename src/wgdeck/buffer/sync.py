"""Read-only snapshot types handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass

from .state import Cursor


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    lines: tuple[str, ...]
    cursor: Cursor
    version: int = 0
    dirty: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
