"""Cursor state for text buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class BufferState:
    """Mutable cursor position plus change tracking for one buffer."""

    row: int = 0
    col: int = 0
    version: int = 0
    dirty: bool = False

    @property
    def cursor(self) -> Cursor:
        return (self.row, self.col)

    def set_cursor(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def touch(self) -> None:
        self.version += 1
        self.dirty = True
