"""Multi-line text buffer with a clamped 2D cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, List, Optional

from wgdeck.runtime import telemetry

from .document import join_lines, split_text
from .state import BufferState, Cursor
from .sync import BufferMirror
from .validation import clamp_cursor


class TextBuffer:
    """Ordered lines plus a cursor; every operation is total.

    ``lines`` is never empty and the cursor always satisfies
    ``0 <= row < len(lines)`` and ``0 <= col <= len(lines[row])``. Calls that
    would leave those bounds clamp instead of raising.
    """

    def __init__(
        self,
        lines: Optional[List[str]] = None,
        *,
        name: str = "default",
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self._lines: List[str] = list(lines) if lines else [""]
        self.state = state or BufferState()
        self.state.set_cursor(*clamp_cursor(self._lines, self.state.row, self.state.col))

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(split_text(text), name=name)

    # -- queries ---------------------------------------------------------

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def cursor_row(self) -> int:
        return self.state.row

    @property
    def cursor_col(self) -> int:
        return self.state.col

    @property
    def current_line(self) -> str:
        return self._lines[self.state.row]

    @property
    def version(self) -> int:
        return self.state.version

    @property
    def dirty(self) -> bool:
        return self.state.dirty

    def at_line_end(self) -> bool:
        return self.state.col >= len(self.current_line)

    def join_text(self) -> str:
        return join_lines(self._lines)

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            lines=self.lines,
            cursor=self.cursor,
            version=self.state.version,
            dirty=self.state.dirty,
        )

    # -- movement --------------------------------------------------------

    def move_to(self, row: int, col: int) -> Cursor:
        self.state.set_cursor(*clamp_cursor(self._lines, row, col))
        return self.cursor

    def move_left(self, *, wrap: bool = False) -> Cursor:
        row, col = self.cursor
        if col > 0:
            return self.move_to(row, col - 1)
        if wrap and row > 0:
            return self.move_to(row - 1, len(self._lines[row - 1]))
        return self.cursor

    def move_right(self, *, wrap: bool = False) -> Cursor:
        row, col = self.cursor
        if col < len(self._lines[row]):
            return self.move_to(row, col + 1)
        if wrap and row + 1 < len(self._lines):
            return self.move_to(row + 1, 0)
        return self.cursor

    def move_up(self) -> Cursor:
        row, col = self.cursor
        # move_to pulls the column back onto a shorter destination line.
        return self.move_to(row - 1, col)

    def move_down(self) -> Cursor:
        row, col = self.cursor
        return self.move_to(row + 1, col)

    # -- edits -----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        with Edit(self, "insert_char"):
            row, col = self.cursor
            line = self._lines[row]
            self._lines[row] = line[:col] + char + line[col:]
            self.state.set_cursor(row, col + len(char))

    def insert_newline(self) -> None:
        with Edit(self, "insert_newline"):
            row, col = self.cursor
            line = self._lines[row]
            self._lines[row : row + 1] = [line[:col], line[col:]]
            self.state.set_cursor(row + 1, 0)

    def open_line_below(self) -> None:
        with Edit(self, "open_line_below"):
            row = self.state.row + 1
            self._lines.insert(row, "")
            self.state.set_cursor(row, 0)

    def delete_char_at_cursor(self) -> bool:
        if self.at_line_end():
            return False
        with Edit(self, "delete_char"):
            row, col = self.cursor
            line = self._lines[row]
            self._lines[row] = line[:col] + line[col + 1 :]
        return True

    def delete_line(self) -> None:
        with Edit(self, "delete_line"):
            if len(self._lines) == 1:
                self._lines[0] = ""
                self.state.set_cursor(0, 0)
                return
            row, col = self.cursor
            del self._lines[row]
            self.move_to(row, col)

    def backspace(self) -> bool:
        row, col = self.cursor
        if col == 0 and row == 0:
            return False
        with Edit(self, "backspace"):
            if col > 0:
                line = self._lines[row]
                self._lines[row] = line[: col - 1] + line[col:]
                self.state.set_cursor(row, col - 1)
            else:
                tail = self._lines.pop(row)
                join_at = len(self._lines[row - 1])
                self._lines[row - 1] += tail
                self.state.set_cursor(row - 1, join_at)
        return True


class Edit(AbstractContextManager["Edit"]):
    """Wraps one content mutation in a telemetry span and bumps the version."""

    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Edit":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": self.buffer.cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.buffer.state.touch()
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["TextBuffer", "Edit"]
