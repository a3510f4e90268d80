"""Cursor clamping shared by buffer operations."""

from __future__ import annotations

from typing import Sequence

from .state import Cursor


def clamp_cursor(lines: Sequence[str], row: int, col: int) -> Cursor:
    """Pull ``(row, col)`` back inside ``lines``; column may sit at line end."""

    max_row = max(0, len(lines) - 1)
    row = max(0, min(row, max_row))
    col = max(0, min(col, len(lines[row]) if lines else 0))
    return (row, col)


def cursor_in_bounds(lines: Sequence[str], cursor: Cursor) -> bool:
    row, col = cursor
    if row < 0 or row >= len(lines):
        return False
    return 0 <= col <= len(lines[row])
