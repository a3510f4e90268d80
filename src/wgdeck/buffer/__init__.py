"""Text buffer model used by the profile editor."""

from .buffer import Edit, TextBuffer
from .document import join_lines, split_text
from .state import BufferState, Cursor
from .sync import BufferMirror
from .validation import clamp_cursor, cursor_in_bounds

__all__ = [
    "TextBuffer",
    "Edit",
    "BufferState",
    "BufferMirror",
    "Cursor",
    "split_text",
    "join_lines",
    "clamp_cursor",
    "cursor_in_bounds",
]
