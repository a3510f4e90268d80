"""Editing verbs bound to keys by the default keymaps."""

from .core import (
    append_after_cursor,
    cancel,
    enter_insertion,
    exit_to_navigation,
    open_line_below,
    save,
    toggle_overlay,
)
from .edit import backspace, delete_char, delete_line, insert_char, insert_newline
from .motion import (
    move_down,
    move_left,
    move_left_wrap,
    move_right,
    move_right_wrap,
    move_up,
)

__all__ = [
    "enter_insertion",
    "append_after_cursor",
    "open_line_below",
    "exit_to_navigation",
    "toggle_overlay",
    "save",
    "cancel",
    "insert_char",
    "insert_newline",
    "backspace",
    "delete_char",
    "delete_line",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_left_wrap",
    "move_right_wrap",
]
