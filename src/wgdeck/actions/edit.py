"""Actions that change buffer content."""

from __future__ import annotations

from wgdeck.modes.base_mode import ModeContext, ModeResult


def _edited(context: ModeContext, label: str, changed: bool = True) -> ModeResult:
    if changed:
        context.bus.emit("buffer.edit", {"label": label, "cursor": context.buffer.cursor})
    return ModeResult(consumed=True, status="edit" if changed else "noop", message=label)


def insert_char(context: ModeContext, char: str) -> ModeResult:
    context.buffer.insert_char(char)
    return _edited(context, "insert_char")


def insert_newline(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.insert_newline()
    return _edited(context, "insert_newline")


def backspace(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, "backspace", context.buffer.backspace())


def delete_char(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, "delete_char", context.buffer.delete_char_at_cursor())


def delete_line(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.delete_line()
    return _edited(context, "delete_line")


__all__ = [
    "insert_char",
    "insert_newline",
    "backspace",
    "delete_char",
    "delete_line",
]
