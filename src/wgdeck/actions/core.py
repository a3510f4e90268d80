"""Mode transitions and session-level actions."""

from __future__ import annotations

from wgdeck.modes.base_mode import EditorMode, ModeContext, ModeResult, Outcome


def enter_insertion(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERTION, message="enter_insertion"
    )


def append_after_cursor(context: ModeContext, match) -> ModeResult:
    del match
    buffer = context.buffer
    if not buffer.at_line_end():
        buffer.move_right()
    return ModeResult(consumed=True, switch_to=EditorMode.INSERTION, message="append")


def open_line_below(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.open_line_below()
    context.bus.emit(
        "buffer.edit", {"label": "open_line", "cursor": context.buffer.cursor}
    )
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERTION, message="open_line"
    )


def exit_to_navigation(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=EditorMode.NAVIGATION, message="exit_insertion"
    )


def toggle_overlay(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="overlay", toggle_overlay=True)


def save(context: ModeContext, match) -> ModeResult:
    del match
    context.bus.emit("editor.save", context.buffer.mirror())
    return ModeResult(
        consumed=True, status="outcome", message="save", outcome=Outcome.SAVED
    )


def cancel(context: ModeContext, match) -> ModeResult:
    del match
    context.bus.emit("editor.cancel", None)
    return ModeResult(
        consumed=True, status="outcome", message="cancel", outcome=Outcome.CANCELLED
    )


__all__ = [
    "enter_insertion",
    "append_after_cursor",
    "open_line_below",
    "exit_to_navigation",
    "toggle_overlay",
    "save",
    "cancel",
]
