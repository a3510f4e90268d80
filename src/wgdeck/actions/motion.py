"""Cursor motions.

Navigation stops at line boundaries; the ``*_wrap`` variants used in
Insertion continue onto the neighbouring line. Keep the two sets separate.
"""

from __future__ import annotations

from wgdeck.modes.base_mode import ModeContext, ModeResult


def _moved(context: ModeContext) -> ModeResult:
    return ModeResult(consumed=True, status="move", message=str(context.buffer.cursor))


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_left()
    return _moved(context)


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_right()
    return _moved(context)


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_up()
    return _moved(context)


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_down()
    return _moved(context)


def move_left_wrap(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_left(wrap=True)
    return _moved(context)


def move_right_wrap(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_right(wrap=True)
    return _moved(context)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_left_wrap",
    "move_right_wrap",
]
