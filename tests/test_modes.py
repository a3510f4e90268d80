from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from wgdeck.buffer import TextBuffer
from wgdeck.keymaps import KeymapRegistry, load_default_keymaps
from wgdeck.modes import (
    EditorMode,
    InsertionMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeController,
    NavigationMode,
    Outcome,
)


def make_context(
    *, buffer: Optional[TextBuffer] = None, registry: KeymapRegistry | None = None
) -> ModeContext:
    extras: Dict[str, Any] = {
        "keymap_registry": registry or load_default_keymaps(KeymapRegistry()),
    }
    return ModeContext(buffer=buffer or TextBuffer(), bus=ModeBus(), extras=extras)


def make_controller(text: str = "", *, row: int = 0, col: int = 0) -> ModeController:
    buffer = TextBuffer.from_text(text)
    buffer.move_to(row, col)
    return ModeController(ModeContext(buffer=buffer, bus=ModeBus()))


def press(controller: ModeController, *keys: str) -> None:
    for key in keys:
        controller.handle_key(KeyInput(key=key))


def ctrl(key: str) -> KeyInput:
    return KeyInput(key=key, modifiers=("ctrl",))


def test_navigation_mode_uses_keymap_binding() -> None:
    mode = NavigationMode(make_context())

    result = mode.handle_key(KeyInput(key="i"))

    assert result.switch_to == EditorMode.INSERTION
    assert result.consumed is True


def test_navigation_mode_reports_unbound_key() -> None:
    mode = NavigationMode(make_context())

    result = mode.handle_key(KeyInput(key="z"))

    assert result.consumed is False
    assert result.status == "miss"


def test_insertion_mode_escape_binding() -> None:
    mode = InsertionMode(make_context())

    result = mode.handle_key(KeyInput(key="ESC"))

    assert result.switch_to == EditorMode.NAVIGATION
    assert result.outcome is None


def test_mode_requires_registry() -> None:
    context = ModeContext(buffer=TextBuffer(), bus=ModeBus())

    with pytest.raises(RuntimeError):
        NavigationMode(context)


def test_controller_starts_in_navigation() -> None:
    controller = make_controller()

    assert controller.mode is EditorMode.NAVIGATION
    assert controller.overlay_visible is False


def test_append_at_line_end_keeps_cursor() -> None:
    controller = make_controller("abc", col=3)
    buffer = controller.context.buffer

    press(controller, "a")
    assert buffer.cursor == (0, 3)
    assert controller.mode is EditorMode.INSERTION

    press(controller, "d")
    assert buffer.lines == ("abcd",)
    assert buffer.cursor == (0, 4)


def test_append_mid_line_moves_right_first() -> None:
    controller = make_controller("abc", col=1)

    press(controller, "a", "X")

    assert controller.context.buffer.lines == ("abXc",)


def test_open_line_below_enters_insertion() -> None:
    controller = make_controller("ab\ncd", col=2)
    buffer = controller.context.buffer

    press(controller, "o")

    assert buffer.lines == ("ab", "", "cd")
    assert buffer.cursor == (1, 0)
    assert controller.mode is EditorMode.INSERTION


def test_delete_line_on_single_line_clears_it() -> None:
    controller = make_controller("hello")

    press(controller, "D")

    assert controller.context.buffer.lines == ("",)
    assert controller.context.buffer.cursor == (0, 0)
    assert controller.mode is EditorMode.NAVIGATION


def test_insertion_backspace_joins_lines() -> None:
    controller = make_controller("ab\ncd", row=1, col=0)
    buffer = controller.context.buffer

    press(controller, "i", "BACKSPACE")

    assert buffer.lines == ("abcd",)
    assert buffer.cursor == (0, 2)


def test_x_deletes_char_in_navigation() -> None:
    controller = make_controller("abc", col=1)

    press(controller, "x")

    assert controller.context.buffer.lines == ("ac",)


def test_save_in_navigation_leaves_buffer_untouched() -> None:
    controller = make_controller("keep me")
    buffer = controller.context.buffer

    result = controller.handle_key(ctrl("s"))

    assert result.outcome is Outcome.SAVED
    assert buffer.lines == ("keep me",)
    assert buffer.version == 0


def test_save_in_insertion_does_not_insert_s() -> None:
    controller = make_controller("abc")

    press(controller, "i")
    result = controller.handle_key(ctrl("s"))

    assert result.outcome is Outcome.SAVED
    assert controller.context.buffer.lines == ("abc",)


def test_escape_cancels_only_in_navigation() -> None:
    controller = make_controller("abc")

    press(controller, "i")
    result = controller.handle_key(KeyInput(key="ESC"))
    assert result.outcome is None
    assert controller.mode is EditorMode.NAVIGATION

    result = controller.handle_key(KeyInput(key="ESC"))
    assert result.outcome is Outcome.CANCELLED


def test_unbound_ctrl_chord_is_not_inserted() -> None:
    controller = make_controller("abc")

    press(controller, "i")
    result = controller.handle_key(ctrl("x"))

    assert result.consumed is False
    assert controller.context.buffer.lines == ("abc",)


def test_insertion_letters_are_typed_not_motions() -> None:
    controller = make_controller("")

    press(controller, "i", "h", "j", "k", "l")

    assert controller.context.buffer.lines == ("hjkl",)


def test_shifted_character_uses_text() -> None:
    controller = make_controller("")

    press(controller, "i")
    controller.handle_key(KeyInput(key="D", modifiers=("shift",), text="D"))

    assert controller.context.buffer.lines == ("D",)


def test_horizontal_wrap_only_in_insertion() -> None:
    controller = make_controller("ab\ncd", row=1, col=0)
    buffer = controller.context.buffer

    press(controller, "LEFT")
    assert buffer.cursor == (1, 0)

    press(controller, "i", "LEFT")
    assert buffer.cursor == (0, 2)

    press(controller, "RIGHT")
    assert buffer.cursor == (1, 0)


def test_enter_in_insertion_splits_line() -> None:
    controller = make_controller("hello", col=2)

    press(controller, "i", "ENTER")

    assert controller.context.buffer.lines == ("he", "llo")


def test_question_mark_toggles_overlay() -> None:
    controller = make_controller("abc")

    press(controller, "?")

    assert controller.overlay_visible is True


def test_overlay_swallows_next_key() -> None:
    controller = make_controller("abc")
    buffer = controller.context.buffer
    press(controller, "?")

    result = controller.handle_key(KeyInput(key="x"))

    assert result.status == "overlay"
    assert controller.overlay_visible is False
    assert buffer.lines == ("abc",)
    assert controller.mode is EditorMode.NAVIGATION


def test_overlay_blocks_save_and_cancel() -> None:
    controller = make_controller("abc")

    press(controller, "?")
    assert controller.handle_key(ctrl("s")).outcome is None

    press(controller, "?")
    assert controller.handle_key(KeyInput(key="ESC")).outcome is None
    assert controller.overlay_visible is False


def test_question_mark_twice_hides_overlay() -> None:
    controller = make_controller()

    press(controller, "?", "?")

    assert controller.overlay_visible is False


def test_question_mark_is_typed_in_insertion() -> None:
    controller = make_controller()

    press(controller, "i", "?")

    assert controller.overlay_visible is False
    assert controller.context.buffer.lines == ("?",)


def test_bus_reports_mode_and_overlay_changes() -> None:
    controller = make_controller()
    events: List[tuple[str, object]] = []
    for name in ("mode.switch", "overlay.toggle"):
        controller.context.bus.subscribe(
            name, lambda payload, name=name: events.append((name, payload))
        )

    press(controller, "i", "ESC", "?", "q")

    assert events == [
        ("mode.switch", "insertion"),
        ("mode.switch", "navigation"),
        ("overlay.toggle", True),
        ("overlay.toggle", False),
    ]


def test_switch_mode_rejects_unknown_name() -> None:
    controller = make_controller()

    with pytest.raises(ValueError):
        controller.switch_mode("visual")


def test_ctrl_letter_is_ignored_in_navigation() -> None:
    controller = make_controller("abc", col=2)
    buffer = controller.context.buffer

    for key in ("h", "x", "D", "i"):
        result = controller.handle_key(ctrl(key))
        assert result.consumed is False

    assert buffer.lines == ("abc",)
    assert buffer.cursor == (0, 2)
    assert controller.mode is EditorMode.NAVIGATION
