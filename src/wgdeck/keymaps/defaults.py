"""Built-in key tables for the Navigation and Insertion modes."""

from __future__ import annotations

from .models import (
    BACKSPACE,
    DOWN,
    ENTER,
    ESC,
    LEFT,
    RIGHT,
    UP,
    ActionRef,
    Binding,
    KeyStroke,
)
from .registry import KeymapRegistry

NAVIGATION = "navigation"
INSERTION = "insertion"


def default_actions() -> tuple[ActionRef, ...]:
    # Imported lazily: the action modules depend on wgdeck.modes, which in
    # turn imports this package.
    from wgdeck.actions import core, edit, motion

    return (
        ActionRef("core.enter_insertion", core.enter_insertion, "Enter Insertion mode"),
        ActionRef("core.append", core.append_after_cursor, "Append after cursor"),
        ActionRef("core.open_line", core.open_line_below, "Open new line below"),
        ActionRef(
            "core.exit_to_navigation", core.exit_to_navigation, "Return to Navigation"
        ),
        ActionRef("core.toggle_overlay", core.toggle_overlay, "Toggle the cheatsheet"),
        ActionRef("core.save", core.save, "Save and exit"),
        ActionRef("core.cancel", core.cancel, "Cancel editing"),
        ActionRef("motion.left", motion.move_left, "Move cursor left"),
        ActionRef("motion.right", motion.move_right, "Move cursor right"),
        ActionRef("motion.up", motion.move_up, "Move cursor up"),
        ActionRef("motion.down", motion.move_down, "Move cursor down"),
        ActionRef("motion.left_wrap", motion.move_left_wrap, "Move left across lines"),
        ActionRef(
            "motion.right_wrap", motion.move_right_wrap, "Move right across lines"
        ),
        ActionRef("edit.newline", edit.insert_newline, "Split line at cursor"),
        ActionRef("edit.backspace", edit.backspace, "Delete before cursor"),
        ActionRef("edit.delete_char", edit.delete_char, "Delete character under cursor"),
        ActionRef("edit.delete_line", edit.delete_line, "Delete current line"),
    )


def _bind(mode: str, stroke: KeyStroke, action_id: str, description: str = "") -> Binding:
    return Binding(
        id=f"{mode}.{stroke.token}",
        mode=mode,
        stroke=stroke,
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind(NAVIGATION, KeyStroke("h"), "motion.left", "Move left"),
    _bind(NAVIGATION, KeyStroke(LEFT), "motion.left", "Move left"),
    _bind(NAVIGATION, KeyStroke("l"), "motion.right", "Move right"),
    _bind(NAVIGATION, KeyStroke(RIGHT), "motion.right", "Move right"),
    _bind(NAVIGATION, KeyStroke("k"), "motion.up", "Move up"),
    _bind(NAVIGATION, KeyStroke(UP), "motion.up", "Move up"),
    _bind(NAVIGATION, KeyStroke("j"), "motion.down", "Move down"),
    _bind(NAVIGATION, KeyStroke(DOWN), "motion.down", "Move down"),
    _bind(NAVIGATION, KeyStroke("i"), "core.enter_insertion", "Enter Insert mode"),
    _bind(NAVIGATION, KeyStroke("a"), "core.append", "Append (move right then insert)"),
    _bind(NAVIGATION, KeyStroke("o"), "core.open_line", "Open new line below"),
    _bind(NAVIGATION, KeyStroke("x"), "edit.delete_char", "Delete character under cursor"),
    _bind(NAVIGATION, KeyStroke("D"), "edit.delete_line", "Delete current line"),
    _bind(NAVIGATION, KeyStroke("?"), "core.toggle_overlay", "Toggle this help"),
    _bind(NAVIGATION, KeyStroke.ctrl("s"), "core.save", "Save and exit"),
    _bind(NAVIGATION, KeyStroke(ESC), "core.cancel", "Cancel editing"),
    _bind(INSERTION, KeyStroke(ESC), "core.exit_to_navigation", "Return to Normal mode"),
    _bind(INSERTION, KeyStroke(ENTER), "edit.newline", "Split line"),
    _bind(INSERTION, KeyStroke(BACKSPACE), "edit.backspace", "Delete before cursor"),
    _bind(INSERTION, KeyStroke(LEFT), "motion.left_wrap", "Move left"),
    _bind(INSERTION, KeyStroke(RIGHT), "motion.right_wrap", "Move right"),
    _bind(INSERTION, KeyStroke(UP), "motion.up", "Move up"),
    _bind(INSERTION, KeyStroke(DOWN), "motion.down", "Move down"),
    _bind(INSERTION, KeyStroke.ctrl("s"), "core.save", "Save and exit"),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    """Register the built-in actions and bindings into ``registry``."""

    for action in default_actions():
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)
    return registry


def cheatsheet(mode: str = NAVIGATION) -> list[tuple[str, str]]:
    """``(key, description)`` rows for the help overlay, grouped by action."""

    rows: dict[str, tuple[list[str], str]] = {}
    for binding in DEFAULT_BINDINGS:
        if binding.mode != mode:
            continue
        keys, _ = rows.setdefault(binding.action_id, ([], binding.description))
        keys.append(_display_key(binding.stroke))
    return [("/".join(keys), description) for keys, description in rows.values()]


_DISPLAY = {ESC: "Esc", LEFT: "←", RIGHT: "→", UP: "↑", DOWN: "↓", ENTER: "Enter"}


def _display_key(stroke: KeyStroke) -> str:
    key = _DISPLAY.get(stroke.key, stroke.key)
    if stroke.modifiers:
        return "+".join(m.capitalize() for m in stroke.modifiers) + f"+{key.upper()}"
    return key


__all__ = [
    "NAVIGATION",
    "INSERTION",
    "DEFAULT_BINDINGS",
    "default_actions",
    "load_default_keymaps",
    "cheatsheet",
]
