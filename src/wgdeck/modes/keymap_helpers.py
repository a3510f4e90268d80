"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from wgdeck.keymaps.models import CTRL, SHIFT, KeyStroke, normalize_modifiers
from wgdeck.keymaps.registry import KeymapRegistry

from .base_mode import KeyInput, ModeContext


def key_to_stroke(key: KeyInput) -> KeyStroke:
    modifiers = normalize_modifiers(key.modifiers)
    if len(key.key) == 1:
        # Shift is already folded into the character itself ("D", "?").
        modifiers = tuple(m for m in modifiers if m != SHIFT)
    return KeyStroke(key.key, modifiers)


def key_to_token(key: KeyInput) -> str:
    return key_to_stroke(key).token


def is_control_chord(key: KeyInput) -> bool:
    return CTRL in normalize_modifiers(key.modifiers)


def printable_text(key: KeyInput) -> str | None:
    """Return the character to insert for ``key``, if it types one."""

    if is_control_chord(key):
        return None
    text = key.text
    if text is None and len(key.key) == 1:
        text = key.key
    if text and len(text) == 1 and text.isprintable():
        return text
    return None


def require_keymap_registry(context: ModeContext) -> KeymapRegistry:
    registry = context.extras.get("keymap_registry")
    if not isinstance(registry, KeymapRegistry):
        raise RuntimeError("ModeContext.extras missing 'keymap_registry'")
    return registry


__all__ = [
    "key_to_stroke",
    "key_to_token",
    "is_control_chord",
    "printable_text",
    "require_keymap_registry",
]
