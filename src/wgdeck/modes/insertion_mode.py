"""Insertion mode: printable keys type into the buffer."""

from __future__ import annotations

from wgdeck.actions.edit import insert_char
from wgdeck.runtime import telemetry

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, printable_text, require_keymap_registry
from .navigation_mode import execute_match


class InsertionMode(Mode):
    name = EditorMode.INSERTION.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("wgdeck.modes.insertion")
        self._registry = require_keymap_registry(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self._registry.lookup(self.name, key_to_token(key))
        if match is not None:
            return execute_match(self.context, match)

        # Control chords other than the bound ones never reach the buffer.
        text = printable_text(key)
        if text is not None:
            return insert_char(self.context, text)
        return ModeResult(consumed=False, status="miss", message="unhandled")
