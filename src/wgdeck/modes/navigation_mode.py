"""Navigation mode: cursor movement and single-key commands."""

from __future__ import annotations

from wgdeck.runtime import telemetry

from wgdeck.keymaps.registry import ResolutionMatch

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_registry


class NavigationMode(Mode):
    name = EditorMode.NAVIGATION.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("wgdeck.modes.navigation")
        self._registry = require_keymap_registry(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self._registry.lookup(self.name, key_to_token(key))
        if match is None:
            return ModeResult(consumed=False, status="miss", message="unhandled")
        return execute_match(self.context, match)


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)
