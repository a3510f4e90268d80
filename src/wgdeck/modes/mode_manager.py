"""Mode controller: owns the active mode and the help overlay flag."""

from __future__ import annotations

from typing import Dict, Optional, Type

from wgdeck.runtime import telemetry

from wgdeck.keymaps import KeymapRegistry, load_default_keymaps

from .base_mode import EditorMode, KeyInput, Mode, ModeContext, ModeResult
from .insertion_mode import InsertionMode
from .navigation_mode import NavigationMode


class ModeController:
    """Tracks Navigation/Insertion plus overlay visibility and dispatches keys.

    The overlay guard runs before any mode sees the key: while the overlay is
    shown in Navigation, every key only hides it.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        register_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.overlay_visible = False
        self.logger = telemetry.get_logger("wgdeck.modes")
        if keymap_registry is None:
            keymap_registry = load_default_keymaps(
                KeymapRegistry(logger_name="wgdeck.keymaps")
            )
        self.keymap_registry = keymap_registry
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("mode_controller", self)
        if register_defaults:
            self.register_mode(NavigationMode)
            self.register_mode(InsertionMode)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def mode(self) -> EditorMode:
        if self._active is None:
            raise RuntimeError("No active mode registered")
        return EditorMode(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        name = str(EditorMode(name).value)
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")

        if self.overlay_visible and mode.name == EditorMode.NAVIGATION:
            return self._dismiss_overlay()

        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        return self._after_mode_result(result)

    def _dismiss_overlay(self) -> ModeResult:
        self._set_overlay(False)
        return ModeResult(consumed=True, status="overlay", message="overlay_hidden")

    def _set_overlay(self, visible: bool) -> None:
        self.overlay_visible = visible
        self.context.bus.emit("overlay.toggle", visible)

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.toggle_overlay:
            self._set_overlay(not self.overlay_visible)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        if result.outcome is not None:
            telemetry.record_event(
                "editor.outcome", data={"outcome": result.outcome.value}
            )
        return result


__all__ = ["ModeController"]
