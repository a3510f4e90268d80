"""Adapter feeding Textual key events into an EditSession and refreshing UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from wgdeck.editor import EditSession, KeyInput, Outcome, SessionView
from wgdeck.keymaps.models import BACKSPACE, DOWN, ENTER, ESC, LEFT, RIGHT, UP

_NAMED_KEYS = {
    "escape": ESC,
    "enter": ENTER,
    "return": ENTER,
    "backspace": BACKSPACE,
    "left": LEFT,
    "right": RIGHT,
    "up": UP,
    "down": DOWN,
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual ``(key, character)`` pair into a ``KeyInput``.

    Returns ``None`` for keys the editor has no use for (function keys, tab).
    """

    *modifiers, base = key.split("+")
    named = _NAMED_KEYS.get(base)
    if named is not None:
        return KeyInput(key=named, modifiers=tuple(modifiers))
    if (
        "ctrl" not in modifiers
        and character
        and len(character) == 1
        and character.isprintable()
    ):
        return KeyInput(key=character, modifiers=tuple(modifiers), text=character)
    if len(base) == 1:
        return KeyInput(key=base, modifiers=tuple(modifiers))
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[SessionView], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an EditSession and its bus events to a Textual-friendly surface."""

    EVENTS = (
        "mode.switch",
        "overlay.toggle",
        "buffer.edit",
        "editor.save",
        "editor.cancel",
    )

    def __init__(self, session: EditSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[Outcome]:
        normalized = normalize_key(key, character)
        if normalized is None:
            self._log_state("key ignored", key=key)
            return None
        return self.feed(normalized)

    def feed(self, key: KeyInput) -> Optional[Outcome]:
        self._log_state("key ->", key=key.key, text=key.text, mods=key.modifiers)
        outcome = self.session.feed(key)
        result = self.session.last_result
        if result is not None and result.message:
            self.hooks.update_status(result.message)
        self._refresh_view()
        self._log_state(
            "result <-",
            status=result.status if result else None,
            outcome=outcome.value if outcome else None,
        )
        return outcome

    def _subscribe_events(self) -> None:
        for event in self.EVENTS:
            self.session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.session.view())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "profile": self.session.profile,
            "mode": self.session.mode.value,
            "cursor": buffer.cursor,
            "overlay": self.session.overlay_visible,
            "version": buffer.version,
        }


__all__ = ["EditorUIHooks", "TextualEditorAdapter", "normalize_key"]
