"""One profile edit: a buffer, its mode controller, and the feed contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wgdeck.buffer import Cursor, TextBuffer
from wgdeck.modes import EditorMode, KeyInput, ModeBus, ModeContext, ModeController
from wgdeck.modes import ModeResult, Outcome
from wgdeck.runtime import telemetry


@dataclass(frozen=True, slots=True)
class SessionView:
    """Everything a renderer needs after a ``feed`` call."""

    profile: str
    lines: tuple[str, ...]
    cursor: Cursor
    mode: EditorMode
    overlay_visible: bool
    dirty: bool


class EditSession:
    """Editor state for a single profile.

    The host feeds key events one at a time. ``feed`` returns ``None`` while
    editing continues and an ``Outcome`` once the user saves or cancels; on
    ``Outcome.SAVED`` the host persists ``text()`` under ``profile``.

    Precondition: ``feed`` must not be called again after it has returned an
    outcome.
    """

    def __init__(self, profile: str, text: str = "", *, bus: ModeBus | None = None):
        self.profile = profile
        self.buffer = TextBuffer.from_text(text, name=profile)
        self.bus = bus or ModeBus()
        self.context = ModeContext(buffer=self.buffer, bus=self.bus)
        self.controller = ModeController(self.context)
        self.last_result: Optional[ModeResult] = None
        telemetry.record_event(
            "session.open",
            data={"profile": profile, "lines": self.buffer.line_count},
        )

    @classmethod
    def open(cls, profile: str, text: str) -> "EditSession":
        return cls(profile, text)

    @property
    def mode(self) -> EditorMode:
        return self.controller.mode

    @property
    def overlay_visible(self) -> bool:
        return self.controller.overlay_visible

    def feed(self, key: KeyInput) -> Optional[Outcome]:
        self.last_result = self.controller.handle_key(key)
        outcome = self.last_result.outcome
        if outcome is not None:
            telemetry.record_event(
                "session.close",
                data={
                    "profile": self.profile,
                    "outcome": outcome.value,
                    "dirty": self.buffer.dirty,
                },
            )
        return outcome

    def text(self) -> str:
        return self.buffer.join_text()

    def view(self) -> SessionView:
        return SessionView(
            profile=self.profile,
            lines=self.buffer.lines,
            cursor=self.buffer.cursor,
            mode=self.mode,
            overlay_visible=self.overlay_visible,
            dirty=self.buffer.dirty,
        )


__all__ = ["EditSession", "SessionView"]
