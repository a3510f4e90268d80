"""Edit sessions consumed by the dashboard's editor screen."""

from wgdeck.modes import EditorMode, KeyInput, Outcome

from .session import EditSession, SessionView

__all__ = ["EditSession", "SessionView", "EditorMode", "KeyInput", "Outcome"]
