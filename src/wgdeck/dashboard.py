"""UI-independent state behind the manager screen."""

from __future__ import annotations

from typing import Optional

from wgdeck.config import DeckConfig
from wgdeck.editor import EditSession, Outcome
from wgdeck.runtime import telemetry
from wgdeck.wireguard import ProfileStore, StatusLog, WireGuardControl


class Dashboard:
    """Profile list, selection, active interfaces, and the status log.

    Screens call into this object and re-render from its attributes; it never
    touches the terminal itself.
    """

    def __init__(
        self,
        store: ProfileStore,
        control: WireGuardControl,
        status_log: StatusLog,
    ) -> None:
        self.store = store
        self.control = control
        self.status_log = status_log
        self.profiles: list[str] = []
        self.active: list[str] = []
        self.selected_index = 0
        self.reload_profiles()

    @classmethod
    def from_config(cls, config: DeckConfig) -> "Dashboard":
        store = ProfileStore(config.config_dir)
        control = WireGuardControl(
            store,
            use_sudo=config.use_sudo,
            wg_binary=config.wg_binary,
            wg_quick_binary=config.wg_quick_binary,
        )
        return cls(store, control, StatusLog(config.status_log))

    def reload_profiles(self) -> list[str]:
        self.profiles = self.store.list_profiles()
        if self.selected_index >= len(self.profiles):
            self.selected_index = max(0, len(self.profiles) - 1)
        return self.profiles

    def refresh_active(self) -> list[str]:
        self.active = self.control.active_interfaces()
        return self.active

    @property
    def selected(self) -> Optional[str]:
        if not self.profiles:
            return None
        return self.profiles[self.selected_index]

    def is_active(self, profile: str) -> bool:
        return profile in self.active

    def select_previous(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1

    def select_next(self) -> None:
        if self.selected_index + 1 < len(self.profiles):
            self.selected_index += 1

    def toggle_selected(self) -> Optional[str]:
        profile = self.selected
        if profile is None:
            return None
        message = self.control.toggle(profile, self.is_active(profile))
        self.status_log.append(message)
        self.refresh_active()
        return message

    def details_for_selected(self) -> Optional[tuple[str, str]]:
        profile = self.selected
        if profile is None:
            return None
        return profile, self.control.details(profile)

    def open_editor(self) -> Optional[EditSession]:
        profile = self.selected
        if profile is None:
            return None
        return EditSession(profile, self.store.read(profile))

    def finish_edit(self, session: EditSession, outcome: Optional[Outcome]) -> Optional[str]:
        """Persist a saved session and report the result in the status log.

        A write failure becomes a status message; it never propagates.
        """

        if outcome is not Outcome.SAVED:
            telemetry.record_event("editor.discarded", data={"profile": session.profile})
            return None
        path = self.store.path_for(session.profile)
        try:
            self.store.write(session.profile, session.text())
        except OSError as exc:
            message = f"Error saving file {path}: {exc}"
        else:
            message = f"Updated config for {session.profile}"
        self.status_log.append(message)
        return message


__all__ = ["Dashboard"]
