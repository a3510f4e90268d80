"""Textual screens: manager, status log, help, details, and the profile editor."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from wgdeck.dashboard import Dashboard
from wgdeck.editor import EditorMode, EditSession, Outcome, SessionView
from wgdeck.keymaps import cheatsheet

from .controller import EditorUIHooks, TextualEditorAdapter

MODE_LABELS = {EditorMode.NAVIGATION: "NORMAL", EditorMode.INSERTION: "INSERT"}

GLOBAL_HELP = """\
Global keybindings:
↑/k, ↓/j: Navigate
Enter: Connect/Disconnect VPN
D: VPN Details
E: Edit Config
S: View Status Log
W: Back to Manager (from the status log)
H: Show Help
Q: Quit

Press any key to return."""


def render_profiles(dashboard: Dashboard) -> Text:
    text = Text()
    if not dashboard.profiles:
        text.append(f"No profiles found in {dashboard.store.config_dir}", style="dim")
        return text
    for index, profile in enumerate(dashboard.profiles):
        styles = []
        if dashboard.is_active(profile):
            styles.append("green")
        if index == dashboard.selected_index:
            styles.append("bold reverse")
        if index:
            text.append("\n")
        text.append(profile, style=" ".join(styles))
    return text


def render_buffer(view: SessionView) -> Text:
    """Buffer lines with the cursor cell shown in reverse video."""

    text = Text()
    row, col = view.cursor
    for index, line in enumerate(view.lines):
        if index:
            text.append("\n")
        if index != row:
            text.append(line)
            continue
        text.append(line[:col])
        text.append(line[col : col + 1] or " ", style="reverse")
        text.append(line[col + 1 :])
    return text


def render_footer(view: SessionView) -> str:
    row, col = view.cursor
    return f"Mode: {MODE_LABELS[view.mode]} | Line: {row + 1} Col: {col + 1}"


def render_cheatsheet() -> str:
    rows = cheatsheet()
    width = max(len(keys) for keys, _ in rows)
    lines = ["Editor Cheatsheet (Normal mode):"]
    lines += [f"{keys.ljust(width)} : {description}" for keys, description in rows]
    lines.append("Press any key (in Normal mode) to hide this help.")
    return "\n".join(lines)


class ManagerScreen(Screen[None]):
    BINDINGS = [
        Binding("k,up", "select_previous", "Up", show=False),
        Binding("j,down", "select_next", "Down", show=False),
        Binding("enter", "toggle", "Connect/Disconnect"),
        Binding("d", "details", "Details"),
        Binding("e", "edit", "Edit Config"),
        Binding("s", "status", "Status"),
        Binding("h", "help", "Help"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.dashboard = dashboard

    def compose(self) -> ComposeResult:
        with Vertical(id="manager"):
            yield Static(id="profiles")
            yield Static(id="active")
            yield Static(id="latest-status")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#profiles").border_title = "WireGuard Manager"
        self.query_one("#active").border_title = "Active Connections"
        self.query_one("#latest-status").border_title = "Latest Status"
        self.refresh_view()

    def refresh_view(self) -> None:
        dashboard = self.dashboard
        self.query_one("#profiles", Static).update(render_profiles(dashboard))
        self.query_one("#active", Static).update(", ".join(dashboard.active) or "None")
        self.query_one("#latest-status", Static).update(dashboard.status_log.latest())

    def action_select_previous(self) -> None:
        self.dashboard.select_previous()
        self.refresh_view()

    def action_select_next(self) -> None:
        self.dashboard.select_next()
        self.refresh_view()

    def action_toggle(self) -> None:
        self.dashboard.toggle_selected()
        self.refresh_view()

    def action_details(self) -> None:
        details = self.dashboard.details_for_selected()
        if details is not None:
            self.app.push_screen(DetailsScreen(*details))

    def action_edit(self) -> None:
        session = self.dashboard.open_editor()
        if session is None:
            return
        path = self.dashboard.store.path_for(session.profile)
        self.app.push_screen(
            EditorScreen(session, path), partial(self._finish_edit, session)
        )

    def action_status(self) -> None:
        self.app.push_screen(StatusScreen(self.dashboard))

    def action_help(self) -> None:
        self.app.push_screen(HelpScreen())

    def _finish_edit(self, session: EditSession, outcome: Optional[Outcome]) -> None:
        self.dashboard.finish_edit(session, outcome)
        self.refresh_view()


class StatusScreen(Screen[None]):
    BINDINGS = [
        Binding("w", "app.pop_screen", "Manager"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.dashboard = dashboard

    def compose(self) -> ComposeResult:
        yield Static(id="status-log")
        yield Footer()

    def on_mount(self) -> None:
        log = self.query_one("#status-log", Static)
        log.border_title = "Status Log"
        log.update("\n".join(self.dashboard.status_log.entries) or "No actions yet")


class _AnyKeyScreen(Screen[None]):
    """Screen that closes on the next key press."""

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss()


class HelpScreen(_AnyKeyScreen):
    def compose(self) -> ComposeResult:
        help_text = Static(GLOBAL_HELP, id="help")
        help_text.border_title = "Help"
        yield help_text


class DetailsScreen(_AnyKeyScreen):
    def __init__(self, interface: str, details: str) -> None:
        super().__init__()
        self.interface = interface
        self.details = details

    def compose(self) -> ComposeResult:
        body = Static(Text(self.details or "(no output)"), id="details")
        body.border_title = f"VPN Details: {self.interface} (press any key to return)"
        yield body


class EditorScreen(Screen[Outcome]):
    """Hosts one EditSession; dismisses with its outcome."""

    def __init__(self, session: EditSession, path: Path) -> None:
        super().__init__()
        self.session = session
        self.path = path
        self.adapter: TextualEditorAdapter | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="editor"):
            yield Static(id="editor-buffer")
            yield Static(id="editor-footer")
        yield Static(render_cheatsheet(), id="editor-overlay")

    def on_mount(self) -> None:
        buffer_widget = self.query_one("#editor-buffer", Static)
        buffer_widget.border_title = f"Editing {self.path} (Ctrl+S: Save, Esc: Cancel)"
        overlay = self.query_one("#editor-overlay", Static)
        overlay.border_title = "Editor Help"
        hooks = EditorUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self.log.debug,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if self.adapter is None:
            return
        outcome = self.adapter.handle_textual_key(event.key, character=event.character)
        if outcome is not None:
            self.dismiss(outcome)

    def _update_view(self, view: SessionView) -> None:
        self.query_one("#editor-buffer", Static).update(render_buffer(view))
        self.query_one("#editor-footer", Static).update(render_footer(view))
        self.query_one("#editor-overlay", Static).display = view.overlay_visible

    def _update_status(self, status: str) -> None:
        self.query_one("#editor-buffer", Static).border_subtitle = status


__all__ = [
    "DetailsScreen",
    "EditorScreen",
    "HelpScreen",
    "ManagerScreen",
    "StatusScreen",
    "render_buffer",
    "render_cheatsheet",
    "render_footer",
    "render_profiles",
]
