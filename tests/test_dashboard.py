from __future__ import annotations

from pathlib import Path

from wgdeck.config import DeckConfig
from wgdeck.dashboard import Dashboard
from wgdeck.editor import EditSession, KeyInput, Outcome
from wgdeck.wireguard import CommandResult, ProfileStore, StatusLog, WireGuardControl


def make_dashboard(store: ProfileStore, runner, tmp_path: Path) -> Dashboard:
    control = WireGuardControl(store, runner=runner, use_sudo=False)
    return Dashboard(store, control, StatusLog(tmp_path / "status.log"))


def test_selection_stays_in_range(store, make_runner, tmp_path) -> None:
    dashboard = make_dashboard(store, make_runner(), tmp_path)

    assert dashboard.profiles == ["empty", "wg0"]
    assert dashboard.selected == "empty"

    dashboard.select_previous()
    assert dashboard.selected == "empty"

    dashboard.select_next()
    dashboard.select_next()
    assert dashboard.selected == "wg0"


def test_empty_directory_has_no_selection(tmp_path, make_runner) -> None:
    dashboard = make_dashboard(ProfileStore(tmp_path), make_runner(), tmp_path)

    assert dashboard.selected is None
    assert dashboard.toggle_selected() is None
    assert dashboard.open_editor() is None
    assert dashboard.details_for_selected() is None


def test_toggle_selected_brings_inactive_profile_up(store, make_runner, tmp_path) -> None:
    runner = make_runner(
        {
            "wg-quick up wg0": CommandResult(0, "up\n"),
            "wg show": CommandResult(0, "interface: wg0\n"),
        }
    )
    dashboard = make_dashboard(store, runner, tmp_path)
    dashboard.select_next()

    message = dashboard.toggle_selected()

    assert message == "✅ wg0 VPN up successfully\nup\n"
    assert dashboard.status_log.latest() == message
    assert dashboard.is_active("wg0")


def test_toggle_selected_brings_active_profile_down(store, make_runner, tmp_path) -> None:
    runner = make_runner({"wg show": CommandResult(0, "interface: wg0\n")})
    dashboard = make_dashboard(store, runner, tmp_path)
    dashboard.refresh_active()
    dashboard.select_next()

    dashboard.toggle_selected()

    assert ["wg-quick", "down", "wg0"] in runner.calls


def test_details_for_selected(store, make_runner, tmp_path) -> None:
    runner = make_runner({"wg show wg0": CommandResult(0, "interface: wg0\n")})
    dashboard = make_dashboard(store, runner, tmp_path)
    dashboard.select_next()

    assert dashboard.details_for_selected() == ("wg0", "interface: wg0\n")


def test_finish_edit_saves_profile(store, make_runner, tmp_path) -> None:
    dashboard = make_dashboard(store, make_runner(), tmp_path)
    dashboard.select_next()
    session = dashboard.open_editor()
    assert session is not None
    for key in ("o", *"DNS = 1.1.1.1", "ESC"):
        session.feed(KeyInput(key=key))

    outcome = session.feed(KeyInput(key="s", modifiers=("ctrl",)))
    message = dashboard.finish_edit(session, outcome)

    assert message == "Updated config for wg0"
    assert store.read("wg0") == "[Interface]\nDNS = 1.1.1.1\nAddress = 10.0.0.2/32"
    assert (tmp_path / "status.log").read_text().endswith("Updated config for wg0\n")


def test_finish_edit_cancelled_does_not_write(store, make_runner, tmp_path) -> None:
    dashboard = make_dashboard(store, make_runner(), tmp_path)
    session = EditSession("wg0", "changed")

    assert dashboard.finish_edit(session, Outcome.CANCELLED) is None
    assert store.read("wg0").startswith("[Interface]")
    assert dashboard.status_log.entries == ()


def test_finish_edit_write_failure_is_reported(store, make_runner, tmp_path) -> None:
    (tmp_path / "broken.conf").mkdir()
    dashboard = make_dashboard(store, make_runner(), tmp_path)
    session = EditSession("broken", "x")

    message = dashboard.finish_edit(session, Outcome.SAVED)

    assert message is not None
    assert message.startswith(f"Error saving file {tmp_path / 'broken.conf'}: ")
    assert dashboard.status_log.latest() == message


def test_from_config_wires_components(tmp_path) -> None:
    config = DeckConfig(
        config_dir=tmp_path, status_log=tmp_path / "status.log", use_sudo=False
    )

    dashboard = Dashboard.from_config(config)

    assert dashboard.store.config_dir == tmp_path
    assert dashboard.control.use_sudo is False
    assert dashboard.status_log.path == tmp_path / "status.log"
