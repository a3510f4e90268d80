"""Executable Textual app that hosts the WireGuard dashboard."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from textual.app import App
from textual.screen import Screen

from wgdeck.config import DeckConfig
from wgdeck.dashboard import Dashboard
from wgdeck.runtime import telemetry

from .screens import ManagerScreen


class DeckApp(App[None]):
    """Textual UI over a ``Dashboard``."""

    TITLE = "wgdeck"

    CSS = """
	Screen {
		layout: vertical;
	}

	#profiles, #active, #latest-status, #status-log, #help, #details {
		border: round $accent;
		padding: 0 1;
	}

	#profiles {
		height: 1fr;
	}

	#active, #latest-status {
		height: 3;
	}

	#status-log, #help, #details {
		height: 1fr;
		overflow: auto;
	}

	#editor-buffer {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#editor-footer {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#editor-overlay {
		layer: overlay;
		display: none;
		width: 60%;
		height: auto;
		offset: 20% 30%;
		border: round $warning;
		background: $panel;
		padding: 0 1;
	}

	EditorScreen {
		layers: base overlay;
	}
	"""

    def __init__(
        self,
        config: Optional[DeckConfig] = None,
        *,
        dashboard: Optional[Dashboard] = None,
    ) -> None:
        super().__init__()
        self.config = config or DeckConfig.from_env()
        self.dashboard = dashboard or Dashboard.from_config(self.config)
        self.logger = telemetry.get_logger("wgdeck.app")

    def get_default_screen(self) -> Screen:
        return ManagerScreen(self.dashboard)

    def on_mount(self) -> None:
        telemetry.record_event(
            "app.start",
            data={
                "config_dir": str(self.config.config_dir),
                "profiles": len(self.dashboard.profiles),
            },
        )
        self._poll_active()
        self.set_interval(self.config.poll_interval, self._poll_active)

    def _poll_active(self) -> None:
        self.dashboard.refresh_active()
        screen = self.screen
        if isinstance(screen, ManagerScreen) and screen.is_mounted:
            screen.refresh_view()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage WireGuard profiles from the terminal.")
    parser.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding <profile>.conf files (env: WGDECK_CONFIG_DIR)",
    )
    parser.add_argument(
        "--status-log",
        default=None,
        help="File receiving status messages (env: WGDECK_STATUS_LOG)",
    )
    parser.add_argument(
        "--no-sudo",
        action="store_true",
        help="Run wg-quick without sudo",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=telemetry.PRESETS,
        default="tui",
        help="telelog preset (default: tui, which logs to a file only)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DeckConfig:
    return DeckConfig.from_env().with_overrides(
        config_dir=args.config_dir,
        status_log=args.status_log,
        use_sudo=False if args.no_sudo else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.telemetry_preset)
    app = DeckApp(build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
