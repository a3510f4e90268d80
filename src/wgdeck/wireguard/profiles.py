"""Profile files (``<name>.conf``) in the WireGuard configuration directory."""

from __future__ import annotations

from pathlib import Path

from wgdeck.runtime import telemetry

PROFILE_SUFFIX = ".conf"


class ProfileStore:
    def __init__(self, config_dir: Path) -> None:
        self.config_dir = Path(config_dir)

    def list_profiles(self) -> list[str]:
        try:
            entries = list(self.config_dir.iterdir())
        except OSError as exc:
            _report("profiles.list_failed", path=self.config_dir, error=exc)
            return []
        return sorted(
            entry.name[: -len(PROFILE_SUFFIX)]
            for entry in entries
            if entry.name.endswith(PROFILE_SUFFIX) and entry.is_file()
        )

    def path_for(self, profile: str) -> Path:
        return self.config_dir / f"{profile}{PROFILE_SUFFIX}"

    def read(self, profile: str) -> str:
        """Profile text, or ``""`` when the file cannot be read."""

        try:
            return self.path_for(profile).read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            _report("profiles.read_failed", profile=profile, error=exc)
            return ""

    def write(self, profile: str, text: str) -> Path:
        """Persist ``text``; ``OSError`` propagates to the caller."""

        path = self.path_for(profile)
        with telemetry.span(
            "profiles::write",
            component="wireguard",
            metadata={"profile": profile, "bytes": len(text)},
        ):
            path.write_text(text, encoding="utf-8")
        return path


def _report(event: str, **data: object) -> None:
    telemetry.record_event(
        event, level="warning", data={key: str(value) for key, value in data.items()}
    )


__all__ = ["PROFILE_SUFFIX", "ProfileStore"]
