"""Thin wrappers around the ``wg`` and ``wg-quick`` command-line tools."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

from wgdeck.runtime import telemetry

from .profiles import ProfileStore


@dataclass(frozen=True, slots=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


CommandRunner = Callable[[Sequence[str]], CommandResult]


def run_command(args: Sequence[str]) -> CommandResult:
    """Run ``args`` and capture its output; a missing binary is exit 127."""

    with telemetry.span(
        "wireguard::run", component="wireguard", metadata={"args": " ".join(args)}
    ) as handle:
        try:
            completed = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            handle.add_metadata("error", exc)
            return CommandResult(returncode=127, stderr=str(exc))
        handle.add_metadata("returncode", completed.returncode)
        return CommandResult(completed.returncode, completed.stdout, completed.stderr)


def parse_interfaces(output: str) -> list[str]:
    interfaces = []
    for line in output.splitlines():
        if "interface:" not in line:
            continue
        parts = line.split()
        if len(parts) > 1:
            interfaces.append(parts[1])
    return interfaces


class WireGuardControl:
    """Brings profiles up/down and reports interface state."""

    def __init__(
        self,
        profiles: ProfileStore,
        *,
        runner: CommandRunner = run_command,
        use_sudo: bool = True,
        wg_binary: str = "wg",
        wg_quick_binary: str = "wg-quick",
    ) -> None:
        self.profiles = profiles
        self.runner = runner
        self.use_sudo = use_sudo
        self.wg_binary = wg_binary
        self.wg_quick_binary = wg_quick_binary

    def active_interfaces(self) -> list[str]:
        result = self.runner([self.wg_binary, "show"])
        if not result.ok:
            return []
        return parse_interfaces(result.stdout)

    def details(self, interface: str) -> str:
        result = self.runner([self.wg_binary, "show", interface])
        return result.stdout if result.ok else result.stderr

    def toggle(self, profile: str, active: bool) -> str:
        """Bring ``profile`` down if ``active`` else up; returns a status line."""

        action = "down" if active else "up"
        if action == "up":
            refusal = self._check_profile(profile)
            if refusal:
                return refusal

        command = [self.wg_quick_binary, action, profile]
        if self.use_sudo:
            command.insert(0, "sudo")
        result = self.runner(command)
        telemetry.record_event(
            "wireguard.toggle",
            data={"profile": profile, "action": action, "returncode": result.returncode},
        )
        if result.ok:
            return f"✅ {profile} VPN {action} successfully\n{result.stdout}"
        return f"❌ Failed to {action} VPN {profile}:\n{result.stderr}"

    def _check_profile(self, profile: str) -> str | None:
        path = self.profiles.path_for(profile)
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return f"❌ Failed to read configuration file {path}."
        if not content.strip():
            return f"❌ Failed to start VPN: configuration file {path} is empty."
        return None


__all__ = [
    "CommandResult",
    "CommandRunner",
    "WireGuardControl",
    "parse_interfaces",
    "run_command",
]
