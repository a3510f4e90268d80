"""Dashboard settings resolved from CLI flags, ``WGDECK_*`` variables, and OS defaults."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "WGDECK_"
DEFAULT_POLL_INTERVAL = 1.0

_CONFIG_DIRS = {
    "win32": r"C:\ProgramData\wgdeck\wireguard",
    "darwin": "/usr/local/etc/wireguard",
}
_STATUS_LOGS = {
    "win32": r"C:\ProgramData\wgdeck\wgdeck.log",
    "darwin": "/usr/local/var/log/wgdeck.log",
}


def default_config_dir(platform: str = sys.platform) -> Path:
    return Path(_CONFIG_DIRS.get(platform, "/etc/wireguard"))


def default_status_log(platform: str = sys.platform) -> Path:
    return Path(_STATUS_LOGS.get(platform, "/var/log/wgdeck.log"))


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _positive_float(raw: Optional[str], fallback: float) -> float:
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    return value if value > 0 else fallback


@dataclass(frozen=True, slots=True)
class DeckConfig:
    config_dir: Path
    status_log: Path
    use_sudo: bool = True
    wg_binary: str = "wg"
    wg_quick_binary: str = "wg-quick"
    poll_interval: float = DEFAULT_POLL_INTERVAL

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        platform: str = sys.platform,
    ) -> "DeckConfig":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}") or None

        return cls(
            config_dir=Path(get("CONFIG_DIR") or default_config_dir(platform)),
            status_log=Path(get("STATUS_LOG") or default_status_log(platform)),
            use_sudo=_flag(get("USE_SUDO"), True),
            wg_binary=get("WG") or "wg",
            wg_quick_binary=get("WG_QUICK") or "wg-quick",
            poll_interval=_positive_float(get("POLL_INTERVAL"), DEFAULT_POLL_INTERVAL),
        )

    def with_overrides(self, **changes: object) -> "DeckConfig":
        """Return a copy with every non-``None`` value in ``changes`` applied."""

        applied = {key: value for key, value in changes.items() if value is not None}
        for key in ("config_dir", "status_log"):
            if key in applied:
                applied[key] = Path(str(applied[key]))
        return replace(self, **applied)


__all__ = ["DeckConfig", "default_config_dir", "default_status_log"]
