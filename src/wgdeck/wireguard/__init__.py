"""WireGuard profiles, command wrappers, and the status log."""

from .control import (
    CommandResult,
    CommandRunner,
    WireGuardControl,
    parse_interfaces,
    run_command,
)
from .profiles import PROFILE_SUFFIX, ProfileStore
from .status_log import EMPTY_STATUS, StatusLog

__all__ = [
    "CommandResult",
    "CommandRunner",
    "WireGuardControl",
    "parse_interfaces",
    "run_command",
    "PROFILE_SUFFIX",
    "ProfileStore",
    "EMPTY_STATUS",
    "StatusLog",
]
