"""Fixed key tables binding keystrokes to editor actions."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats, ResolutionMatch
from .defaults import DEFAULT_BINDINGS, cheatsheet, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
    "DEFAULT_BINDINGS",
    "cheatsheet",
    "load_default_keymaps",
]
