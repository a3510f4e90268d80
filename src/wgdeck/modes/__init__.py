"""Mode controller and the Navigation/Insertion modes."""

from .base_mode import (
    EditorMode,
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    Outcome,
)
from .navigation_mode import NavigationMode
from .insertion_mode import InsertionMode
from .mode_manager import ModeController

__all__ = [
    "EditorMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "Outcome",
    "NavigationMode",
    "InsertionMode",
    "ModeController",
]
