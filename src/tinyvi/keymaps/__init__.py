"""Keymap registry and the default Normal/Insert bindings."""

from .models import (
    ALT,
    BACKSPACE,
    CTRL,
    DOWN,
    ENTER,
    ESCAPE,
    LEFT,
    RIGHT,
    UP,
    ActionRef,
    Binding,
    KeyStroke,
)
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_BINDINGS, default_actions, load_default_keymaps

__all__ = [
    "ALT",
    "BACKSPACE",
    "CTRL",
    "DOWN",
    "ENTER",
    "ESCAPE",
    "LEFT",
    "RIGHT",
    "UP",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_BINDINGS",
    "default_actions",
    "load_default_keymaps",
]
