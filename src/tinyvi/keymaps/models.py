"""Dataclasses describing keystrokes, bindings, and action metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

# Logical names for the non-printable keys the editor understands.
ESCAPE = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
LEFT = "LEFT"
RIGHT = "RIGHT"
UP = "UP"
DOWN = "DOWN"

CTRL = "ctrl"
ALT = "alt"


def mode_key(mode: object) -> str:
    """Plain string key for a mode given as a name or an enum member."""

    if isinstance(mode, Enum):
        return str(mode.value)
    return str(mode)


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press a binding listens for."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+q"`` style notation."""

        head, sep, key = token.rpartition("+")
        if not sep or not head:
            return cls(token)
        if not key:
            # "ctrl++" binds the plus key itself
            head, key = head[:-1], "+"
        return cls(key, tuple(head.split("+")))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a keystroke in one mode with an action."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "mode", mode_key(self.mode))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "ESCAPE",
    "ENTER",
    "BACKSPACE",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "CTRL",
    "ALT",
    "KeyStroke",
    "ActionRef",
    "Binding",
    "mode_key",
    "normalize_modifiers",
]
