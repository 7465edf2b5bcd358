"""Editor modes and display/configuration settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

ENV_PREFIX = "TINYVI_"

DEFAULT_FILENAME = "[No Name]"
DEFAULT_HELP_TEXT = " CTRL-Q: Quit | i: Insert Mode | ESC: Normal Mode"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"


@dataclass(frozen=True)
class ModeConfig:
    """How a mode presents itself on the status line."""

    label: str
    color: str


MODE_CONFIGS = {
    EditorMode.NORMAL: ModeConfig("Normal", "#98C379"),
    EditorMode.INSERT: ModeConfig("Insert", "#E8B86D"),
}


@dataclass(frozen=True)
class EditorSettings:
    """Host-facing settings; none of them change editing behaviour."""

    filename_placeholder: str = DEFAULT_FILENAME
    help_text: str = DEFAULT_HELP_TEXT
    show_line_numbers: bool = True


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Read ``TINYVI_*`` overrides from the environment."""

    env = os.environ if environ is None else environ
    return EditorSettings(
        filename_placeholder=env.get(f"{ENV_PREFIX}FILENAME", DEFAULT_FILENAME),
        help_text=env.get(f"{ENV_PREFIX}HELP_TEXT", DEFAULT_HELP_TEXT),
        show_line_numbers=_flag(env.get(f"{ENV_PREFIX}LINE_NUMBERS"), True),
    )


__all__ = [
    "EditorMode",
    "ModeConfig",
    "MODE_CONFIGS",
    "EditorSettings",
    "load_settings",
    "DEFAULT_FILENAME",
    "DEFAULT_HELP_TEXT",
]
