"""Built-in keymap: the Normal/Insert transition table as data."""

from __future__ import annotations

from tinyvi.config import EditorMode

from .models import (
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
from .registry import KeymapRegistry

NORMAL = EditorMode.NORMAL.value
INSERT = EditorMode.INSERT.value


def default_actions() -> tuple[ActionRef, ...]:
    # Actions import the mode layer, which imports this package.
    from tinyvi.actions import core as core_actions
    from tinyvi.actions import edit as edit_actions
    from tinyvi.actions import motion as motion_actions

    return (
        ActionRef(
            id="core.enter_insert",
            handler=core_actions.enter_insert_mode,
            description="Enter insert mode",
        ),
        ActionRef(
            id="core.exit_to_normal",
            handler=core_actions.exit_to_normal_mode,
            description="Return to normal mode",
        ),
        ActionRef(
            id="core.quit",
            handler=core_actions.request_quit,
            description="Ask the host to end the session",
        ),
        ActionRef(
            id="motion.left",
            handler=motion_actions.move_left,
            description="Move cursor left",
        ),
        ActionRef(
            id="motion.right",
            handler=motion_actions.move_right,
            description="Move cursor right",
        ),
        ActionRef(
            id="motion.up",
            handler=motion_actions.move_up,
            description="Move cursor up",
        ),
        ActionRef(
            id="motion.down",
            handler=motion_actions.move_down,
            description="Move cursor down",
        ),
        ActionRef(
            id="edit.split_line",
            handler=edit_actions.split_line,
            description="Break the line at the cursor",
        ),
        ActionRef(
            id="edit.backspace",
            handler=edit_actions.backspace,
            description="Delete before the cursor, joining lines at column 0",
        ),
    )


def _bind(mode: str, key: str, action_id: str, description: str, *mods: str) -> Binding:
    stroke = KeyStroke(key, tuple(mods))
    suffix = stroke.token.lower().replace("+", "_")
    return Binding(
        id=f"{mode}.{suffix}",
        mode=mode,
        stroke=stroke,
        action_id=action_id,
        description=description,
    )


_ARROWS = (
    (LEFT, "motion.left", "Move cursor left"),
    (DOWN, "motion.down", "Move cursor down"),
    (UP, "motion.up", "Move cursor up"),
    (RIGHT, "motion.right", "Move cursor right"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind(NORMAL, "i", "core.enter_insert", "Enter insert mode"),
    _bind(NORMAL, "h", "motion.left", "Move cursor left"),
    _bind(NORMAL, "j", "motion.down", "Move cursor down"),
    _bind(NORMAL, "k", "motion.up", "Move cursor up"),
    _bind(NORMAL, "l", "motion.right", "Move cursor right"),
    _bind(NORMAL, "q", "core.quit", "Quit", CTRL),
    *(_bind(NORMAL, key, action, text) for key, action, text in _ARROWS),
    _bind(INSERT, ESCAPE, "core.exit_to_normal", "Leave insert mode"),
    _bind(INSERT, ENTER, "edit.split_line", "Break the line"),
    _bind(INSERT, BACKSPACE, "edit.backspace", "Delete backwards"),
    *(_bind(INSERT, key, action, text) for key, action, text in _ARROWS),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register the built-in actions and bindings for both modes."""

    for action in default_actions():
        registry.register_action(action)

    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
