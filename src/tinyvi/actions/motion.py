"""Cursor motions; available in every mode."""

from __future__ import annotations

from tinyvi.buffer import Direction
from tinyvi.keymaps.resolver import ResolutionMatch
from tinyvi.modes.base_mode import ModeContext, ModeResult


def _move(context: ModeContext, direction: Direction) -> ModeResult:
    before = context.buffer.cursor
    moved = context.buffer.move(direction)
    if not moved:
        return ModeResult(consumed=True, status="motion_blocked", message=direction)
    context.bus.emit(
        "cursor.move",
        {"direction": direction, "from": before, "to": context.buffer.cursor},
    )
    return ModeResult(consumed=True, status="motion", message=direction)


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "left")


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "right")


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "up")


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "down")


__all__ = ["move_left", "move_right", "move_up", "move_down"]
