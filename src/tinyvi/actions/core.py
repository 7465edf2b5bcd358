"""Core action implementations shared across modes."""

from __future__ import annotations

from tinyvi.config import EditorMode
from tinyvi.keymaps.resolver import ResolutionMatch
from tinyvi.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=EditorMode.INSERT, message="enter_insert"
    )


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(
        consumed=True, switch_to=EditorMode.NORMAL, message="exit_insert"
    )


def request_quit(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.bus.emit("session.quit", {"cursor": context.buffer.cursor})
    return ModeResult(consumed=True, status="quit", message="quit_requested")


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "request_quit",
]
