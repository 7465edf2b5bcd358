"""Insert-mode edits: typing, line splits, and backspace."""

from __future__ import annotations

from tinyvi.keymaps.resolver import ResolutionMatch
from tinyvi.modes.base_mode import ModeContext, ModeResult


def _emit_edit(context: ModeContext, label: str, **extra: object) -> None:
    payload = {
        "label": label,
        "cursor": context.buffer.cursor,
        "line_count": context.buffer.document.line_count,
        **extra,
    }
    context.bus.emit("buffer.edit", payload)


def insert_char(context: ModeContext, text: str) -> ModeResult:
    """Insert ``text`` (one character) at the cursor and step past it."""

    context.buffer.insert_char(text)
    _emit_edit(context, "insert_char", text=text)
    return ModeResult(consumed=True, status="insert_char", message=text)


def split_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.buffer.split_line()
    _emit_edit(context, "split_line")
    return ModeResult(consumed=True, status="split_line")


def backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    result = context.buffer.backspace()
    if result.status == "noop":
        return ModeResult(consumed=True, status="backspace_noop")
    _emit_edit(context, "backspace", deleted=result.status)
    return ModeResult(consumed=True, status="backspace", message=result.status)


__all__ = ["insert_char", "split_line", "backspace"]
