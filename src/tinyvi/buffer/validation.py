"""Bounds checks shared by the text buffer and the editor session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Cursor

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .document import BufferDocument


class BufferValidationError(RuntimeError):
    """Raised when a row/column escapes the buffer.

    Positions are only produced by the cursor model, so this always signals a
    programming error and is never handled inside the editor core.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(document: "BufferDocument", cursor: Cursor) -> Cursor:
    row, col = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    line = document.get_line(row)
    if col < 0 or col > len(line):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def ensure_document(document: "BufferDocument") -> None:
    if document.line_count < 1:
        raise BufferValidationError("Buffer has no lines")


__all__ = ["BufferValidationError", "ensure_cursor", "ensure_document"]
