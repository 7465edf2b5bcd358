"""Cursor position and its clamped movement rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .document import BufferDocument

Cursor = Tuple[int, int]  # (row, column)


@dataclass(slots=True)
class BufferState:
    """Mutable ``(row, col)`` cursor kept inside the bounds of a document.

    ``col`` may equal the line length: that is the insertion point past the
    last character. Movement never wraps between lines, and vertical moves
    clamp the column to the length of the line they land on.
    """

    cursor: Cursor = (0, 0)

    @property
    def row(self) -> int:
        return self.cursor[0]

    @property
    def col(self) -> int:
        return self.cursor[1]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def move_left(self, document: "BufferDocument") -> bool:
        del document
        row, col = self.cursor
        if col == 0:
            return False
        self.cursor = (row, col - 1)
        return True

    def move_right(self, document: "BufferDocument") -> bool:
        row, col = self.cursor
        if col >= document.line_length(row):
            return False
        self.cursor = (row, col + 1)
        return True

    def move_up(self, document: "BufferDocument") -> bool:
        row, col = self.cursor
        if row == 0:
            return False
        self.cursor = _clamped(document, row - 1, col)
        return True

    def move_down(self, document: "BufferDocument") -> bool:
        row, col = self.cursor
        if row >= document.line_count - 1:
            return False
        self.cursor = _clamped(document, row + 1, col)
        return True

    def advance_after_insert(self) -> None:
        row, col = self.cursor
        self.cursor = (row, col + 1)

    def advance_after_split(self) -> None:
        self.cursor = (self.cursor[0] + 1, 0)

    def retreat_after_join(self, previous_line_len: int) -> None:
        self.cursor = (self.cursor[0] - 1, previous_line_len)


def _clamped(document: "BufferDocument", row: int, col: int) -> Cursor:
    return (row, min(col, document.line_length(row)))


CursorModel = BufferState

__all__ = ["Cursor", "BufferState", "CursorModel"]
