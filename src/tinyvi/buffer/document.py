"""Line-oriented text storage and its mutation primitives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Sequence

from .validation import ensure_cursor


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """What ``delete_char_before`` did.

    ``join_column`` is only meaningful for ``"join"``: the length the previous
    line had before the current one was appended to it.
    """

    status: Literal["char", "join", "noop"]
    join_column: int = 0

    @property
    def joined(self) -> bool:
        return self.status == "join"


@dataclass(slots=True)
class BufferDocument:
    """Mutable list-of-lines model.

    The document always holds at least one line. It knows nothing about the
    cursor or the input mode: callers hand in positions that the cursor model
    already keeps in range, and every primitive re-checks them with
    ``ensure_cursor`` so a bad position fails loudly instead of corrupting the
    text.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        # Only "\n" (optionally preceded by "\r") ends a line.
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        return cls(_lines=lines, version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])

    def insert_char(self, row: int, col: int, char: str) -> None:
        if len(char) != 1 or char in "\r\n":
            raise ValueError(f"Expected a single non-newline character, got {char!r}")
        ensure_cursor(self, (row, col))
        line = self._lines[row]
        self._lines[row] = line[:col] + char + line[col:]
        self._touch()

    def delete_char_before(self, row: int, col: int) -> DeleteResult:
        ensure_cursor(self, (row, col))
        if col > 0:
            line = self._lines[row]
            self._lines[row] = line[: col - 1] + line[col:]
            self._touch()
            return DeleteResult(status="char")
        if row == 0:
            return DeleteResult(status="noop")

        current = self._lines.pop(row)
        previous = self._lines[row - 1]
        self._lines[row - 1] = previous + current
        self._touch()
        return DeleteResult(status="join", join_column=len(previous))

    def split_line(self, row: int, col: int) -> None:
        ensure_cursor(self, (row, col))
        line = self._lines[row]
        self._lines[row] = line[:col]
        self._lines.insert(row + 1, line[col:])
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


TextBuffer = BufferDocument

__all__ = ["BufferDocument", "TextBuffer", "DeleteResult"]
