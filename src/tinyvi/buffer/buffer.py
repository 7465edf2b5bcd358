"""Buffer facade pairing the line document with its cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Literal, Optional, Sequence

from tinyvi.runtime import telemetry

from .document import BufferDocument, DeleteResult
from .state import BufferState, Cursor

Direction = Literal["left", "right", "up", "down"]


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    lines: Sequence[str]
    cursor: Cursor

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class Buffer:
    """Content edits that keep the cursor in step with the text.

    The document and the cursor are only ever mutated through the methods
    below, which is what keeps ``0 <= col <= len(line)`` true between keys.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
        )

    def insert_char(self, char: str) -> None:
        with Transaction(self, "insert_char"):
            row, col = self.state.cursor
            self.document.insert_char(row, col, char)
            self.state.advance_after_insert()

    def split_line(self) -> None:
        with Transaction(self, "split_line"):
            row, col = self.state.cursor
            self.document.split_line(row, col)
            self.state.advance_after_split()

    def backspace(self) -> DeleteResult:
        with Transaction(self, "backspace") as tx:
            row, col = self.state.cursor
            result = self.document.delete_char_before(row, col)
            if result.joined:
                self.state.retreat_after_join(result.join_column)
            else:
                self.state.move_left(self.document)
            tx.outcome = result.status
        return result

    def move(self, direction: Direction) -> bool:
        if direction == "left":
            return self.state.move_left(self.document)
        if direction == "right":
            return self.state.move_right(self.document)
        if direction == "up":
            return self.state.move_up(self.document)
        if direction == "down":
            return self.state.move_down(self.document)
        raise ValueError(f"Unknown direction '{direction}'")


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.outcome: str = "ok"
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self.cursor_before: Cursor | None = None

    def __enter__(self) -> "Transaction":
        self.cursor_before = self.buffer.state.cursor
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            component="buffer",
            cursor=self.cursor_before,
            buffer=self.buffer.name,
        )
        self._handle = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._handle is not None and exc_type is None:
            self._handle.add(
                cursor_after=self.buffer.state.cursor, outcome=self.outcome
            )
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferView", "Direction", "Transaction"]
