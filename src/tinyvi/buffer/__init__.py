"""Text buffer, cursor model, and the invariants tying them together."""

from .buffer import Buffer, BufferView, Direction, Transaction
from .document import BufferDocument, DeleteResult, TextBuffer
from .state import BufferState, Cursor, CursorModel
from .validation import BufferValidationError, ensure_cursor, ensure_document

__all__ = [
    "Buffer",
    "BufferView",
    "Direction",
    "Transaction",
    "BufferDocument",
    "TextBuffer",
    "DeleteResult",
    "BufferState",
    "CursorModel",
    "Cursor",
    "BufferValidationError",
    "ensure_cursor",
    "ensure_document",
]
