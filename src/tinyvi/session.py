"""Editor session: the single owner of buffer, cursor, and mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from tinyvi.buffer import Buffer, Cursor, ensure_cursor, ensure_document
from tinyvi.config import EditorMode
from tinyvi.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from tinyvi.modes import InsertMode, KeyInput, ModeBus, ModeContext, NormalMode
from tinyvi.modes.mode_manager import ModeManager
from tinyvi.runtime import telemetry


class KeyOutcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class EditorView:
    """Immutable snapshot a renderer can hold on to between keys."""

    lines: Sequence[str]
    cursor: Cursor
    mode: EditorMode
    version: int

    @property
    def line_count(self) -> int:
        return len(self.lines)


def create_default_manager(buffer: Optional[Buffer] = None) -> ModeManager:
    """Build a ModeManager with Normal + Insert modes and the default keymap."""

    registry = KeymapRegistry(logger_name="tinyvi.keymaps")
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry, logger_name="tinyvi.keymaps")
    context = ModeContext(buffer=buffer or Buffer(), bus=ModeBus(), extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    return manager


class EditorSession:
    """Feeds one key at a time through the mode state machine.

    Every mutation of the buffer, the cursor, or the mode happens inside
    ``handle_key``; the invariants are re-checked once per key before control
    returns to the host.
    """

    def __init__(self, *, buffer: Optional[Buffer] = None) -> None:
        self._manager = create_default_manager(buffer)
        self.logger = telemetry.get_logger("tinyvi.session")

    @classmethod
    def from_text(cls, text: str) -> "EditorSession":
        return cls(buffer=Buffer.from_text(text))

    @property
    def buffer(self) -> Buffer:
        return self._manager.context.buffer

    @property
    def bus(self) -> ModeBus:
        return self._manager.context.bus

    @property
    def manager(self) -> ModeManager:
        return self._manager

    @property
    def mode(self) -> EditorMode:
        active = self._manager.active_name
        if active is None:  # pragma: no cover - modes are registered in __init__
            raise RuntimeError("No active mode registered")
        return active

    def handle_key(self, key: KeyInput) -> KeyOutcome:
        with telemetry.span(
            "session::handle_key",
            component="session",
            mode=self.mode,
            cursor=self.buffer.cursor,
            key=key.key,
        ) as handle:
            result = self._manager.handle_key(key)
            self._check_invariants()
            handle.add(status=result.status, cursor_after=self.buffer.cursor)

        if result.quit_requested:
            telemetry.record_event("session.quit", mode=self.mode, cursor=self.buffer.cursor)
            return KeyOutcome.QUIT
        return KeyOutcome.CONTINUE

    def view(self) -> EditorView:
        snapshot = self.buffer.snapshot()
        return EditorView(
            lines=snapshot.lines,
            cursor=snapshot.cursor,
            mode=self.mode,
            version=snapshot.version,
        )

    def _check_invariants(self) -> None:
        document = self.buffer.document
        ensure_document(document)
        ensure_cursor(document, self.buffer.cursor)


__all__ = ["EditorSession", "EditorView", "KeyOutcome", "create_default_manager"]
